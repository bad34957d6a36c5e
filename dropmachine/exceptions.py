"""dropmachine パッケージ共通の例外定義。"""

from typing import Iterable


class DropMachineError(Exception):
    """dropmachine が送出する例外の基底クラス。"""


class UnknownMemberError(DropMachineError, KeyError):
    """存在しないリング名（またはインデックス）で参照された場合に送出される。

    `Ring[...]` の参照失敗と同じく ``KeyError`` としても捕捉できる。

    Attributes:
        name: 解決できなかったキー。
        available: 有効なメンバー名の一覧。
    """

    def __init__(self, name: object, available: Iterable[str]) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(f"Unknown ring {name!r}. Available rings: {list(self.available)}")

    def __str__(self) -> str:
        # KeyError はメッセージを repr で包むため素の文字列を返す
        return str(self.args[0])
