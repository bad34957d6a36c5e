from __future__ import annotations

import enum
import logging
from typing import Tuple

from dropmachine.exceptions import UnknownMemberError

LOGGER = logging.getLogger(__name__)


class Ring(enum.Enum):
    """ドロップマシンの 3 つのリング。

    各メンバーの値は ``(index, drop_count)`` の組。宣言順は MIDDLE, INNER, OUTER で、
    中心からの物理的な並びを意味するものではない。

    Attributes:
        index (int): リングのインデックス (0‒2)。
        drop_count (int): リング上のドロップ位置の数。
    """

    MIDDLE = (0, 1)
    INNER = (1, 6)
    OUTER = (2, 13)

    def __init__(self, index: int, drop_count: int) -> None:
        self._index = index
        self._drop_count = drop_count

    @property
    def index(self) -> int:
        return self._index

    @property
    def drop_count(self) -> int:
        return self._drop_count

    def get_index(self) -> int:
        """リングのインデックスを返す。"""
        return self._index

    def get_drop_count(self) -> int:
        """リング上のドロップ位置の数を返す。"""
        return self._drop_count

    @classmethod
    def members(cls) -> Tuple[Ring, ...]:
        """全メンバーを宣言順で返す。"""
        return tuple(cls)

    @classmethod
    def from_name(cls, name: str) -> Ring:
        """メンバー名（大文字小文字を区別）から Ring を引く。

        Args:
            name (str): ``"MIDDLE"`` / ``"INNER"`` / ``"OUTER"`` のいずれか。

        Returns:
            Ring: 対応するメンバー。

        Raises:
            UnknownMemberError: 名前がどのメンバーにも一致しない場合。
        """
        if isinstance(name, str) and name in cls.__members__:
            return cls.__members__[name]
        LOGGER.debug("Ring lookup failed for name %r", name)
        raise UnknownMemberError(name, cls.__members__)

    @classmethod
    def from_index(cls, index: int) -> Ring:
        """リングインデックスから Ring を引く。

        Raises:
            UnknownMemberError: 該当するインデックスのリングが無い場合。
        """
        for ring in cls:
            if ring.index == index:
                return ring
        LOGGER.debug("Ring lookup failed for index %r", index)
        raise UnknownMemberError(index, cls.__members__)
