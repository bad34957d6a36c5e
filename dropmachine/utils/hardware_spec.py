from dataclasses import dataclass

from dropmachine.enums.enums import Ring


@dataclass(frozen=True)
class DropMachineSpec:
    """ドロップマシン本体の不変なハードウェア仕様"""

    rings_per_machine: int = 3

    @property
    def total_drop_count(self) -> int:
        """全リングのドロップ位置数の合計。"""
        return sum(ring.drop_count for ring in Ring)


DROP_MACHINE_SPEC = DropMachineSpec()
