"""
dropmachine パッケージ

3 つの同心リング（MIDDLE, INNER, OUTER）を持つドロップマシンの語彙を提供します。
"""

from dropmachine.enums.enums import Ring
from dropmachine.exceptions import DropMachineError, UnknownMemberError
from dropmachine.utils.hardware_spec import DROP_MACHINE_SPEC, DropMachineSpec

__version__ = "1.0.0"

# 公開するAPIを明示的に定義
__all__ = [
    "Ring",
    "DropMachineError",
    "UnknownMemberError",
    "DropMachineSpec",
    "DROP_MACHINE_SPEC",
]
