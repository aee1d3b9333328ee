"""ARM32 platform facts: register names and immediate/offset encodability."""

from __future__ import annotations

__all__ = [
    "TMP_REG_NO",
    "SP_REG_NO",
    "FP_REG_NO",
    "LX_REG_NO",
    "MAX_REG_NUM",
    "MAX_USABLE_REG_NUM",
    "REG_NAMES",
    "is_const_expr",
    "is_disp",
    "is_reg",
]

# Register borrowed for temporary values such as large immediates.
TMP_REG_NO = 10
SP_REG_NO = 13
FP_REG_NO = 11
LX_REG_NO = 14

MAX_REG_NUM = 16
# General registers r0-r10 available to the allocator.
MAX_USABLE_REG_NUM = 11

REG_NAMES = (
    "r0",
    "r1",
    "r2",
    "r3",
    "r4",
    "r5",
    "r6",
    "r7",
    "r8",
    "r9",
    "r10",
    "fp",
    "ip",
    "sp",
    "lr",
    "pc",
)

_MASK32 = 0xFFFFFFFF


def _rotate_left_two(num: int) -> int:
    return ((num << 2) | (num >> 30)) & _MASK32


def _encodable(num: int) -> bool:
    value = num & _MASK32
    for _ in range(16):
        if value <= 0xFF:
            return True
        value = _rotate_left_two(value)
    return False


def is_const_expr(num: int) -> bool:
    """Return True if ``num`` or ``-num`` is an 8-bit value rotated by an even amount."""
    return _encodable(num) or _encodable(-num)


def is_disp(num: int) -> bool:
    """Return True if ``num`` is a valid load/store offset."""
    return -4096 < num < 4096


def is_reg(name: str) -> bool:
    """Return True if ``name`` is an ARM32 register name."""
    return name in REG_NAMES