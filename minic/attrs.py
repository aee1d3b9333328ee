"""Attribute records passed from the lexer to the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["BasicType", "DigitIntAttr", "DigitRealAttr", "VarIdAttr", "TypeAttr"]


class BasicType(IntEnum):
    """Basic value types known to the front end."""

    NONE = 0  # the node carries no type
    VOID = 1  # only used as a function return type
    INT = 2
    FLOAT = 3
    MAX = 4  # unknown or other type


@dataclass(frozen=True)
class DigitIntAttr:
    """An unsigned integer literal with its source line."""

    val: int
    lineno: int


@dataclass(frozen=True)
class DigitRealAttr:
    """A floating-point literal with its source line."""

    val: float
    lineno: int


@dataclass(frozen=True)
class VarIdAttr:
    """An identifier (variable or function name) with its source line."""

    id: str
    lineno: int


@dataclass(frozen=True)
class TypeAttr:
    """A type keyword with its source line."""

    type: BasicType
    lineno: int