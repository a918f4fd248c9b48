"""Runtime values.

The language has exactly two runtime kinds, a 32-bit signed integer and a text
string. They form the closed union :data:`RuntimeValue`; code that operates on
values matches on both variants and lets anything else fall through to
``assert_never``.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import assert_never

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def wrap_i32(n: int) -> int:
    """
    Wrap an arbitrary Python integer to 32-bit two's complement.
    """
    n &= 0xFFFFFFFF
    if n > INT32_MAX:
        n -= 1 << 32
    return n


@dataclass(frozen=True)
class Integer:
    """32-bit signed integer value."""
    value: int

    def __post_init__(self):
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"Integer value {self.value} does not fit in 32 bits")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    """Text string value."""
    value: str

    def __str__(self) -> str:
        return self.value


RuntimeValue = Integer | Text


def type_name(value: RuntimeValue) -> str:
    """
    Return the language-level name of a value's variant.
    """
    match value:
        case Integer():
            return "integer"
        case Text():
            return "text"
        case _:
            assert_never(value)


__all__ = ["INT32_MIN", "INT32_MAX", "Integer", "Text", "RuntimeValue", "type_name", "wrap_i32"]
