"""Binary folding rules.

Folding combines a left operand, an operator and a right operand into a new
runtime value. The rules are strictly pairwise: the interpreter calls
:func:`fold_binary` once per operator, left to right, so there is no
precedence. Keeping the tables here leaves the interpreter's control flow
independent of what each operator means.

1. Integers
``+``, ``-`` and ``*`` wrap to 32 bits. ``/`` truncates toward zero, wraps the
single overflowing case (``INT32_MIN / -1``) and raises on a zero divisor.

2. Text
``+`` concatenates. ``-``, ``*`` and ``/`` have no meaning for text and raise.

3. Everything else
``=`` is reserved and never folds. Mixing an integer with text raises.


File: folding.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import assert_never

from pylite.exceptions import (
    ScriptTypeError,
    ScriptZeroDivisionError,
    UnsupportedOperationError,
)
from pylite.operations import Op
from pylite.position import SourcePosition
from pylite.values import Integer, RuntimeValue, Text, type_name, wrap_i32


def fold_binary(
    op: Op,
    lhs: RuntimeValue,
    rhs: RuntimeValue,
    position: SourcePosition | None = None,
) -> RuntimeValue:
    """
    Apply ``op`` to two runtime values.

    Args:
        op (Op): The operator.
        lhs (RuntimeValue): Left operand.
        rhs (RuntimeValue): Right operand.
        position (SourcePosition): Position of the operator, for errors.

    Returns:
        RuntimeValue: The folded value.

    Raises:
        UnsupportedOperationError: For ``=`` and text ``-``/``*``/``/``.
        ScriptTypeError: If the operands are of different variants.
        ScriptZeroDivisionError: On integer division by zero.
    """
    if op is Op.ASSIGN:
        raise UnsupportedOperationError(op, position, "(assignment is not implemented)")

    match lhs, rhs:
        case Integer(value=a), Integer(value=b):
            return Integer(_fold_integers(op, a, b, position))
        case Text(value=a), Text(value=b):
            return Text(_fold_text(op, a, b, position))
        case (Integer() | Text()), (Integer() | Text()):
            raise ScriptTypeError(
                f"Incompatible operand types for '{op}': "
                f"{type_name(lhs)} and {type_name(rhs)}",
                position,
            )
        case _:
            raise ScriptTypeError(f"Invalid operands {lhs!r} and {rhs!r}", position)


def _fold_integers(op: Op, a: int, b: int, position: SourcePosition | None) -> int:
    match op:
        case Op.ADD:
            return wrap_i32(a + b)
        case Op.SUB:
            return wrap_i32(a - b)
        case Op.MUL:
            return wrap_i32(a * b)
        case Op.DIV:
            if b == 0:
                raise ScriptZeroDivisionError("Division by zero", position)
            quotient = abs(a) // abs(b)
            if (a < 0) != (b < 0):
                quotient = -quotient
            return wrap_i32(quotient)
        case Op.ASSIGN:
            raise UnsupportedOperationError(op, position, "(assignment is not implemented)")
        case _:
            assert_never(op)


def _fold_text(op: Op, a: str, b: str, position: SourcePosition | None) -> str:
    match op:
        case Op.ADD:
            return a + b
        case Op.SUB | Op.MUL | Op.DIV:
            raise UnsupportedOperationError(op, position, "on text operands")
        case Op.ASSIGN:
            raise UnsupportedOperationError(op, position, "(assignment is not implemented)")
        case _:
            assert_never(op)
