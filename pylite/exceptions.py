"""Errors.

Every error raised while scanning or folding carries the source position it
was raised at. The concrete classes also derive from the matching builtin
exception so callers can catch either family.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from pylite.position import SourcePosition


class ScriptError(Exception):
    """
    Base class for errors raised by the scanner and evaluator.
    """
    def __init__(self, message: str, position: SourcePosition | None = None):
        self.position = position
        if position is not None:
            message += f" at {position}"
        super().__init__(message)


class LexError(ScriptError):
    """
    Error for malformed lexemes (unterminated strings, unknown characters).
    """


class ScriptSyntaxError(ScriptError, SyntaxError):
    """
    Error for malformed call syntax or a missing operand.
    """


class ScriptTypeError(ScriptError, TypeError):
    """
    Error for operand variant mismatches and bad builtin arguments.
    """


class ScriptZeroDivisionError(ScriptError, ZeroDivisionError):
    """
    Error for integer division by zero.
    """


class UnsupportedOperationError(ScriptError, NotImplementedError):
    """
    Error for operators with no implementation for their operands.
    """
    def __init__(self, op, position: SourcePosition | None = None, detail: str | None = None):
        self.op = op
        message = f"Unsupported operation '{op}'"
        if detail is not None:
            message += f" {detail}"
        super().__init__(message, position)
