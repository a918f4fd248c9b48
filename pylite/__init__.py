"""pylite: a scanning evaluator for a tiny scripting subset.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from pylite.builtin import BuiltinRegistry, default_builtins
from pylite.exceptions import (
    LexError,
    ScriptError,
    ScriptSyntaxError,
    ScriptTypeError,
    ScriptZeroDivisionError,
    UnsupportedOperationError,
)
from pylite.interpreter import Interpreter, evaluate
from pylite.lexer import Scanner, Token, TokenKind, tokenize
from pylite.position import Cursor, SourcePosition
from pylite.values import Integer, RuntimeValue, Text

__all__ = [
    "BuiltinRegistry",
    "Cursor",
    "Integer",
    "Interpreter",
    "LexError",
    "RuntimeValue",
    "Scanner",
    "ScriptError",
    "ScriptSyntaxError",
    "ScriptTypeError",
    "ScriptZeroDivisionError",
    "SourcePosition",
    "Text",
    "Token",
    "TokenKind",
    "UnsupportedOperationError",
    "default_builtins",
    "evaluate",
    "tokenize",
]
