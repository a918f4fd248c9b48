"""Builtin functions.

A :class:`BuiltinRegistry` maps names to callables taking the evaluated
argument tokens and the call's position and returning a single token (the
sentinel for void builtins). Registries are plain values handed to the
interpreter, so tests and independent sessions never share mutable state.


File: builtin.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable

from pylite.exceptions import ScriptTypeError
from pylite.lexer import Token
from pylite.position import SourcePosition
from pylite.values import Text, type_name

Builtin = Callable[[list[Token], SourcePosition], Token]


class BuiltinRegistry:
    """Name to builtin mapping, read-only once frozen."""

    def __init__(self, builtins: dict[str, Builtin] | None = None):
        self._builtins: dict[str, Builtin] = dict(builtins or {})
        self._frozen = False

    def register(self, name: str, func: Builtin) -> Builtin:
        """
        Register ``func`` under ``name``.

        Raises:
            RuntimeError: If the registry is frozen.
            KeyError: If ``name`` is already registered.
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{name}': builtin registry is frozen")
        if name in self._builtins:
            raise KeyError(f"Builtin '{name}' is already registered")
        self._builtins[name] = func
        return func

    def freeze(self) -> "BuiltinRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: str) -> bool:
        return name in self._builtins

    def __len__(self) -> int:
        return len(self._builtins)

    def names(self) -> list[str]:
        return sorted(self._builtins)

    def call(self, name: str, args: list[Token], position: SourcePosition) -> Token:
        """
        Invoke the builtin ``name``.

        Raises:
            KeyError: If no builtin is registered under ``name``.
        """
        try:
            func = self._builtins[name]
        except KeyError as e:
            raise KeyError(f"Unknown builtin '{name}'") from e
        return func(args, position)


def builtin_print(args: list[Token], _position: SourcePosition) -> Token:
    """Write every argument with no separator, then a newline."""
    print("".join(str(arg.value) for arg in args))
    return Token()


def builtin_typeof(args: list[Token], position: SourcePosition) -> Token:
    """Return the variant name of the single argument."""
    if len(args) != 1:
        raise ScriptTypeError(
            f"typeof() expects exactly one argument, got {len(args)}",
            position,
        )
    return Token.of(Text(type_name(args[0].value)), position)


def default_builtins() -> BuiltinRegistry:
    """
    Build a fresh, unfrozen registry holding ``print`` and ``typeof``.
    """
    return BuiltinRegistry({
        "print": builtin_print,
        "typeof": builtin_typeof,
    })


__all__ = ["Builtin", "BuiltinRegistry", "builtin_print", "builtin_typeof", "default_builtins"]
