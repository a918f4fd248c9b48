"""Interpreter.

This is a single-pass evaluator layered over the scanner. It reads flat
lexemes and evaluates as it goes: literals are folded with any trailing
binary operators and builtin names are dispatched as calls. What comes out is
a stream of already-evaluated tokens.

1. Folding
After a number or string literal the interpreter asks the scanner whether an
operator follows. If one does, the operator and the next operand are consumed
and folded into a new token, and the check repeats. Chains therefore fold
strictly left to right: ``2 + 3 * 4`` is ``20``. The meaning of each operator
lives in :mod:`pylite.folding`.

2. Calls
A name registered in the interpreter's :class:`BuiltinRegistry` must be
followed by ``(``. Arguments are evaluated one token at a time (so nested calls
run before the outer one) until the closing ``)``. There are no separators:
adjacent tokens are adjacent arguments. The builtin's result replaces the name
in the stream; void builtins return the sentinel.

3. Stream
:meth:`Interpreter.next_token` skips the sentinel produced by a top-level void
call, so the sentinel it returns always means end of input.

4. Error Handling
Every failure is raised as a :class:`ScriptError` subclass carrying the source
position. Nothing is recovered here; the caller decides whether to stop.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterator

from pylite.builtin import BuiltinRegistry, default_builtins
from pylite.exceptions import ScriptSyntaxError
from pylite.folding import fold_binary
from pylite.lexer import Scanner, Token, TokenKind
from pylite.operations import Op
from pylite.position import SourcePosition


class Interpreter:
    """Scanning evaluator for pylite."""

    def __init__(self, file: str, builtins: BuiltinRegistry | None = None):
        """
        Initialize the interpreter.

        The registry is frozen here; register extra builtins before
        constructing the interpreter.
        """
        self.file = file
        self.builtins = (builtins if builtins is not None else default_builtins()).freeze()
        self.scanner = Scanner(file, "")

    def load(self, source: str) -> "Interpreter":
        """
        Start a new session over ``source``.
        """
        self.scanner = Scanner(self.file, source)
        return self

    def next_token(self) -> Token:
        """
        Evaluate up to the next token that carries a value.

        Returns:
            Token: The next evaluated token, or the sentinel at end of input.
        """
        while True:
            token = self._evaluate()
            if token or self.scanner.exhausted():
                return token

    def tokens(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if not token:
                return
            yield token

    def run(self, source: str) -> list[Token]:
        """
        Evaluate a whole buffer and return the produced tokens.
        """
        self.load(source)
        return list(self.tokens())

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _evaluate(self) -> Token:
        """
        Evaluate one token. Returns the sentinel for a void call as well as
        at end of input.
        """
        lexeme = self.scanner.next_lexeme()
        match lexeme.kind:
            case TokenKind.NUMBER | TokenKind.STRING:
                return self._fold(lexeme)
            case TokenKind.NAME if str(lexeme.value) in self.builtins:
                return self._call(lexeme)
            case _:
                return lexeme

    def _fold(self, literal: Token) -> Token:
        result = literal
        while True:
            char = self.scanner.peek_operator()
            if char is None:
                return result
            char, op_position = self.scanner.take_operator()
            op = Op(char)
            rhs = self._operand(op, op_position)
            value = fold_binary(op, result.value, rhs.value, op_position)
            result = Token.of(value, literal.position)

    def _operand(self, op: Op, op_position: SourcePosition) -> Token:
        """
        Fetch the right operand of ``op``: a literal or a call with a value.
        """
        lexeme = self.scanner.next_lexeme()
        match lexeme.kind:
            case TokenKind.NUMBER | TokenKind.STRING:
                return lexeme
            case TokenKind.NAME if str(lexeme.value) in self.builtins:
                result = self._call(lexeme)
                if result:
                    return result
                raise ScriptSyntaxError(
                    f"Expected operand after '{op}', "
                    f"but '{lexeme.value}' returned no value",
                    lexeme.position,
                )
            case _:
                raise ScriptSyntaxError(f"Expected operand after '{op}'", op_position)

    def _call(self, name_token: Token) -> Token:
        name = str(name_token.value)
        open_paren = self.scanner.next_lexeme()
        if open_paren.kind is not TokenKind.OPEN_PAREN:
            position = open_paren.position if open_paren else self.scanner.position()
            raise ScriptSyntaxError(f"Expected '(' after builtin name '{name}'", position)

        args: list[Token] = []
        while True:
            if self.scanner.exhausted():
                raise ScriptSyntaxError(
                    f"Expected ')' to close call to '{name}'",
                    self.scanner.position(),
                )
            arg = self._evaluate()
            if arg.kind is TokenKind.CLOSE_PAREN:
                break
            if arg:
                args.append(arg)

        return self.builtins.call(name, args, name_token.position)


def evaluate(source: str, file: str = "<string>", builtins: BuiltinRegistry | None = None) -> list[Token]:
    """
    Evaluate ``source`` in a fresh interpreter and return the produced tokens.
    """
    return Interpreter(file, builtins).run(source)
