"""Scanner for pylite.

The scanner walks the source one character at a time and produces a flat
stream of lexemes: parentheses, string literals, integer literals and names.
It performs no evaluation of its own. The interpreter drives it and uses the
operator lookahead (:meth:`Scanner.peek_operator`) to fold binary expressions
while the stream is being read.

1. Trivia
Whitespace is skipped before every lexeme. A ``#`` starts a comment that runs
to the end of its line, newline included; skipping repeats until something
significant or the end of the text is reached.

2. Literals
Strings are delimited by ``"`` and may contain the escapes ``\\"``, ``\\\\``,
``\\n`` and ``\\t``; other backslash pairs are kept verbatim. Integers are
maximal runs of ASCII digits and wrap to 32-bit two's complement.

3. Errors
An unterminated string or a character that starts no lexeme raises
:class:`LexError` at the offending position.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from pylite.exceptions import LexError
from pylite.position import Cursor, SourcePosition
from pylite.values import Integer, RuntimeValue, Text, wrap_i32

OPERATOR_CHARS = "+-*/="

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


class TokenKind(Enum):
    """
    Closed set of token kinds. ``NONE`` marks end of input or "no value".
    """
    NONE = 0
    NAME = 1
    STRING = 2
    NUMBER = 3
    OPEN_PAREN = 4
    CLOSE_PAREN = 5


class Token:
    """
    Represents a token with a kind, a runtime value and a source position.
    """
    __slots__ = ("kind", "value", "position")

    def __init__(
        self,
        kind: TokenKind = TokenKind.NONE,
        value: RuntimeValue = Text(""),
        position: SourcePosition = SourcePosition(),
    ):
        """
        Initialize a new token. With no arguments this builds the sentinel.

        Parameters:
            kind (TokenKind): The token kind.
            value (RuntimeValue): The token value.
            position (SourcePosition): Where the token starts.
        """
        self.kind = kind
        self.value = value
        self.position = position

    @classmethod
    def of(cls, value: RuntimeValue, position: SourcePosition) -> "Token":
        """
        Build a literal token whose kind follows its value's variant.
        """
        kind = TokenKind.NUMBER if isinstance(value, Integer) else TokenKind.STRING
        return cls(kind, value, position)

    def __bool__(self) -> bool:
        return self.kind is not TokenKind.NONE

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.position) == (other.kind, other.value, other.position)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.position))

    def __str__(self) -> str:
        if not self:
            return ""
        return f"{self.position} {self.value}"

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.name}, {self.value!r}, {self.position})"


class Scanner:
    """
    Produces flat lexemes from one source buffer.
    """
    def __init__(self, filename: str, source: str):
        self.cursor = Cursor(filename, source)

    def skip_trivia(self):
        """
        Skip whitespace and ``#`` comments up to the next significant character.
        """
        cursor = self.cursor
        while True:
            while not cursor.at_end() and cursor.peek().isspace():
                cursor.advance()
            if cursor.peek() != "#":
                return
            while not cursor.at_end() and cursor.peek() != "\n":
                cursor.advance()
            cursor.advance()

    def exhausted(self) -> bool:
        """
        Return True if nothing but trivia is left.
        """
        self.skip_trivia()
        return self.cursor.at_end()

    def position(self) -> SourcePosition:
        return self.cursor.current_position()

    def next_lexeme(self) -> Token:
        """
        Scan the next lexeme.

        Returns:
            Token: The lexeme, or the sentinel at end of text.

        Raises:
            LexError: On an unterminated string or an unexpected character.
        """
        self.skip_trivia()
        cursor = self.cursor
        if cursor.at_end():
            return Token()

        first = cursor.peek()
        position = cursor.current_position()

        if first == "(":
            cursor.advance()
            return Token(TokenKind.OPEN_PAREN, Text(first), position)
        if first == ")":
            cursor.advance()
            return Token(TokenKind.CLOSE_PAREN, Text(first), position)
        if first == '"':
            return self._scan_string(position)
        if first.isascii() and first.isdigit():
            return self._scan_number(position)
        if first.isascii() and first.isalpha():
            return self._scan_name(position)

        raise LexError(f"Unexpected character {first!r}", position)

    def peek_operator(self) -> str | None:
        """
        Look past trivia, without consuming it, for a binary operator.

        Returns:
            str | None: The operator character, or None if something else (or
            nothing) follows.
        """
        cursor = self.cursor
        ahead = 0
        while True:
            while cursor.peek(ahead).isspace():
                ahead += 1
            if cursor.peek(ahead) != "#":
                break
            while cursor.peek(ahead) not in ("", "\n"):
                ahead += 1
        char = cursor.peek(ahead)
        if char and char in OPERATOR_CHARS:
            return char
        return None

    def take_operator(self) -> tuple[str, SourcePosition]:
        """
        Consume the trivia and the operator found by :meth:`peek_operator`.
        """
        cursor = self.cursor
        self.skip_trivia()
        position = cursor.current_position()
        char = cursor.peek()
        if not char or char not in OPERATOR_CHARS:
            raise LexError(f"Expected operator, found {char!r}", position)
        cursor.advance()
        return char, position

    def _scan_string(self, position: SourcePosition) -> Token:
        cursor = self.cursor
        cursor.advance()
        chars: list[str] = []
        while True:
            if cursor.at_end():
                raise LexError("Unterminated string literal", position)
            char = cursor.peek()
            cursor.advance()
            if char == '"':
                break
            if char == "\\":
                if cursor.at_end():
                    raise LexError("Unterminated string literal", position)
                escaped = cursor.peek()
                cursor.advance()
                chars.append(ESCAPES.get(escaped, "\\" + escaped))
                continue
            chars.append(char)
        return Token(TokenKind.STRING, Text("".join(chars)), position)

    def _scan_number(self, position: SourcePosition) -> Token:
        cursor = self.cursor
        value = 0
        # Out of range literals wrap rather than saturate.
        while cursor.peek().isascii() and cursor.peek().isdigit():
            value = (value * 10 + int(cursor.peek())) & 0xFFFFFFFF
            cursor.advance()
        return Token(TokenKind.NUMBER, Integer(wrap_i32(value)), position)

    def _scan_name(self, position: SourcePosition) -> Token:
        cursor = self.cursor
        chars: list[str] = []
        while cursor.peek().isascii() and cursor.peek().isalnum():
            chars.append(cursor.peek())
            cursor.advance()
        return Token(TokenKind.NAME, Text("".join(chars)), position)


def tokenize(source: str, filename: str = "<string>") -> list[Token]:
    """
    Scan a whole buffer into its flat lexemes, operators excluded.

    Operators are consumed but not returned; the interpreter is the one that
    gives them meaning.
    """
    scanner = Scanner(filename, source)
    tokens: list[Token] = []
    while True:
        token = scanner.next_lexeme()
        if not token:
            return tokens
        tokens.append(token)
        while scanner.peek_operator() is not None:
            scanner.take_operator()
