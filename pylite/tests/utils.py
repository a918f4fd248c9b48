"""
Utility functions shared across pylite tests.
"""
from pylite.interpreter import Interpreter
from pylite.lexer import Scanner, Token


def run_source(source: str, builtins=None) -> list[Token]:
    """
    Evaluate source code and return the produced tokens.
    """
    return Interpreter("<test>", builtins).run(source)


def run_values(source: str, builtins=None) -> list:
    """
    Evaluate source code and return the plain Python values it produced.
    """
    return [token.value.value for token in run_source(source, builtins)]


def scan_all(source: str) -> list[Token]:
    """
    Scan source code into flat lexemes up to the sentinel.
    """
    scanner = Scanner("<test>", source)
    tokens = []
    token = scanner.next_lexeme()
    while token:
        tokens.append(token)
        token = scanner.next_lexeme()
    return tokens
