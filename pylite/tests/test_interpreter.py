"""
Tests for the interpreter's token stream.
"""
import pytest

from pylite.exceptions import LexError, ScriptError
from pylite.interpreter import Interpreter, evaluate
from pylite.lexer import TokenKind
from pylite.position import SourcePosition
from pylite.values import Integer, Text


def test_empty_buffer():
    interpreter = Interpreter("<test>").load("")
    token = interpreter.next_token()
    assert not token
    assert token.kind == TokenKind.NONE
    assert interpreter.run("   \n# only a comment\n") == []


def test_next_token_skips_void_calls(capsys):
    interpreter = Interpreter("<test>").load("print(1)\n42")
    token = interpreter.next_token()
    assert token.value == Integer(42)
    assert token.position == SourcePosition("<test>", 1, 0)
    assert capsys.readouterr().out == "1\n"
    assert not interpreter.next_token()


def test_stream_kinds():
    tokens = evaluate('x 7 "s" ( )')
    assert [t.kind for t in tokens] == [
        TokenKind.NAME,
        TokenKind.NUMBER,
        TokenKind.STRING,
        TokenKind.OPEN_PAREN,
        TokenKind.CLOSE_PAREN,
    ]


def test_tokens_are_lazy(capsys):
    interpreter = Interpreter("<test>").load("print(1) 5 print(2)")
    stream = interpreter.tokens()
    assert capsys.readouterr().out == ""
    assert next(stream).value == Integer(5)
    assert capsys.readouterr().out == "1\n"
    assert list(stream) == []
    assert capsys.readouterr().out == "2\n"


def test_sessions_are_independent():
    interpreter = Interpreter("<test>")
    assert [t.value for t in interpreter.run("1 + 1")] == [Integer(2)]
    with pytest.raises(LexError):
        interpreter.run('"open')
    assert [t.value for t in interpreter.run('"ok"')] == [Text("ok")]


def test_every_error_is_a_script_error():
    for source in ['"open', "1 / 0", '1 + "a"', "1 = 1", "print 1", "@"]:
        with pytest.raises(ScriptError) as exc:
            evaluate(source, "main.py")
        assert exc.value.position is not None
        assert "main.py:1:" in str(exc.value)


def test_example_program(capsys):
    source = (
        "# greet\n"
        'print("Hello, " + "world")\n'
        'print(typeof(2 + 3 * 4) " " 2 + 3 * 4)\n'
        "40 + 2\n"
    )
    tokens = evaluate(source, "hello.py")
    assert [str(t) for t in tokens] == ["hello.py:4:1 42"]
    assert capsys.readouterr().out == "Hello, world\ninteger 20\n"
