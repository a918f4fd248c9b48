"""
Tests for the command line entry point.
"""
from pathlib import Path

import pyl


def write_script(tmp_path: Path, source: str) -> Path:
    path = tmp_path / "hello.py"
    path.write_text(source, encoding="utf-8")
    return path


def test_run_script_prints_values_with_positions(tmp_path, capsys):
    path = write_script(tmp_path, 'print("hi")\n1 + 2\n')
    assert pyl.run_script(str(path)) == 0
    assert capsys.readouterr().out == "hi\nhello.py:2:1 3\n"


def test_run_script_reports_errors(tmp_path, capsys):
    path = write_script(tmp_path, '\n  "abc')
    assert pyl.run_script(str(path)) == 1
    out = capsys.readouterr().out
    assert out == "LexError: Unterminated string literal at hello.py:2:3\n"


def test_run_script_missing_and_empty_files(tmp_path, capsys):
    assert pyl.run_script(str(tmp_path / "missing.py")) == 1
    assert "File not found" in capsys.readouterr().out

    path = write_script(tmp_path, "")
    assert pyl.run_script(str(path)) == 1
    assert "File is empty" in capsys.readouterr().out


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("PYLITEDEBUG", "1")
    path = write_script(tmp_path, "1 + 2")
    assert pyl.run_script(str(path)) == 0
    out = capsys.readouterr().out
    assert "Lexemes:" in out
    assert "Token(NUMBER" in out
    assert out.endswith("hello.py:1:1 3\n")


def test_main_usage(capsys):
    assert pyl.main(["pyl", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert pyl.main(["pyl", "a.py", "b.py"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_repl_continues_after_errors(capsys, monkeypatch):
    lines = iter(["1 + 1", "1 / 0", 'print("x")', "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    pyl.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert "2" in out
    assert "ScriptZeroDivisionError: Division by zero at <stdin>:1:3" in out
    assert "x" in out


def test_repl_stops_on_eof(capsys, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert pyl.main(["pyl"]) == 0
    assert "REPL" in capsys.readouterr().out


def test_run_script_wraps_huge_literals(tmp_path, capsys):
    path = write_script(tmp_path, "1" + "0" * 5000 + " + 5\n")
    assert pyl.run_script(str(path)) == 0
    assert capsys.readouterr().out == "hello.py:1:1 5\n"
