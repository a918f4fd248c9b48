"""Source positions.

A :class:`Cursor` walks a source buffer one character at a time and keeps the
row and line start needed to report where each lexeme begins. Rows and columns
are zero-based internally and displayed one-based.


File: position.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourcePosition:
    """
    A (filename, row, column) triple captured from a cursor.
    """
    filename: str = ""
    row: int = 0
    column: int = 0

    def display(self) -> str:
        """
        Return the position as ``file:row:column`` with one-based numbers.
        """
        return f"{self.filename}:{self.row + 1}:{self.column + 1}"

    def __str__(self) -> str:
        return self.display()


class Cursor:
    """
    Character cursor over a source buffer.
    """
    def __init__(self, filename: str, source: str):
        """
        Initialize a cursor at the start of ``source``.

        Parameters:
            filename (str): Display name used in positions.
            source (str): The text to walk.
        """
        self.filename = filename
        self.source = source
        self.offset = 0
        self.line_start = 0
        self.row = 0

    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self, ahead: int = 0) -> str:
        """
        Return the character ``ahead`` places past the cursor, or an empty
        string past the end of the buffer.
        """
        index = self.offset + ahead
        if index < len(self.source):
            return self.source[index]
        return ""

    def advance(self):
        """
        Move one character to the right. Passing over a newline starts a new row.
        """
        if self.at_end():
            return
        passed = self.source[self.offset]
        self.offset += 1
        if passed == "\n":
            self.line_start = self.offset
            self.row += 1

    def current_position(self) -> SourcePosition:
        return SourcePosition(self.filename, self.row, self.offset - self.line_start)
