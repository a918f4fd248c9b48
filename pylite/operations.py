"""Binary operator identifiers.

The scanner only knows operator characters; this enum gives them names so the
folding tables and error messages do not deal in raw characters.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of binary operators, keyed by their source character.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    ASSIGN = "="

    def __str__(self) -> str:
        """
        Return the operator character for nicer messages.
        """
        return self.value


__all__ = ["Op"]
