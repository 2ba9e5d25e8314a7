# runeparse/parser/errors.py
from __future__ import annotations
from typing import Any

from .cursor import Cursor


class InvalidInputError(ValueError):
    """Input bytes are not valid UTF-8. Raised while building the parser."""
    def __init__(self, offset: int, reason: str):
        super().__init__(f"invalid UTF-8 input at byte {offset}: {reason}")
        self.offset = offset
        self.reason = reason


class ExpectedParseError(SyntaxError):
    """
    A matcher did not match.

    - expected : the matcher that failed (rune, literal, function or object)
    - cursor   : where matching stopped
    - string   : the text found there, from the start of the attempt up to
                 and including the rune at `cursor`
    """
    def __init__(self, expected: Any, description: str, cursor: Cursor, string: str):
        self.expected = expected
        self.description = description
        self.cursor = cursor
        self.string = string
        super().__init__(
            f"parse error at {cursor.line}:{cursor.column}: "
            f"expected {description} but got {string!r}"
        )

    @property
    def line(self) -> int:
        return self.cursor.line

    @property
    def column(self) -> int:
        return self.cursor.column
