# runeparse/parser/cursor.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

# End-of-data sentinel. current()/peek()/look_back() return it outside the input.
EOD = ""


@dataclass(frozen=True)
class Cursor:
    """Immutable snapshot of a rune and its position.

    - offset : rune index into the decoded input
    - line   : 0-based
    - column : 0-based
    """
    rune: str
    offset: int
    line: int
    column: int
    # opaque parser state restored by Parser.jump (see Parser._checkpoint)
    checkpoint: int = field(default=0, compare=False, repr=False)

    def position(self) -> Tuple[int, int]:
        return self.line, self.column

    def __str__(self) -> str:
        if self.rune == EOD:
            return "EOD"
        return f"U+{ord(self.rune):04X}: {self.rune}"
