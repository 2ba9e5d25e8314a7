# runeparse/parser/parser.py
"""Parser state: a rune cursor over a UTF-8 buffer.

Position accounting
-------------------
line/column are 0-based. Consuming a rune ``c``:

- ``\\r`` followed by ``\\n`` : column + 1, the pair is pending
- ``\\r`` alone               : line + 1, column = 0
- ``\\n``                     : line + 1, column = 0 (completes a pending pair)
- anything else              : column + 1

so ``\\n``, ``\\r\\n`` and a lone ``\\r`` each count as exactly one line break.

Matching
--------
`check` never raises; `expect` raises `ExpectedParseError`. Neither rewinds:
rewinding on failure is done by the combinators in `runeparse.op`.
"""

from __future__ import annotations
from dataclasses import dataclass
import sys
from typing import Any, Optional, Tuple

from .cursor import Cursor, EOD
from .errors import ExpectedParseError, InvalidInputError
from .matcher import Result, as_matcher, describe, RuneMatcher, StringMatcher, _Predicate


def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


@dataclass(frozen=True)
class _Failure:
    expected: Any
    start: Cursor
    end: Cursor


def _unwrap(m: Any) -> Any:
    if isinstance(m, RuneMatcher):
        return m.rune
    if isinstance(m, StringMatcher):
        return m.text
    if isinstance(m, _Predicate):
        return m.target
    return m


class Parser:
    def __init__(self, data: bytes, *, debug: bool = False):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(e.start, e.reason) from e
        self.debug = debug
        self._text = text
        self._pos = 0
        self._line = 0
        self._col = 0
        self._pending_cr = False
        # furthest primitive failure of the running expect()
        self._failure: Optional[_Failure] = None
        self._failures = 0

    # ---- Navigation ----
    def current(self) -> str:
        if self._pos >= len(self._text):
            return EOD
        return self._text[self._pos]

    def peek(self) -> str:
        i = self._pos + 1
        if i >= len(self._text):
            return EOD
        return self._text[i]

    def look_back(self) -> str:
        i = self._pos - 1
        if i < 0 or i >= len(self._text):
            return EOD
        return self._text[i]

    def next(self) -> None:
        """Consume the current rune. A no-op once `done()`."""
        if self._pos >= len(self._text):
            return
        c = self._text[self._pos]
        if c == "\r" and self.peek() == "\n":
            self._col += 1
            self._pending_cr = True
        elif c == "\n" and self._pending_cr:
            # second half of "\r\n": drop the column the "\r" added
            self._line += 1
            self._col = 0
            self._pending_cr = False
        elif c == "\r" or c == "\n":
            self._line += 1
            self._col = 0
            self._pending_cr = False
        else:
            self._col += 1
            self._pending_cr = False
        self._pos += 1

    def done(self) -> bool:
        return self._pos >= len(self._text)

    # ---- Marks ----
    def mark(self) -> Cursor:
        return Cursor(self.current(), self._pos, self._line, self._col, self._checkpoint())

    def jump(self, mark: Cursor) -> None:
        """Rewind (or fast-forward) to a mark taken on this parser."""
        self._move_to(mark)

    def position(self, mark: Cursor) -> Tuple[int, int]:
        return mark.position()

    def slice(self, start: Cursor, end: Cursor) -> str:
        """Text from `start` through `end`, both included."""
        if start is None or end is None:
            raise ValueError("slice needs two marks")
        if end.offset < start.offset:
            raise ValueError(f"slice end {end.offset} precedes start {start.offset}")
        if start.offset < 0 or end.offset > len(self._text):
            raise ValueError("mark out of range")
        return self._text[start.offset:end.offset + 1]

    def _move_to(self, mark: Cursor) -> None:
        i = mark.offset
        self._pos = i
        self._line = mark.line
        self._col = mark.column
        self._pending_cr = i > 0 and self._text[i - 1] == "\r" and self._text[i:i + 1] == "\n"

    def _checkpoint(self) -> int:
        """Extra state stored in `Cursor.checkpoint`; subclasses that keep
        more than the position override it together with `jump`."""
        return 0

    # ---- Matching ----
    def check(self, matcher: Any) -> Result:
        m = as_matcher(matcher)
        start = self.mark()
        seen = self._failures
        mark, ok = m.check(self)
        if not ok and self._failures == seen:
            # nothing deeper reported a failure: this matcher is the culprit
            self._record_failure(_unwrap(matcher), start)
        return mark, ok

    def expect(self, matcher: Any) -> Optional[Cursor]:
        """Like `check`, but raises `ExpectedParseError` on failure."""
        start = self.mark()
        outer, self._failure = self._failure, None
        try:
            mark, ok = self.check(matcher)
            failure = self._failure
        finally:
            self._failure = _furthest(outer, self._failure)
        if ok:
            return mark
        if failure is None:
            failure = _Failure(_unwrap(matcher), start, self.mark())
        err = self._error(failure)
        if self.debug:
            _eprint(f"[DEBUG] {err}")
        raise err

    def _record_failure(self, expected: Any, start: Cursor) -> None:
        self._failures += 1
        end = self.mark()
        f = self._failure
        if f is None or end.offset >= f.end.offset:
            self._failure = _Failure(expected, start, end)

    def _error(self, f: _Failure) -> ExpectedParseError:
        lo = min(f.start.offset, f.end.offset)
        found = self._text[lo:f.end.offset + 1]
        return ExpectedParseError(f.expected, describe(f.expected), f.end, found)


def _furthest(a: Optional[_Failure], b: Optional[_Failure]) -> Optional[_Failure]:
    if a is None:
        return b
    if b is None:
        return a
    return b if b.end.offset >= a.end.offset else a
