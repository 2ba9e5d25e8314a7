# runeparse/parser/classes.py
"""Ready-made predicate objects.

Single-rune classes inspect the current rune and return its mark without
moving; the parser steps over the rune when the check succeeds.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import regex

from .matcher import Matcher, Result

if TYPE_CHECKING:
    from .parser import Parser


class _RuneClass(Matcher):
    def accepts(self, r: str) -> bool:
        raise NotImplementedError

    def check(self, p: "Parser") -> Result:
        r = p.current()
        if r and self.accepts(r):
            return p.mark(), True
        return None, False


class RuneEq(_RuneClass):
    def __init__(self, rune: str, fold: bool = False):
        self.rune = rune
        self.fold = fold

    def accepts(self, r: str) -> bool:
        if self.fold:
            return r.casefold() == self.rune.casefold()
        return r == self.rune

    def __repr__(self) -> str:
        return f"{self.rune!r}" + (" (any case)" if self.fold else "")


class RuneRange(_RuneClass):
    def __init__(self, lo: str, hi: str):
        if ord(lo) > ord(hi):
            lo, hi = hi, lo
        self.lo = lo
        self.hi = hi

    def accepts(self, r: str) -> bool:
        return self.lo <= r <= self.hi

    def __repr__(self) -> str:
        return f"[{self.lo}-{self.hi}]"


class RuneClass(_RuneClass):
    """One rune matching a `regex` character class, e.g. ``\\p{XID_Start}``."""
    def __init__(self, pattern: str):
        self.pattern = pattern
        self._rx = regex.compile(pattern)

    def accepts(self, r: str) -> bool:
        return self._rx.fullmatch(r) is not None

    def __repr__(self) -> str:
        return self.pattern


class Literal(Matcher):
    """All-or-nothing literal: on a mismatch the cursor is put back."""
    def __init__(self, text: str, fold: bool = False):
        if not text:
            raise ValueError("empty literal")
        self.text = text
        self.fold = fold

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        last = None
        for r in self.text:
            cur = p.current()
            same = cur.casefold() == r.casefold() if self.fold else cur == r
            if not cur or not same:
                p.jump(start)
                return None, False
            last = p.mark()
            p.next()
        return last, True

    def __repr__(self) -> str:
        return f"{self.text!r}" + (" (any case)" if self.fold else "")


class Integer(Matcher):
    """The decimal literal of an integer, optionally after leading zeros.
    Fails when more digits follow (``70`` is not ``7``)."""
    def __init__(self, value: int, leading_zeros: bool = False):
        self.value = value
        self.leading_zeros = leading_zeros

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        digits = str(self.value)
        if self.value < 0:
            if p.current() != "-":
                return None, False
            p.next()
            digits = digits[1:]
        if self.leading_zeros:
            while p.current() == "0" and "0" <= p.peek() <= "9":
                p.next()
        last = None
        for r in digits:
            if p.current() != r:
                p.jump(start)
                return None, False
            last = p.mark()
            p.next()
        if "0" <= p.current() <= "9":
            # a longer number
            p.jump(start)
            return None, False
        return last, True

    def __repr__(self) -> str:
        return f"integer {self.value}"


def check_rune(r: str) -> Matcher:
    return RuneEq(r)


def check_rune_ci(r: str) -> Matcher:
    return RuneEq(r, fold=True)


def check_rune_range(lo: str, hi: str) -> Matcher:
    return RuneRange(lo, hi)


def check_rune_class(pattern: str) -> Matcher:
    return RuneClass(pattern)


def check_string(s: str) -> Matcher:
    return Literal(s)


def check_string_ci(s: str) -> Matcher:
    return Literal(s, fold=True)


def check_integer(i: int, leading_zeros: bool = False) -> Matcher:
    return Integer(i, leading_zeros)
