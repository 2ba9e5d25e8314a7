# runeparse/op/ops.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, Tuple, TYPE_CHECKING

from ..parser.matcher import Matcher, Operator, Result, as_matcher

if TYPE_CHECKING:
    from ..parser.parser import Parser

# Combinators. Each one is a matcher itself, so they nest freely.
# - And/Or/XOr/Range rewind to the start position when they fail.
# - Not never consumes.
# - The result mark is the one of the last rune consumed (None if nothing was).


def _matchers(items: Sequence[Any]) -> Tuple[Matcher, ...]:
    return tuple(as_matcher(i) for i in items)


def _join(items: Tuple[Matcher, ...]) -> str:
    return ", ".join(repr(i) for i in items)


@dataclass(frozen=True, repr=False)
class And(Operator):
    """Sequence: every item in order."""
    items: Tuple[Matcher, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", _matchers(self.items))

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        last = None
        for it in self.items:
            mark, ok = p.check(it)
            if not ok:
                p.jump(start)
                return None, False
            if mark is not None:
                last = mark
        return last, True

    def __repr__(self) -> str:
        return f"And({_join(self.items)})"


@dataclass(frozen=True, repr=False)
class Or(Operator):
    """Ordered choice: the first alternative that matches wins."""
    items: Tuple[Matcher, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", _matchers(self.items))

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        for it in self.items:
            mark, ok = p.check(it)
            if ok:
                return mark, True
            p.jump(start)
        return None, False

    def __repr__(self) -> str:
        return f"Or({_join(self.items)})"


@dataclass(frozen=True, repr=False)
class XOr(Operator):
    """Exactly one alternative may match."""
    items: Tuple[Matcher, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", _matchers(self.items))

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        winner = None
        for it in self.items:
            _, ok = p.check(it)
            p.jump(start)
            if not ok:
                continue
            if winner is not None:
                p._record_failure(self, start)
                return None, False
            winner = it
        if winner is None:
            return None, False
        # replay the single match so its consumption (and captures) stick
        return p.check(winner)

    def __repr__(self) -> str:
        return f"XOr({_join(self.items)})"


@dataclass(frozen=True, repr=False)
class Not(Operator):
    """Negative lookahead."""
    value: Matcher

    def __post_init__(self):
        object.__setattr__(self, "value", as_matcher(self.value))

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        # what the lookahead failed on is not an error
        saved = p._failure
        _, ok = p.check(self.value)
        p._failure = saved
        p.jump(start)
        if ok:
            p._record_failure(self, start)
            return None, False
        return None, True

    def __repr__(self) -> str:
        return f"Not({self.value!r})"


@dataclass(frozen=True, repr=False)
class Range(Operator):
    """
    Greedy repetition of `value`, at least `min` and at most `max` times
    (`max == -1`: no upper bound).

    An iteration that succeeds without consuming anything ends the loop,
    so zero-width matchers cannot spin forever.
    """
    min: int
    max: int
    value: Matcher

    def __post_init__(self):
        if self.min < 0 or (self.max != -1 and self.max < self.min):
            raise ValueError(f"invalid range {self.min}..{self.max}")
        object.__setattr__(self, "value", as_matcher(self.value))

    def check(self, p: "Parser") -> Result:
        start = p.mark()
        last = None
        count = 0
        while self.max == -1 or count < self.max:
            before = p.mark()
            mark, ok = p.check(self.value)
            if not ok:
                # only the failing iteration is undone
                p.jump(before)
                break
            count += 1
            if mark is not None:
                last = mark
            if p.mark().offset == before.offset:
                break
        if count < self.min:
            p.jump(start)
            return None, False
        return last, True

    def __repr__(self) -> str:
        hi = "" if self.max == -1 else self.max
        return f"Range({self.min}..{hi}, {self.value!r})"


def MinZero(value: Any) -> Range:
    return Range(0, -1, value)


def MinOne(value: Any) -> Range:
    return Range(1, -1, value)


def Optional(value: Any) -> Range:
    return Range(0, 1, value)


def Repeat(n: int, value: Any) -> Range:
    return Range(n, n, value)
