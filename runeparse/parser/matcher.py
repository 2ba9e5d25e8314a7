# runeparse/parser/matcher.py
"""Matcher capability and the adapters that bring every matcher shape to it.

Four shapes are accepted wherever a matcher is expected:

- a single rune      : ``"a"`` (or an ``int`` code point)
- a literal string   : ``"abc"``
- a predicate        : ``fn(parser) -> (Cursor | None, bool)``
- a predicate object : anything with ``check(parser) -> (Cursor | None, bool)``

`as_matcher` turns each of them into an object with a `check` method once,
so the parser and the combinators only ever call ``m.check(p)``.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from .cursor import Cursor

if TYPE_CHECKING:
    from .parser import Parser

Result = Tuple[Optional[Cursor], bool]


class Matcher:
    """Predicate object shape. Subclasses implement `check`."""
    def check(self, p: "Parser") -> Result:
        raise NotImplementedError


class Operator(Matcher):
    """Built-in matchers. They position the cursor themselves, so the
    post-success adjustment applied to user predicates is skipped."""


class RuneMatcher(Operator):
    def __init__(self, rune: str):
        self.rune = rune

    def check(self, p: "Parser") -> Result:
        if p.current() != self.rune:
            return None, False
        mark = p.mark()
        p.next()
        return mark, True

    def __repr__(self) -> str:
        return repr(self.rune)


class StringMatcher(Operator):
    """Matches a literal rune by rune. On a mismatch the runes already
    matched stay consumed; wrap it in And/Or for all-or-nothing."""
    def __init__(self, text: str):
        self.text = text

    def check(self, p: "Parser") -> Result:
        last = None
        for r in self.text:
            if p.current() != r:
                return None, False
            last = p.mark()
            p.next()
        return last, True

    def __repr__(self) -> str:
        return repr(self.text)


class _Predicate(Operator):
    def __init__(self, target: Any, fn: Callable[["Parser"], Result]):
        self.target = target
        self._fn = fn

    def check(self, p: "Parser") -> Result:
        mark, ok = self._fn(p)
        if ok and mark is not None:
            # continue right after the last rune the predicate accepted
            p._move_to(mark)
            p.next()
        return mark, ok

    def __repr__(self) -> str:
        return describe(self.target)


def as_matcher(m: Any) -> Matcher:
    """Normalize any accepted matcher shape to a `Matcher`."""
    if isinstance(m, Operator):
        return m
    if isinstance(m, int) and not isinstance(m, bool):
        return RuneMatcher(chr(m))
    if isinstance(m, str):
        if not m:
            raise ValueError("empty literal is not a matcher")
        if len(m) == 1:
            return RuneMatcher(m)
        return StringMatcher(m)
    check = getattr(m, "check", None)
    if callable(check):
        return _Predicate(m, check)
    if callable(m):
        return _Predicate(m, m)
    raise TypeError(f"not a matcher: {m!r}")


def describe(m: Any) -> str:
    """Human readable name of a matcher, used in error messages."""
    if isinstance(m, (str, int)) and not isinstance(m, bool):
        return repr(chr(m) if isinstance(m, int) else m)
    if isinstance(m, Matcher) and type(m).__repr__ is not object.__repr__:
        return repr(m)
    name = getattr(m, "__name__", None)
    if name:
        return name
    return type(m).__name__
