# runeparse/op/__init__.py
"""Matcher combinators: sequence, ordered choice, exclusive choice,
negative lookahead and bounded repetition."""

from .ops import And, Or, XOr, Not, Range, MinZero, MinOne, Optional, Repeat
