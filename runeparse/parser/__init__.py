# runeparse/parser/__init__.py
"""Rune cursor and matcher dispatch.

This package provides:
- `Parser`: a cursor over a UTF-8 buffer with line/column tracking
- `Cursor`: immutable marks used for slicing, rewinding and diagnostics
- the matcher protocol (`Matcher`, `as_matcher`) and ready-made classes
"""

from .cursor import Cursor, EOD
from .errors import ExpectedParseError, InvalidInputError
from .matcher import Matcher, Operator, as_matcher, describe
from .parser import Parser
from .classes import (
    check_rune, check_rune_ci, check_rune_range, check_rune_class,
    check_string, check_string_ci, check_integer,
)
