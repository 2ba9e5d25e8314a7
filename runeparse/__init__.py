# runeparse/__init__.py
"""runeparse: rune cursor, matcher combinators and AST capture.

Subpackages:
- runeparse.parser : cursor, position tracking, check/expect dispatch
- runeparse.op     : And / Or / XOr / Not / Range combinators
- runeparse.ast    : Node tree, Capture, nested-array serialization
"""

from .parser import Cursor, EOD, ExpectedParseError, InvalidInputError, Parser

__version__ = "0.1.0"
