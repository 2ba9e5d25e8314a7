# runeparse/ast/__init__.py
"""AST construction: `Capture` turns matches into `Node`s, collected by
`runeparse.ast.Parser`, and `marshal_json` renders the finished tree."""

from .node import Node
from .capture import Capture, Parser
from .serialize import marshal_json, unmarshal_json, to_list, from_list
