# runeparse/ast/serialize.py
"""Nested-array text form of a node tree.

    leaf   -> [type, "value"]
    parent -> [type, [child, child, ...]]

A sequence of nodes renders as ``[node, node, ...]``.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Sequence, Union

from .node import Node

NodeOrNodes = Union[Node, Sequence[Node]]

_ESCAPES: Dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote(s: str) -> str:
    out = ['"']
    for c in s:
        e = _ESCAPES.get(c)
        if e is not None:
            out.append(e)
        elif c < " ":
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
    out.append('"')
    return "".join(out)


def _scalar(v: Any) -> str:
    if isinstance(v, str):
        return quote(v)
    return json.dumps(v, allow_nan=False)


def _render(n: Node) -> str:
    if n.is_parent():
        return f"[{n.type},[{','.join(_render(c) for c in n.children())}]]"
    return f"[{n.type},{_scalar(n.value)}]"


def marshal_json(obj: NodeOrNodes) -> str:
    if isinstance(obj, Node):
        return _render(obj)
    return "[" + ",".join(_render(n) for n in obj) + "]"


def to_list(obj: NodeOrNodes) -> list:
    if isinstance(obj, Node):
        if obj.is_parent():
            return [obj.type, [to_list(c) for c in obj.children()]]
        return [obj.type, obj.value]
    return [to_list(n) for n in obj]


def _is_node(x: Any) -> bool:
    return (isinstance(x, list) and len(x) == 2
            and isinstance(x[0], int) and not isinstance(x[0], bool))


def _build(x: Any) -> Node:
    if not _is_node(x):
        raise ValueError(f"not a node: {x!r}")
    typ, v = x
    if not isinstance(v, list):
        return Node(typ, v)
    if not v:
        raise ValueError(f"node {typ} has an empty child list")
    n = Node(typ)
    for c in v:
        n.set_last(_build(c))
    return n


def from_list(data: Any) -> Union[Node, List[Node]]:
    if _is_node(data):
        return _build(data)
    if isinstance(data, list):
        return [_build(x) for x in data]
    raise ValueError(f"not a node or a list of nodes: {data!r}")


def unmarshal_json(text: str) -> Union[Node, List[Node]]:
    return from_list(json.loads(text))
