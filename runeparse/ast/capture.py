# runeparse/ast/capture.py
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from ..parser.cursor import Cursor
from ..parser.matcher import Operator, Result, as_matcher
from ..parser.parser import Parser as _BaseParser, _eprint
from .node import Node


class Parser(_BaseParser):
    """
    Parser that collects the nodes produced by `Capture` matchers.

    Nodes go to the innermost open frame; a `Capture` opens a frame while its
    inner matcher runs. Marks remember the size of the current frame, and
    `jump` drops the nodes emitted after the mark, so backtracking combinators
    discard the captures of the branches they abandon. The frame size travels
    in `Cursor.checkpoint` via `_checkpoint`.
    """
    def __init__(self, data: bytes, *, debug: bool = False):
        super().__init__(data, debug=debug)
        self._frames: List[List[Node]] = [[]]

    def _checkpoint(self) -> int:
        return len(self._frames[-1])

    def jump(self, mark: Cursor) -> None:
        super().jump(mark)
        del self._frames[-1][mark.checkpoint:]

    @contextmanager
    def frame(self) -> Iterator[List[Node]]:
        nodes: List[Node] = []
        self._frames.append(nodes)
        try:
            yield nodes
        finally:
            self._frames.pop()

    def emit(self, node: Node) -> None:
        self._frames[-1].append(node)
        if self.debug:
            _eprint(f"[DEBUG] node {node}")

    def check_nodes(self, matcher: Any) -> Tuple[List[Node], bool]:
        """`check`, returning the top-level nodes captured by the match."""
        with self.frame() as nodes:
            _, ok = self.check(matcher)
        if not ok:
            return [], False
        return nodes, True

    def expect_nodes(self, matcher: Any) -> List[Node]:
        """`expect`, returning the top-level nodes captured by the match."""
        with self.frame() as nodes:
            self.expect(matcher)
        return nodes


@dataclass(frozen=True, repr=False)
class Capture(Operator):
    """
    Turns a successful match of `value` into a node of `type`.

    - inner match captured one node     -> that node, unchanged
    - inner match captured several      -> new parent node holding them
    - inner match captured nothing      -> new leaf; value is the matched
                                           text, passed through `convert`
    """
    type: int
    value: Any
    convert: Optional[Callable[[str], Any]] = None
    type_strings: Optional[Sequence[str]] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "value", as_matcher(self.value))

    def check(self, p: "_BaseParser") -> Result:
        if not isinstance(p, Parser):
            raise TypeError("Capture needs a runeparse.ast.Parser")
        start = p.mark()
        with p.frame() as nodes:
            mark, ok = p.check(self.value)
        if not ok:
            return None, False

        if len(nodes) == 1:
            node = nodes[0]
        elif nodes:
            node = Node(self.type, type_strings=self.type_strings)
            for n in nodes:
                node.set_last(n)
        else:
            # the span consumed, also when a predicate returned no mark
            text = p._text[start.offset:p.mark().offset]
            value = self.convert(text) if self.convert is not None else text
            node = Node(self.type, value, type_strings=self.type_strings)
        p.emit(node)
        return mark, True

    def __repr__(self) -> str:
        if self.type_strings is not None and 0 <= self.type < len(self.type_strings):
            return self.type_strings[self.type]
        return f"Capture({self.type}, {self.value!r})"
