# runeparse/ast/node.py
"""AST node: a tree kept as doubly linked lists.

Every parent knows its first/last child, every child knows its parent and
its previous/next sibling. A node is either a value (leaf) or a parent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence


@dataclass(eq=False)
class Node:
    type: int
    value: Any = None
    # names of the types, only used for display
    type_strings: Optional[Sequence[str]] = field(default=None, repr=False)

    parent: Optional["Node"] = field(default=None, repr=False)
    previous_sibling: Optional["Node"] = field(default=None, repr=False)
    next_sibling: Optional["Node"] = field(default=None, repr=False)
    first_child: Optional["Node"] = field(default=None, repr=False)
    last_child: Optional["Node"] = field(default=None, repr=False)

    def is_parent(self) -> bool:
        return self.first_child is not None

    def children(self) -> List["Node"]:
        out: List[Node] = []
        c = self.first_child
        while c is not None:
            out.append(c)
            c = c.next_sibling
        return out

    def type_string(self) -> str:
        ts = self.type_strings
        if ts is not None and 0 <= self.type < len(ts):
            return ts[self.type]
        return f"{self.type:03d}"

    # ---- Insertion ----
    def set_first(self, child: "Node") -> None:
        """Insert `child` as the first child."""
        if self.first_child is not None:
            self.first_child.set_previous(child)
            return
        self._adopt(child)

    def set_last(self, child: "Node") -> None:
        """Insert `child` as the last child."""
        if self.last_child is not None:
            self.last_child.set_next(child)
            return
        self._adopt(child)

    def set_previous(self, sibling: "Node") -> None:
        """Insert `sibling` right before this node."""
        self._detach_for_insert(sibling)
        sibling.parent = self.parent
        prev = self.previous_sibling
        sibling.previous_sibling = prev
        sibling.next_sibling = self
        self.previous_sibling = sibling
        if prev is not None:
            prev.next_sibling = sibling
        elif self.parent is not None:
            self.parent.first_child = sibling

    def set_next(self, sibling: "Node") -> None:
        """Insert `sibling` right after this node."""
        self._detach_for_insert(sibling)
        sibling.parent = self.parent
        nxt = self.next_sibling
        sibling.next_sibling = nxt
        sibling.previous_sibling = self
        self.next_sibling = sibling
        if nxt is not None:
            nxt.previous_sibling = sibling
        elif self.parent is not None:
            self.parent.last_child = sibling

    def remove(self) -> None:
        """Unlink this node (and its subtree) from its parent and siblings."""
        prev, nxt, parent = self.previous_sibling, self.next_sibling, self.parent
        if prev is not None:
            prev.next_sibling = nxt
        elif parent is not None:
            parent.first_child = nxt
        if nxt is not None:
            nxt.previous_sibling = prev
        elif parent is not None:
            parent.last_child = prev
        self.parent = None
        self.previous_sibling = None
        self.next_sibling = None

    def _adopt(self, child: "Node") -> None:
        if self.value is not None:
            raise ValueError(f"node {self.type_string()} holds a value and cannot have children")
        self._detach_for_insert(child)
        child.parent = self
        self.first_child = child
        self.last_child = child

    def _detach_for_insert(self, other: "Node") -> None:
        if other is self:
            raise ValueError("cannot insert a node next to itself")
        p = self
        while p is not None:
            if p is other:
                raise ValueError("cannot insert a node into its own subtree")
            p = p.parent
        other.remove()

    # ---- Serialization ----
    def to_list(self) -> list:
        from .serialize import to_list
        return to_list(self)

    def marshal_json(self) -> str:
        from .serialize import marshal_json
        return marshal_json(self)

    def __str__(self) -> str:
        if self.is_parent():
            inner = ", ".join(str(c) for c in self.children())
            return f"[{self.type_string()}]: [{inner}]"
        return f"[{self.type_string()}]: {self.value}"
