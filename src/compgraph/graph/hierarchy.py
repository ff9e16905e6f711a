# src/compgraph/graph/hierarchy.py
from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from ..exceptions import CycleError


class Hierarchy:
    """
    Parent/children forest over node ids of a compound graph.

    The root is implicit: a parent of None means "top level". Children sets
    are insertion-ordered dicts so that children() is deterministic.
    """

    __slots__ = ("_parent", "_children", "_root_children")

    def __init__(self) -> None:
        self._parent: Dict[str, Optional[str]] = {}
        self._children: Dict[str, Dict[str, None]] = {}
        self._root_children: Dict[str, None] = {}

    def __contains__(self, v: object) -> bool:
        return v in self._parent

    def add(self, v: str) -> None:
        """Register a new node at the top level."""
        self._parent[v] = None
        self._children[v] = {}
        self._root_children[v] = None

    def remove(self, v: str) -> List[str]:
        """
        Drop `v`, moving its direct children to the top level.
        Returns the re-homed children.
        """
        self._detach(v)
        del self._parent[v]
        orphans = list(self._children.pop(v))
        for child in orphans:
            self._parent[child] = None
            self._root_children[child] = None
        return orphans

    def parent(self, v: str) -> Optional[str]:
        return self._parent.get(v)

    def children(self, v: Optional[str] = None) -> Optional[List[str]]:
        if v is None:
            return list(self._root_children)
        children = self._children.get(v)
        if children is None:
            return None
        return list(children)

    def ancestors(self, v: str) -> Iterator[str]:
        """Yield the parent chain of `v`, nearest first."""
        ancestor = self._parent.get(v)
        while ancestor is not None:
            yield ancestor
            ancestor = self._parent.get(ancestor)

    def check_parent(self, v: str, parent: str) -> None:
        """Raise CycleError if `parent` is `v` or one of its descendants."""
        if parent == v or v in self.ancestors(parent):
            raise CycleError(v, parent)

    def move(self, v: str, parent: Optional[str]) -> None:
        """Attach `v` (and its subtree) under `parent`. Both must be registered."""
        self._detach(v)
        self._parent[v] = parent
        if parent is None:
            self._root_children[v] = None
        else:
            self._children[parent][v] = None

    def _detach(self, v: str) -> None:
        current = self._parent[v]
        if current is None:
            del self._root_children[v]
        else:
            del self._children[current][v]
