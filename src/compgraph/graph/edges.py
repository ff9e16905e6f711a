# src/compgraph/graph/edges.py
"""
Edge identity codec.

An edge is addressed by (v, w, name). Storage uses an EdgeKey tuple built
from the normalized triple: endpoints are stringified and, for undirected
graphs, ordered so that the smaller id comes first. (a, b) and (b, a) then
map to the same key and the same descriptor.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Tuple


class EdgeKey(NamedTuple):
    v: str
    w: str
    name: Optional[str]


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Edge descriptor. Instances returned by a Graph are normalized; instances
    built by callers are normalized on use.
    """

    v: str
    w: str
    name: Optional[str] = None

    @classmethod
    def of(cls, v: Any, w: Any, name: Any = None) -> Edge:
        """Build a descriptor from discrete (possibly non-string) values."""
        return cls(str(v), str(w), normalize_name(name))


def normalize_name(name: Any) -> Optional[str]:
    if name is None:
        return None
    name = str(name)
    return name or None


def normalize_endpoints(directed: bool, v: Any, w: Any) -> Tuple[str, str]:
    v, w = str(v), str(w)
    if not directed and v > w:
        return w, v
    return v, w


def edge_key(directed: bool, v: Any, w: Any, name: Any = None) -> EdgeKey:
    v, w = normalize_endpoints(directed, v, w)
    return EdgeKey(v, w, normalize_name(name))


def to_edge(directed: bool, v: Any, w: Any, name: Any = None) -> Edge:
    v, w = normalize_endpoints(directed, v, w)
    return Edge(v, w, normalize_name(name))


def key_of(directed: bool, edge: Edge) -> EdgeKey:
    return edge_key(directed, edge.v, edge.w, edge.name)
