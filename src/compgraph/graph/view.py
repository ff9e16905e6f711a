# src/compgraph/graph/view.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .core import Graph


class GraphView:
    """
    Read-only facade over a live Graph.

    Only query operations are exposed; mutators are not reachable through the
    view. The view borrows the graph's storage, so changes made through the
    Graph itself show up here. Use filter_nodes(lambda v: True) for an
    independent copy.
    """

    __slots__ = ("_graph",)

    QUERIES = frozenset(
        {
            "options",
            "is_directed",
            "is_multigraph",
            "is_compound",
            "graph",
            "node_count",
            "nodes",
            "sources",
            "sinks",
            "node",
            "has_node",
            "parent",
            "children",
            "predecessors",
            "successors",
            "neighbors",
            "is_leaf",
            "filter_nodes",
            "edge_count",
            "edges",
            "edge",
            "has_edge",
            "in_edges",
            "out_edges",
            "node_edges",
        }
    )

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def __getattr__(self, name: str) -> Any:
        if name in GraphView.QUERIES:
            return getattr(self._graph, name)
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r} (read-only)")

    def __contains__(self, v: object) -> bool:
        return self._graph.has_node(v)

    def __len__(self) -> int:
        return len(self._graph)

    def __repr__(self) -> str:
        return f"GraphView({self._graph!r})"
