# src/compgraph/graph/extract.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .core import Graph

logger = logging.getLogger(__name__)


def filter_nodes(graph: Graph, predicate: Callable[[str], bool]) -> Graph:
    """
    Return the subgraph of `graph` induced by the nodes satisfying `predicate`.

    Semantics:
      - The result has the same directed/multigraph/compound options and the
        same graph label as `graph`.
      - Kept nodes keep their labels; every edge with both endpoints kept is
        copied with its label. Parallel-edge counts follow from replaying the
        edges.
      - Compound graphs: each kept node is re-parented to its nearest kept
        ancestor in `graph`, or to the root when there is none.
      - `graph` is not modified and shares no storage with the result.
        Labels themselves are copied by reference.
    """
    copy = type(graph).from_options(graph.options)
    copy.set_graph(graph.graph())

    for v in graph.nodes():
        if predicate(v):
            copy.set_node(v, graph.node(v))

    for e in graph.edges():
        if copy.has_node(e.v) and copy.has_node(e.w):
            copy.set_edge(e, graph.edge(e))

    if graph.is_compound:
        # removed node -> its nearest kept ancestor (None = root)
        resolved: Dict[str, Optional[str]] = {}
        for v in copy.nodes():
            copy.set_parent(v, _nearest_kept_ancestor(graph, copy, v, resolved))

    logger.debug(
        "Extracted subgraph: %d/%d nodes, %d/%d edges",
        copy.node_count(), graph.node_count(), copy.edge_count(), graph.edge_count(),
    )
    return copy


def _nearest_kept_ancestor(
    graph: Graph,
    copy: Graph,
    v: str,
    resolved: Dict[str, Optional[str]],
) -> Optional[str]:
    skipped: List[str] = []
    ancestor = graph.parent(v)
    while ancestor is not None and not copy.has_node(ancestor):
        if ancestor in resolved:
            ancestor = resolved[ancestor]
            break
        skipped.append(ancestor)
        ancestor = graph.parent(ancestor)

    for s in skipped:
        resolved[s] = ancestor
    return ancestor
