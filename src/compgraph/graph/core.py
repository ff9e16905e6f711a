# src/compgraph/graph/core.py
from __future__ import annotations

import logging
from itertools import pairwise
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..config import GraphOptions, make_options
from ..exceptions import InvalidOperation, UnsupportedNamedEdge
from .edges import Edge, EdgeKey, key_of
from .extract import filter_nodes
from .hierarchy import Hierarchy
from .labels import ConstantLabel, LabelProvider, as_label_provider
from .view import GraphView

logger = logging.getLogger(__name__)

# Marks "no label argument given", so that an explicit None is still a label.
_MISSING: Any = object()


def _increment(counts: Dict[str, int], k: str) -> None:
    counts[k] = counts.get(k, 0) + 1


def _decrement(counts: Dict[str, int], k: str) -> None:
    n = counts[k] - 1
    if n:
        counts[k] = n
    else:
        del counts[k]


class Graph:
    """
    In-memory graph container: directed or undirected, optionally a multigraph,
    optionally compound.

    Structure:
      - Nodes: string ids mapped to an arbitrary label (_nodes).
      - Edges: EdgeKey -> descriptor (_edge_objs) and EdgeKey -> label (_edge_labels).
      - Adjacency, per node:
          * _in[v]  / _out[v]  : EdgeKey -> Edge for incident edges
          * _preds[v] / _sucs[v]: neighbor id -> number of parallel edges
      - Hierarchy (compound only): parent/children forest with an implicit root.

    Every node id is present in all four adjacency mappings (and the hierarchy,
    when compound) or in none. Mutators validate before touching any state and
    return the graph for chaining. Queries on unknown ids return None, an empty
    list or False; they never raise.
    """

    __slots__ = (
        "_options",
        "_label",
        "_default_node_label",   # LabelProvider
        "_default_edge_label",   # LabelProvider
        "_nodes",
        "_in",
        "_out",
        "_preds",
        "_sucs",
        "_edge_objs",
        "_edge_labels",
        "_hierarchy",            # Hierarchy | None
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        *,
        directed: bool = True,
        multigraph: bool = False,
        compound: bool = False,
    ) -> None:
        self._options: GraphOptions = make_options(
            directed=directed, multigraph=multigraph, compound=compound
        )
        self._label: Any = None
        self._default_node_label: LabelProvider = ConstantLabel()
        self._default_edge_label: LabelProvider = ConstantLabel()

        self._nodes: Dict[str, Any] = {}
        self._in: Dict[str, Dict[EdgeKey, Edge]] = {}
        self._out: Dict[str, Dict[EdgeKey, Edge]] = {}
        self._preds: Dict[str, Dict[str, int]] = {}
        self._sucs: Dict[str, Dict[str, int]] = {}
        self._edge_objs: Dict[EdgeKey, Edge] = {}
        self._edge_labels: Dict[EdgeKey, Any] = {}

        self._hierarchy: Optional[Hierarchy] = Hierarchy() if compound else None

    @classmethod
    def from_options(cls, options: GraphOptions) -> Graph:
        return cls(
            directed=options.directed,
            multigraph=options.multigraph,
            compound=options.compound,
        )

    # ------------------------------------------------------------------ #
    # Graph-level
    # ------------------------------------------------------------------ #
    @property
    def options(self) -> GraphOptions:
        return self._options

    @property
    def is_directed(self) -> bool:
        return self._options.directed

    @property
    def is_multigraph(self) -> bool:
        return self._options.multigraph

    @property
    def is_compound(self) -> bool:
        return self._options.compound

    def set_graph(self, label: Any) -> Graph:
        """Attach a label to the graph itself. No structural effect."""
        self._label = label
        return self

    def graph(self) -> Any:
        return self._label

    def view(self) -> GraphView:
        """
        Return a read-only view over this graph's live storage.

        The view exposes queries only. It is not a snapshot: later mutations
        through this Graph are visible through the view.
        """
        return GraphView(self)

    # ------------------------------------------------------------------ #
    # Nodes
    # ------------------------------------------------------------------ #
    def set_default_node_label(self, default: Any) -> Graph:
        """
        Set the label given to nodes created without an explicit label.

        `default` is a constant, a callable taking the node id, or a
        ConstantLabel / ComputedLabel.
        """
        self._default_node_label = as_label_provider(default)
        return self

    @property
    def default_node_label(self) -> LabelProvider:
        return self._default_node_label

    def node_count(self) -> int:
        return len(self._nodes)

    def nodes(self) -> List[str]:
        return list(self._nodes)

    def sources(self) -> List[str]:
        """Nodes without incoming edges."""
        return [v for v in self._nodes if not self._in[v]]

    def sinks(self) -> List[str]:
        """Nodes without outgoing edges."""
        return [v for v in self._nodes if not self._out[v]]

    def set_node(self, v: Any, label: Any = _MISSING) -> Graph:
        """
        Create node `v` or update its label.

        An existing node's label only changes when `label` is passed, so
        re-registering a known id without a label is a no-op.
        """
        v = str(v)
        if v in self._nodes:
            if label is not _MISSING:
                self._nodes[v] = label
            return self

        self._nodes[v] = self._default_node_label(v) if label is _MISSING else label
        if self._hierarchy is not None:
            self._hierarchy.add(v)
        self._in[v] = {}
        self._preds[v] = {}
        self._out[v] = {}
        self._sucs[v] = {}
        return self

    def set_nodes(self, vs: Iterable[Any], label: Any = _MISSING) -> Graph:
        for v in vs:
            self.set_node(v, label)
        return self

    def node(self, v: Any) -> Any:
        return self._nodes.get(str(v))

    def has_node(self, v: Any) -> bool:
        return str(v) in self._nodes

    def remove_node(self, v: Any) -> Graph:
        """
        Remove `v` with all incident edges. In a compound graph its children
        move to the top level (grandchildren keep their parents).
        """
        v = str(v)
        if v not in self._nodes:
            return self

        incident = list(self._in[v]) + list(self._out[v])
        for key in incident:
            self._remove_edge_key(key)

        del self._nodes[v]
        orphans: List[str] = []
        if self._hierarchy is not None:
            orphans = self._hierarchy.remove(v)
        del self._in[v]
        del self._preds[v]
        del self._out[v]
        del self._sucs[v]

        logger.debug(
            "Removed node %r (%d incident edges, %d children moved to root)",
            v, len(incident), len(orphans),
        )
        return self

    # ------------------------------ #
    # Hierarchy
    # ------------------------------ #
    def set_parent(self, v: Any, parent: Any = None) -> Graph:
        """
        Make `parent` the parent of `v`; with no parent, move `v` to the top
        level. Missing nodes are created.

        Raises InvalidOperation on a non-compound graph and CycleError when
        `parent` is `v` or one of its descendants.
        """
        if self._hierarchy is None:
            raise InvalidOperation("Cannot set parent in a non-compound graph")

        v = str(v)
        if parent is not None:
            parent = str(parent)
            self._hierarchy.check_parent(v, parent)
            self.set_node(parent)

        self.set_node(v)
        self._hierarchy.move(v, parent)
        return self

    def parent(self, v: Any) -> Optional[str]:
        """Parent of `v`, or None for top-level nodes and non-compound graphs."""
        if self._hierarchy is None:
            return None
        return self._hierarchy.parent(str(v))

    def children(self, v: Any = None) -> Optional[List[str]]:
        """
        Direct children of `v`, or of the root when `v` is None.

        Non-compound graphs treat every node as a child of the root.
        Returns None for unknown nodes.
        """
        if self._hierarchy is not None:
            return self._hierarchy.children(None if v is None else str(v))
        if v is None:
            return self.nodes()
        if self.has_node(v):
            return []
        return None

    # ------------------------------ #
    # Adjacency
    # ------------------------------ #
    def predecessors(self, v: Any) -> Optional[List[str]]:
        preds = self._preds.get(str(v))
        if preds is None:
            return None
        return list(preds)

    def successors(self, v: Any) -> Optional[List[str]]:
        sucs = self._sucs.get(str(v))
        if sucs is None:
            return None
        return list(sucs)

    def neighbors(self, v: Any) -> Optional[List[str]]:
        v = str(v)
        preds = self._preds.get(v)
        if preds is None:
            return None
        return list(dict.fromkeys([*preds, *self._sucs[v]]))

    def is_leaf(self, v: Any) -> bool:
        """
        Directed graphs: `v` has no successors. Undirected graphs: `v` has no
        neighbors. Unknown nodes are not leaves.
        """
        v = str(v)
        if v not in self._nodes:
            return False
        if self.is_directed:
            return not self._sucs[v]
        return not self._sucs[v] and not self._preds[v]

    def filter_nodes(self, predicate: Callable[[str], bool]) -> Graph:
        """
        Return a new graph induced by the nodes for which `predicate` holds.
        See compgraph.graph.extract.filter_nodes.
        """
        return filter_nodes(self, predicate)

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def set_default_edge_label(self, default: Any) -> Graph:
        """
        Set the label given to edges created without an explicit label.

        Callables receive (v, w, name) of the normalized edge.
        """
        self._default_edge_label = as_label_provider(default)
        return self

    @property
    def default_edge_label(self) -> LabelProvider:
        return self._default_edge_label

    def edge_count(self) -> int:
        return len(self._edge_objs)

    def edges(self) -> List[Edge]:
        return list(self._edge_objs.values())

    def set_edge(self, edge: Edge, label: Any = _MISSING) -> Graph:
        """
        Create `edge` or update its label.

        Endpoints are created when missing. An existing edge's label only
        changes when `label` is passed. Raises UnsupportedNamedEdge for a
        named edge on a graph with multigraph=False.
        """
        key = key_of(self.is_directed, edge)
        if key in self._edge_labels:
            if label is not _MISSING:
                self._edge_labels[key] = label
            return self

        if key.name is not None and not self.is_multigraph:
            raise UnsupportedNamedEdge(
                f"Cannot set named edge {key.name!r} when multigraph=False"
            )

        v, w, name = key
        if label is _MISSING:
            label = self._default_edge_label(v, w, name)

        self.set_node(v)
        self.set_node(w)

        descriptor = Edge(v, w, name)
        self._edge_labels[key] = label
        self._edge_objs[key] = descriptor
        _increment(self._preds[w], v)
        _increment(self._sucs[v], w)
        self._in[w][key] = descriptor
        self._out[v][key] = descriptor
        return self

    def set_path(self, vs: Iterable[Any], label: Any = _MISSING) -> Graph:
        """Add an edge between each consecutive pair of `vs`."""
        for v, w in pairwise(vs):
            self.set_edge(Edge.of(v, w), label)
        return self

    def edge(self, edge: Edge) -> Any:
        return self._edge_labels.get(key_of(self.is_directed, edge))

    def has_edge(self, edge: Edge) -> bool:
        return key_of(self.is_directed, edge) in self._edge_labels

    def remove_edge(self, edge: Edge) -> Graph:
        self._remove_edge_key(key_of(self.is_directed, edge))
        return self

    def _remove_edge_key(self, key: EdgeKey) -> None:
        descriptor = self._edge_objs.pop(key, None)
        if descriptor is None:
            return
        v, w = descriptor.v, descriptor.w
        del self._edge_labels[key]
        _decrement(self._preds[w], v)
        _decrement(self._sucs[v], w)
        del self._in[w][key]
        del self._out[v][key]

    def in_edges(self, v: Any, u: Any = None) -> Optional[List[Edge]]:
        """Edges into `v`, optionally only those coming from `u`."""
        in_v = self._in.get(str(v))
        if in_v is None:
            return None
        if u is None:
            return list(in_v.values())
        u = str(u)
        return [e for e in in_v.values() if e.v == u]

    def out_edges(self, v: Any, w: Any = None) -> Optional[List[Edge]]:
        """Edges out of `v`, optionally only those going to `w`."""
        out_v = self._out.get(str(v))
        if out_v is None:
            return None
        if w is None:
            return list(out_v.values())
        w = str(w)
        return [e for e in out_v.values() if e.w == w]

    def node_edges(self, v: Any, w: Any = None) -> Optional[List[Edge]]:
        """Incoming then outgoing edges of `v`, optionally restricted to `w`."""
        in_edges = self.in_edges(v, w)
        if in_edges is None:
            return None
        return in_edges + self.out_edges(v, w)  # type: ignore[operator]

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __contains__(self, v: object) -> bool:
        return self.has_node(v)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.is_directed}, "
            f"multigraph={self.is_multigraph}, "
            f"compound={self.is_compound}, "
            f"nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )
