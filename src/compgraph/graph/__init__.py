"""
compgraph.graph
===============

In-memory graph container.

Public API (this subpackage):

- Graph          : directed/undirected, multigraph and compound graph container.
- GraphView      : read-only view over a live Graph (Graph.view()).
- Edge           : edge descriptor (v, w, name).
- EdgeKey        : normalized edge identity used for storage.
- edge_key       : build an EdgeKey from discrete values.
- to_edge        : build a normalized Edge from discrete values.
- filter_nodes   : induced subgraph extraction (also Graph.filter_nodes).
- ConstantLabel  : default-label provider returning a fixed value.
- ComputedLabel  : default-label provider delegating to a callable.
"""

from __future__ import annotations

from .core import Graph
from .edges import Edge, EdgeKey, edge_key, to_edge
from .extract import filter_nodes
from .labels import ComputedLabel, ConstantLabel
from .view import GraphView

__all__ = [
    "Graph",
    "GraphView",
    "Edge",
    "EdgeKey",
    "edge_key",
    "to_edge",
    "filter_nodes",
    "ConstantLabel",
    "ComputedLabel",
]
