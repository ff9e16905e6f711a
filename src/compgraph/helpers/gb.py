# src/compgraph/helpers/gb.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from graphblas import Matrix, dtypes

from ..graph.core import Graph


def adjacency_matrix(graph: Graph, nodes: Optional[Sequence[str]] = None) -> Tuple[Matrix, List[str]]:
    """
    Export `graph` as a square INT64 adjacency Matrix.

    - Rows/columns follow `nodes` (default: graph.nodes()); other nodes and
      their edges are left out. Unknown ids raise KeyError.
    - Values are parallel-edge counts (1 for simple graphs).
    - Undirected graphs give a symmetric matrix; a self loop is counted once.

    Returns (matrix, node order).
    """
    order = [str(v) for v in (graph.nodes() if nodes is None else nodes)]
    index: Dict[str, int] = {}
    for i, v in enumerate(order):
        if not graph.has_node(v):
            raise KeyError(f"Unknown node {v!r}")
        index[v] = i

    counts: Dict[Tuple[int, int], int] = {}
    for e in graph.edges():
        i = index.get(e.v)
        j = index.get(e.w)
        if i is None or j is None:
            continue
        counts[(i, j)] = counts.get((i, j), 0) + 1
        if not graph.is_directed and i != j:
            counts[(j, i)] = counts.get((j, i), 0) + 1

    n = len(order)
    rows = np.fromiter((ij[0] for ij in counts), dtype=np.int64, count=len(counts))
    cols = np.fromiter((ij[1] for ij in counts), dtype=np.int64, count=len(counts))
    vals = np.fromiter(counts.values(), dtype=np.int64, count=len(counts))

    mat = Matrix.from_coo(rows, cols, vals, nrows=n, ncols=n, dtype=dtypes.INT64)
    return mat, order
