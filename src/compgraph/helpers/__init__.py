from __future__ import annotations

from .gb import adjacency_matrix

__all__ = [
    "adjacency_matrix",
]
