from __future__ import annotations

import pytest

from compgraph import Graph


@pytest.fixture
def digraph() -> Graph:
    return Graph()


@pytest.fixture
def undirected() -> Graph:
    return Graph(directed=False)


@pytest.fixture
def multigraph() -> Graph:
    return Graph(multigraph=True)


@pytest.fixture
def compound() -> Graph:
    return Graph(compound=True)
