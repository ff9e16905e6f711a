# tests/graph/test_hierarchy.py
from __future__ import annotations

import pytest

from compgraph import CycleError, Edge, Graph, InvalidOperation


def test_set_parent_requires_compound(digraph: Graph) -> None:
    with pytest.raises(InvalidOperation):
        digraph.set_parent("a", "b")
    assert digraph.node_count() == 0


def test_new_nodes_start_at_root(compound: Graph) -> None:
    compound.set_node("a")
    assert compound.parent("a") is None
    assert compound.children() == ["a"]
    assert compound.children(None) == ["a"]
    assert compound.children("a") == []


def test_set_parent_creates_nodes(compound: Graph) -> None:
    compound.set_parent("child", "parent")
    assert compound.has_node("child")
    assert compound.has_node("parent")
    assert compound.parent("child") == "parent"
    assert compound.children("parent") == ["child"]
    assert compound.children() == ["parent"]


def test_set_parent_moves_between_parents(compound: Graph) -> None:
    compound.set_parent("c", "p1")
    compound.set_parent("c", "p2")
    assert compound.parent("c") == "p2"
    assert compound.children("p1") == []
    assert compound.children("p2") == ["c"]

    compound.set_parent("c")
    assert compound.parent("c") is None
    assert compound.children("p2") == []
    assert "c" in compound.children()


def test_cycle_is_rejected_and_state_kept(compound: Graph) -> None:
    compound.set_parent("x", "y")
    with pytest.raises(CycleError):
        compound.set_parent("y", "x")
    assert compound.parent("x") == "y"
    assert compound.parent("y") is None
    assert compound.children("x") == []


def test_self_parent_and_deep_cycle_rejected(compound: Graph) -> None:
    with pytest.raises(CycleError):
        compound.set_parent("a", "a")
    # the failed call did not create the node
    assert not compound.has_node("a")

    compound.set_parent("c", "b")
    compound.set_parent("b", "a")
    with pytest.raises(CycleError) as info:
        compound.set_parent("a", "c")
    assert info.value.v == "a"
    assert info.value.parent == "c"


def test_remove_node_rehomes_children_only(compound: Graph) -> None:
    compound.set_parent("b", "a")
    compound.set_parent("c", "b")
    compound.set_parent("d", "c")

    compound.remove_node("b")
    assert compound.parent("c") is None
    assert compound.children("a") == []
    assert compound.parent("d") == "c"
    assert set(compound.children()) == {"a", "c"}
    assert compound.children("b") is None


def test_parent_of_unknown_node(compound: Graph) -> None:
    assert compound.parent("zzz") is None
    assert compound.children("zzz") is None


def test_hierarchy_independent_of_edges(compound: Graph) -> None:
    compound.set_parent("b", "a")
    compound.set_edge(Edge("a", "b"))
    compound.remove_edge(Edge("a", "b"))
    assert compound.parent("b") == "a"
