"""Tests for the graph model."""

import pytest

from engine.dag.errors import DuplicateIdError, RejectedOperation, UnknownEdgeError, UnknownNodeError
from engine.dag.graph import GraphModel
from schemas.graph_data import Edge, Position
from tests.conftest import make_nodes, make_edges


@pytest.fixture
def graph():
    g = GraphModel()
    for node in make_nodes("a", "b", "c"):
        g.add_node(node)
    for edge in make_edges(("a", "b"), ("b", "c")):
        g.add_edge(edge)
    return g


def test_read_access(graph):
    assert graph.node_count == 3
    assert graph.edge_count == 2
    assert [n.id for n in graph.iter_nodes()] == ["a", "b", "c"]
    assert [e.id for e in graph.edges] == ["e1", "e2"]
    assert graph.get_node("b").label == "b"
    assert graph.get_node("zzz") is None
    assert graph.has_edge("e1") and not graph.has_edge("e9")


def test_duplicate_ids_rejected(graph):
    with pytest.raises(DuplicateIdError):
        graph.add_node(make_nodes("a")[0])
    with pytest.raises(RejectedOperation):
        graph.add_edge(Edge(id="e1", source="c", target="a"))

    assert graph.node_count == 3
    assert graph.edge_count == 2


def test_parallel_edges_and_self_loops_allowed(graph):
    graph.add_edge(Edge(id="e3", source="a", target="b"))
    graph.add_edge(Edge(id="e4", source="c", target="c"))

    assert graph.edge_count == 4


def test_remove_nodes_cascades_to_edges(graph):
    removed = graph.remove_nodes({"b"})

    assert [n.id for n in removed] == ["b"]
    assert [n.id for n in graph.nodes] == ["a", "c"]
    assert graph.edges == []


def test_remove_edge(graph):
    graph.remove_edge("e1")

    assert [e.id for e in graph.edges] == ["e2"]
    with pytest.raises(UnknownEdgeError):
        graph.remove_edge("e1")


def test_remove_edges_skips_unknown(graph):
    removed = graph.remove_edges(["e2", "nope"])

    assert [e.id for e in removed] == ["e2"]


def test_set_position(graph):
    graph.set_position("a", Position(10, 20))

    assert graph.get_node("a").position == Position(10, 20)
    with pytest.raises(UnknownNodeError):
        graph.set_position("zzz", Position(0, 0))


def test_clear(graph):
    graph.clear()

    assert graph.node_count == 0
    assert graph.edge_count == 0
