"""Tests for the AdjListGraph and NxGraph backends."""
import networkx as nx
import pytest

from rewiregraph.errors import EdgeNotFound, IndexOutOfRange
from rewiregraph.graph import AdjListGraph, GraphLike, NxGraph


# --- AdjListGraph ---

def test_adjlist_basic():
    g = AdjListGraph(3)
    g.add_edge(0, 1, weight=1.0)
    g.add_edge(2, 1)
    assert len(g) == 3
    assert g.number_of_edges() == 2
    assert sorted(g.neighbors(1)) == [0, 2]
    assert g.has_edge(1, 0)
    assert g.degree(1) == 2
    assert g.edge_attrs(1, 0) == {"weight": 1.0}
    assert repr(g) == "AdjListGraph(n=3, m=2)"


def test_adjlist_readd_updates_attributes():
    g = AdjListGraph(2)
    g.add_edge(0, 1, weight=1)
    g.add_edge(1, 0, label="x")
    assert g.number_of_edges() == 1
    assert g.edge_attrs(0, 1) == {"weight": 1, "label": "x"}


def test_adjlist_remove_edge():
    g = AdjListGraph(3)
    g.add_edge(0, 1)
    g.remove_edge(1, 0)
    assert not g.has_edge(0, 1)
    with pytest.raises(EdgeNotFound):
        g.remove_edge(0, 1)


def test_adjlist_self_loop():
    g = AdjListGraph(2)
    g.add_edge(1, 1)
    assert g.degree(1) == 2
    assert g.number_of_edges() == 1
    g.remove_edge(1, 1)
    assert g.number_of_edges() == 0


def test_adjlist_add_vertex():
    g = AdjListGraph()
    assert g.add_vertex(name="a") == 0
    assert g.add_vertex() == 1
    assert g.vertex_attrs(0) == {"name": "a"}
    assert list(g.vertices()) == [0, 1]


def test_adjlist_out_of_range():
    g = AdjListGraph(2)
    with pytest.raises(IndexOutOfRange):
        g.add_edge(0, 2)
    with pytest.raises(IndexOutOfRange):
        g.vertex_attrs(-1)
    with pytest.raises(IndexOutOfRange):
        list(g.neighbors(5))


def test_adjlist_missing_edge_attrs():
    with pytest.raises(EdgeNotFound):
        AdjListGraph(2).edge_attrs(0, 1)


def test_adjlist_negative_size():
    with pytest.raises(ValueError):
        AdjListGraph(-1)


# --- NxGraph ---

def test_nxgraph_wraps_without_copy():
    G = nx.path_graph(3)
    g = NxGraph(G)
    g.add_edge(0, 2)
    assert G.has_edge(0, 2)
    assert g.G is G


def test_nxgraph_rejects_bad_labels():
    with pytest.raises(ValueError):
        NxGraph(nx.Graph([("a", "b")]))
    with pytest.raises(ValueError):
        NxGraph(nx.Graph([(1, 2)]))


def test_nxgraph_rejects_directed_and_multi():
    with pytest.raises(ValueError):
        NxGraph(nx.DiGraph([(0, 1)]))
    with pytest.raises(ValueError):
        NxGraph(nx.MultiGraph([(0, 1)]))


def test_nxgraph_add_edge_does_not_grow():
    g = NxGraph.with_vertices(2)
    with pytest.raises(IndexOutOfRange):
        g.add_edge(0, 2)
    assert g.number_of_vertices() == 2


def test_nxgraph_remove_missing_edge():
    g = NxGraph.with_vertices(2)
    with pytest.raises(EdgeNotFound):
        g.remove_edge(0, 1)


def test_nxgraph_attributes():
    g = NxGraph.with_vertices(2)
    g.graph["name"] = "g"
    g.vertex_attrs(1)["color"] = "blue"
    g.add_edge(0, 1, weight=3)
    assert g.G.graph == {"name": "g"}
    assert g.G.nodes[1] == {"color": "blue"}
    assert g.edge_attrs(1, 0) == {"weight": 3}
    with pytest.raises(EdgeNotFound):
        NxGraph.with_vertices(3).edge_attrs(0, 2)


def test_empty_like_same_backend():
    assert isinstance(AdjListGraph(2).empty_like(4), AdjListGraph)
    h = NxGraph.with_vertices(2).empty_like(4)
    assert isinstance(h, NxGraph)
    assert h.number_of_vertices() == 4


def test_backends_satisfy_protocol():
    assert isinstance(AdjListGraph(1), GraphLike)
    assert isinstance(NxGraph.with_vertices(1), GraphLike)
