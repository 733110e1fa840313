import networkx as nx
import pytest
from simpleedges.graph import (
    GraphX,
    SimpleGraph,
    SimpleDiGraph,
    SimpleGraphProto,
    from_networkx,
    to_networkx,
    load_edgelist,
    path_graph,
)
from simpleedges.iterators import EdgeIterator
from simpleedges.model import Edge


# ───────────────────────────────
# GraphX
# ───────────────────────────────
def test_graph_labels_get_contiguous_ids():
    g = GraphX[str]()
    g.add_edge("a", "b")
    g.add_edge("b", "c")

    assert g.nv() == 3 and g.ne() == 2
    assert g.vertex("a") == 0 and g.label(2) == "c"
    assert g.fadj(1) == [0, 2]
    assert list(g.edges()) == [Edge(0, 1), Edge(1, 2)]
    assert list(g.labelled_edges()) == [("a", "b"), ("b", "c")]
    assert isinstance(g, SimpleGraphProto)


def test_insertion_order_decides_ids():
    g = GraphX[str]()
    g.add_edge("z", "a")
    g.add_edge("m", "z")
    assert list(g.edges()) == [Edge(0, 1), Edge(0, 2)]
    assert list(g.labelled_edges()) == [("z", "a"), ("z", "m")]


def test_directed_facade():
    g = GraphX[str](directed=True)
    g.add_edge("x", "y")
    g.add_edge("y", "x")
    g.add_edge("y", "y")
    assert g.is_directed()
    assert list(g.edges()) == [Edge(0, 1), Edge(1, 0), Edge(1, 1)]
    assert g.has_edge(1, 0)
    assert not g.has_edge(0, 0)
    assert not g.has_edge(0, 5)


def test_facade_mutation_refreshes_adjacency():
    g = GraphX[int]()
    g.add_edge(10, 20)
    assert len(g.edges()) == 1
    g.add_node(30)
    g.add_edge(30, 10)
    assert g.fadj(0) == [1, 2]
    g.remove_edge(10, 20)
    assert list(g.edges()) == [Edge(0, 2)]
    assert 30 in g and len(g) == 3


@pytest.mark.parametrize("v", [-1, -3, 3])
def test_out_of_range_vertex_raises(v):
    g = GraphX(nx.path_graph(3))
    with pytest.raises(IndexError):
        g.fadj(v)
    with pytest.raises(IndexError):
        g.label(v)
    assert not g.has_edge(v, 0)


def test_refresh_after_direct_mutation():
    nxg = nx.Graph([(1, 2)])
    g = GraphX(nxg)
    assert list(g.edges()) == [Edge(0, 1)]
    g.nx_graph.add_edge(2, 3)
    g.refresh()
    assert list(g.labelled_edges()) == [(1, 2), (2, 3)]


def test_facade_equals_adjacency_graph():
    g = GraphX(nx.path_graph(4))
    assert g.edges() == EdgeIterator(path_graph(4))
    assert "nodes" in repr(g)


# ───────────────────────────────
# Conversion
# ───────────────────────────────
def test_from_networkx_keeps_integer_labels():
    g = from_networkx(nx.Graph([(0, 4), (4, 2)]))
    assert isinstance(g, SimpleGraph)
    assert g.nv() == 5
    assert list(g.edges()) == [Edge(0, 4), Edge(2, 4)]


def test_from_networkx_directed_and_minimum_order():
    g = from_networkx(nx.DiGraph([(1, 0)]), nv=4)
    assert isinstance(g, SimpleDiGraph)
    assert g.nv() == 4
    assert list(g.edges()) == [Edge(1, 0)]


def test_from_networkx_rejects_other_labels():
    with pytest.raises(ValueError):
        from_networkx(nx.Graph([("a", "b")]))
    with pytest.raises(ValueError):
        from_networkx(nx.Graph([(-1, 0)]))


def test_to_networkx():
    out = to_networkx(path_graph(3))
    assert not out.is_directed()
    assert set(out.nodes) == {0, 1, 2}
    assert {frozenset(e) for e in out.edges} == {frozenset((0, 1)), frozenset((1, 2))}


# ───────────────────────────────
# Edge lists
# ───────────────────────────────
def test_load_edgelist(tmp_path):
    f = tmp_path / "g.txt"
    f.write_text("# path\n2 1\n0 1\n")
    g = load_edgelist(f)
    assert list(g.edges()) == [Edge(0, 1), Edge(1, 2)]

    d = load_edgelist(f, directed=True, nv=6)
    assert d.nv() == 6
    assert list(d.edges()) == [Edge(0, 1), Edge(2, 1)]


def test_load_empty_edgelist(tmp_path):
    f = tmp_path / "empty.txt"
    f.write_text("")
    g = load_edgelist(f, nv=3)
    assert g.nv() == 3
    assert g.edges() == []


def test_load_edgelist_negative_ids(tmp_path):
    f = tmp_path / "bad.txt"
    f.write_text("-1 0\n")
    with pytest.raises(ValueError):
        load_edgelist(f)
