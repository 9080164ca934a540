import networkx as nx
import pytest

from graph_anonymity.graph import Edge, Graph, Vertex


def test_add_vertex_is_idempotent():
    g = Graph()
    g.add_vertex(Vertex("a"))
    g.add_vertex(Vertex("a"))
    assert g.vertices() == [Vertex("a")]


def test_add_edge_updates_both_directions(path5):
    a, b = Vertex("a"), Vertex("b")
    assert b in path5.neighbors_of(a)
    assert a in path5.neighbors_of(b)
    assert path5.has_edge(b, a)


def test_add_edge_is_idempotent():
    g = Graph.from_edges([("a", "b"), ("b", "a"), ("a", "b")])
    assert g.number_of_edges() == 1
    assert g.edges() == {Edge(Vertex("a"), Vertex("b"))}


def test_add_edge_registers_unknown_vertices():
    g = Graph()
    g.add_edge(Vertex("x"), Vertex("y"))
    assert g.vertices() == [Vertex("x"), Vertex("y")]


def test_self_loop_is_rejected():
    g = Graph()
    with pytest.raises(ValueError):
        g.add_edge(Vertex("a"), Vertex("a"))
    assert g.number_of_vertices() == 0


def test_vertex_order_is_insertion_order(path5):
    assert [str(v) for v in path5.vertices()] == ["a", "b", "c", "d", "e"]
    assert path5.index_of(Vertex("d")) == 3
    path5.add_vertex(Vertex("z"))
    assert path5.index_of(Vertex("z")) == 5
    assert path5.index_of(Vertex("d")) == 3


def test_edge_is_unordered():
    a, b = Vertex("a"), Vertex("b")
    assert Edge(a, b) == Edge(b, a)
    assert len({Edge(a, b), Edge(b, a)}) == 1


def test_vertex_generation():
    v = Vertex("a")
    tag = v.copy(2)
    assert not v.is_copy
    assert tag.is_copy
    assert str(tag) == "--a"
    assert tag != v
    assert tag.copy(0) == v


def test_degrees_and_neighbors_of_missing_vertex(path5):
    assert path5.degrees() == [1, 2, 2, 2, 1]
    assert path5.neighbors_of(Vertex("missing")) == set()


def test_copy_is_independent(path5):
    clone = path5.copy()
    clone.add_edge(Vertex("a"), Vertex("e"))
    assert not path5.has_edge(Vertex("a"), Vertex("e"))
    assert clone.vertices() == path5.vertices()


def test_networkx_round_trip(path5):
    g = path5.to_networkx(labels="index")
    assert sorted(g.edges) == [(0, 1), (1, 2), (2, 3), (3, 4)]
    back = Graph.from_networkx(path5.to_networkx(labels="name"))
    assert back.edges() == path5.edges()
    assert nx.is_isomorphic(g, nx.path_graph(5))


@pytest.mark.parametrize("vertex, label", [
    (Vertex("a"), "a"),
    (Vertex("a", 1), "-a"),
    (Vertex("-a"), "\\-a"),
    (Vertex("-a", 2), "--\\-a"),
    (Vertex("\\x"), "\\\\x"),
])
def test_labels_are_unambiguous(vertex, label):
    assert vertex.label == label
    assert Vertex.from_label(label) == vertex
