import networkx as nx
import pytest

from graph_anonymity.generators import symmetry_graph
from graph_anonymity.graph import Graph, Vertex
from graph_anonymity.ksymmetry import KSymmetry, is_k_symmetric, orbit_copying
from graph_anonymity.orbits import NetworkXOrbitEngine, StaticOrbitEngine


def test_no_orbits_returns_graph_unchanged(path5):
    before = path5.edges()
    algo = KSymmetry(StaticOrbitEngine(None))
    assert algo.anonymize(path5, 3) is path5
    assert path5.edges() == before
    assert path5.number_of_vertices() == 5


def test_large_orbits_are_left_alone(path5):
    algo = KSymmetry()
    algo.anonymize(path5, 1)
    assert path5.number_of_vertices() == 5
    assert algo.orbits == [[0, 4], [1, 3], [2]]


def test_edge_inside_orbit_is_copied_between_copies():
    g = Graph.from_edges([("a", "b")])
    algo = KSymmetry(StaticOrbitEngine([[0, 1]]))
    algo.anonymize(g, 4)

    a1, b1 = Vertex("a", 1), Vertex("b", 1)
    assert algo.orbits == [[0, 1, 2, 3]]
    assert g.neighbors_of(a1) == {b1}
    assert g.neighbors_of(b1) == {a1}
    assert g.number_of_edges() == 2


def test_edge_leaving_orbit_keeps_original_neighbour():
    star = Graph.from_edges([("c", "l1"), ("c", "l2")])
    algo = KSymmetry()
    algo.anonymize(star, 2)

    assert algo.orbits == [[0, 3], [1, 2]]
    assert star.neighbors_of(Vertex("c", 1)) == {Vertex("l1"), Vertex("l2")}
    assert nx.is_isomorphic(star.to_networkx(), nx.cycle_graph(4))


def test_copy_generations_until_k():
    # a-b-c with k=3: the ends are copied once, the centre twice,
    # leaving the complete bipartite graph K(3, 4)
    g = Graph.from_edges([("a", "b"), ("b", "c")])
    algo = KSymmetry()
    algo.anonymize(g, 3)

    assert sorted(len(orbit) for orbit in algo.orbits) == [3, 4]
    assert is_k_symmetric(algo.orbits, 3)
    assert g.has_vertex(Vertex("b", 2))
    assert not g.has_vertex(Vertex("a", 2))
    assert nx.is_isomorphic(g.to_networkx(), nx.complete_bipartite_graph(3, 4))

    sizes = sorted(len(orbit) for orbit in NetworkXOrbitEngine().orbits(g))
    assert sizes == [3, 4]


def test_orbit_copying_only_copies_originals():
    g = Graph.from_edges([("a", "b"), ("b", "c")])
    first = orbit_copying(g, [0, 2], 1)
    assert first == [0, 2, 3, 4]
    second = orbit_copying(g, first, 2)
    assert len(second) == 6
    assert [str(g.vertices()[i]) for i in second] == ["a", "c", "-a", "-c", "--a", "--c"]
    assert g.neighbors_of(Vertex("a", 2)) == {Vertex("b")}


def test_symmetry_graph_reaches_k():
    g = symmetry_graph()
    algo = KSymmetry()
    algo.anonymize(g, 2)
    assert is_k_symmetric(algo.orbits, 2)
    assert g.number_of_vertices() == 12
    for orbit in algo.orbits:
        assert len(orbit) >= 2


def test_is_k_symmetric():
    assert is_k_symmetric(None, 5)
    assert is_k_symmetric([[0, 1], [2, 3, 4]], 2)
    assert not is_k_symmetric([[0, 1], [2]], 2)


def test_bad_input_is_rejected(path5):
    with pytest.raises(ValueError):
        KSymmetry().anonymize(path5, 0)
    with pytest.raises(ValueError):
        KSymmetry().anonymize(Graph(), 2)


@pytest.mark.parametrize("orbits", [[[0, 1], []], [[0, 1], [2]]])
def test_orbit_without_originals_is_rejected(orbits):
    # vertex 2 is a copy, so neither second orbit has anything to copy from
    g = Graph.from_edges([("a", "b"), (Vertex("a", 1), "b")])
    with pytest.raises(ValueError):
        KSymmetry(StaticOrbitEngine(orbits)).anonymize(g, 2)
    assert g.number_of_vertices() == 3


def test_orbit_index_outside_graph_is_rejected():
    g = Graph.from_edges([("a", "b")])
    with pytest.raises(ValueError):
        KSymmetry(StaticOrbitEngine([[0, 5]])).anonymize(g, 1)
    assert g.number_of_vertices() == 2
