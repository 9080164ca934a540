import pytest

from graph_anonymity.graph import Graph


@pytest.fixture
def path5():
    # degrees 1, 2, 2, 2, 1
    return Graph.from_edges([("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")])


@pytest.fixture
def edge_and_isolated():
    # degrees 1, 1, 0: grouping all three to degree 1 leaves an odd sum
    return Graph.from_edges([("a", "b")], vertices=["a", "b", "c"])
