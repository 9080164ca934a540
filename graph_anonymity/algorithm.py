from abc import ABC, abstractmethod
from numbers import Integral

from .graph import Graph


def validate_k(k):
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise ValueError(f"k must be a positive integer, got {k!r}")
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    return int(k)


def validate_graph(graph):
    if not isinstance(graph, Graph):
        raise TypeError(f"expected a Graph, got {type(graph).__name__}")
    if graph.number_of_vertices() == 0:
        raise ValueError("cannot anonymise an empty graph")
    return graph


class Algorithm(ABC):
    """An anonymisation strategy working in place on a graph."""

    name = None

    @abstractmethod
    def anonymize(self, graph, k):
        """Anonymise ``graph`` for the given ``k`` and return it."""


ALGORITHMS = {}


def register(cls):
    ALGORITHMS[cls.name] = cls
    return cls


def get_algorithm(name, **kwargs):
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm '{name}', expected one of {sorted(ALGORITHMS)}") from None
    return cls(**kwargs)
