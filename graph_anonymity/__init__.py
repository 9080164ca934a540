"""Structural k-anonymity for simple undirected graphs."""

from .algorithm import ALGORITHMS, Algorithm, get_algorithm
from .errors import AnonymizationError, NotRealizableError
from .graph import Edge, Graph, Vertex
from .kdegree import KDegree
from .ksymmetry import KSymmetry
from .orbits import NetworkXOrbitEngine, StaticOrbitEngine

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "AnonymizationError",
    "Edge",
    "Graph",
    "KDegree",
    "KSymmetry",
    "NetworkXOrbitEngine",
    "NotRealizableError",
    "StaticOrbitEngine",
    "Vertex",
    "get_algorithm",
]
