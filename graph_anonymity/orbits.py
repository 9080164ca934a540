"""Automorphism orbit engines.

An engine maps a :class:`~graph_anonymity.graph.Graph` to its automorphism
orbits, each orbit being a list of vertex indices into ``graph.vertices()``.
``None`` means no orbit analysis is available.
"""

import logging
from typing import List, Optional, Protocol

import networkx as nx
from networkx.algorithms import isomorphism

logger = logging.getLogger(__name__)

Orbit = List[int]


class OrbitEngine(Protocol):
    def orbits(self, graph) -> Optional[List[Orbit]]:
        ...


class StaticOrbitEngine:
    """Hands out orbits computed elsewhere, e.g. by an external nauty run."""

    def __init__(self, orbits):
        self._orbits = orbits

    def orbits(self, graph):
        if self._orbits is None:
            return None
        return [list(orbit) for orbit in self._orbits]


class NetworkXOrbitEngine:
    """Exact orbits via networkx isomorphism checks.

    Vertices are first bucketed by their Weisfeiler-Lehman hashes, which
    every automorphism preserves. Inside a bucket two vertices share an orbit
    when the graph with the first vertex pinned is isomorphic to the graph
    with the second vertex pinned.
    """

    def __init__(self, iterations=3):
        self.iterations = iterations

    def orbits(self, graph):
        if graph.number_of_vertices() == 0:
            return None
        g = graph.to_networkx(labels="index")
        hashes = nx.weisfeiler_lehman_subgraph_hashes(g, iterations=self.iterations)

        buckets = {}
        for node in g.nodes:
            key = (g.degree(node), tuple(hashes.get(node, ())))
            buckets.setdefault(key, []).append(node)

        orbits = []
        for members in buckets.values():
            bucket_orbits = []
            for node in members:
                for orbit in bucket_orbits:
                    if self._equivalent(g, orbit[0], node):
                        orbit.append(node)
                        break
                else:
                    bucket_orbits.append([node])
            orbits.extend(bucket_orbits)

        orbits.sort(key=lambda orbit: orbit[0])
        logger.debug("found %d orbits over %d vertices", len(orbits), g.number_of_nodes())
        return orbits

    @staticmethod
    def _equivalent(g, u, v):
        return isomorphism.GraphMatcher(
            _pinned(g, u),
            _pinned(g, v),
            node_match=isomorphism.categorical_node_match("pinned", False),
        ).is_isomorphic()


def _pinned(g, node):
    h = g.copy()
    nx.set_node_attributes(h, False, "pinned")
    h.nodes[node]["pinned"] = True
    return h
