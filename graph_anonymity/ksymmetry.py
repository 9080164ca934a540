# k-symmetry: grow every automorphism orbit to at least k vertices by
# copying its original members together with their edges.

import logging

from .algorithm import Algorithm, register, validate_graph, validate_k
from .orbits import NetworkXOrbitEngine

logger = logging.getLogger(__name__)


@register
class KSymmetry(Algorithm):
    name = "ksymmetry"

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else NetworkXOrbitEngine()
        self.orbits = None

    def anonymize(self, graph, k):
        validate_graph(graph)
        k = validate_k(k)

        # 1. orbits of the graph, indices into graph.vertices()
        logger.debug("Start to find automorphisms")
        orbits = self.engine.orbits(graph)
        if orbits is None:
            logger.debug("No orbits found")
            self.orbits = None
            return graph
        logger.debug("found %d orbits", len(orbits))
        _check_orbits(graph, orbits, k)

        # 2. copy every undersized orbit until it holds at least k vertices
        result = []
        for i, orbit in enumerate(orbits):
            copy_counter = 1
            while len(orbit) < k:
                logger.debug("orbit copying for orbit %d, generation %d", i, copy_counter)
                orbit = orbit_copying(graph, orbit, copy_counter)
                copy_counter += 1
            result.append(orbit)

        self.orbits = result
        return graph


# Adds one copy generation of the orbit to the graph and returns the extended
# orbit. Only original vertices are copied. A neighbour inside the orbit is
# replaced by its copy of the same generation, any other neighbour is kept.
def orbit_copying(graph, orbit, copy_counter):
    vertices = graph.vertices()
    members = {vertices[idx] for idx in orbit}
    extended = list(orbit)

    for idx in orbit:
        v = vertices[idx]
        if v.is_copy:
            continue
        v_tag = v.copy(copy_counter)
        graph.add_vertex(v_tag)
        extended.append(graph.index_of(v_tag))

        for neighbor in sorted(graph.neighbors_of(v), key=graph.index_of):
            if neighbor in members:
                graph.add_edge(v_tag, neighbor.copy(copy_counter))
            else:
                graph.add_edge(v_tag, neighbor)

    return extended


def is_k_symmetric(orbits, k):
    return orbits is None or all(len(orbit) >= k for orbit in orbits)


def anonymize(graph, k, engine=None):
    return KSymmetry(engine).anonymize(graph, k)


# An undersized orbit needs at least one original vertex to copy from,
# otherwise it can never grow.
def _check_orbits(graph, orbits, k):
    vertices = graph.vertices()
    for i, orbit in enumerate(orbits):
        for idx in orbit:
            if not 0 <= idx < len(vertices):
                raise ValueError(f"orbit {i} refers to vertex index {idx}, graph has {len(vertices)} vertices")
        if len(orbit) < k and all(vertices[idx].is_copy for idx in orbit):
            raise ValueError(f"orbit {i} has {len(orbit)} vertices and no original vertex to copy")
