# Supergraph construction: realise an additional-degree vector as new edges
# on an existing graph, never removing any of its edges.

import logging
from dataclasses import dataclass

import networkx as nx
import numpy as np

from .errors import NotRealizableError

logger = logging.getLogger(__name__)

ODD_SUM = "Additional Graph sum is odd"
MINUS_DEGREE = "Additional Graph contain minus degree"
NOT_GRAPHICAL = "Anonymized degree sequence is not graphical"
NO_MORE_EDGES = "No more edges to connect"


@dataclass(frozen=True)
class RealizationFailure:
    cause: str
    vertex: object = None

    def raise_error(self):
        raise NotRealizableError(self)


def _sum(additional):
    return int(np.sum([dc.degree for dc in additional]))


# first vertex, in vector order, that still needs edges
def _next_positive(additional):
    for dc in additional:
        if dc.degree > 0:
            return dc
    return None


# first-fit scan for a partner that still needs edges and is not yet a neighbour
def _next_partner(graph, additional, target):
    for dc in additional:
        if dc.degree > 0 and dc.vertex != target.vertex and not graph.has_edge(target.vertex, dc.vertex):
            return dc
    return None


# Adds edges to graph until every entry of additional reaches zero.
# Returns the graph on success, otherwise a RealizationFailure naming the
# cause. Edges added before a failure stay on the graph.
def supergraph(graph, additional, anonymized=None):
    # if the sum of the additional vector is odd, it isn't realisable
    if _sum(additional) % 2 != 0:
        return RealizationFailure(ODD_SUM)
    # the target sequence itself must be graphical for a realisation to exist
    if anonymized is not None and not nx.is_valid_degree_sequence_erdos_gallai([dc.degree for dc in anonymized]):
        return RealizationFailure(NOT_GRAPHICAL)

    while True:
        for dc in additional:
            if dc.degree < 0:
                return RealizationFailure(MINUS_DEGREE, dc.vertex)
        if _sum(additional) == 0:
            return graph

        target = _next_positive(additional)
        for _ in range(target.degree):
            partner = _next_partner(graph, additional, target)
            if partner is None:
                logger.debug("no partner left for %s", target.vertex)
                return RealizationFailure(NO_MORE_EDGES, target.vertex)
            graph.add_edge(target.vertex, partner.vertex)
            partner.degree -= 1
        # all of target's edges are connected
        target.degree = 0


# same as supergraph, raising NotRealizableError instead of returning the failure
def realize(graph, additional, anonymized=None):
    result = supergraph(graph, additional, anonymized)
    if isinstance(result, RealizationFailure):
        result.raise_error()
    return result
