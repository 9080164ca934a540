# Degree vector and greedy degree anonymisation.
# Grouping follows the additions-only setting of Liu & Terzi's k-degree anonymity:
# [1] https://dl.acm.org/doi/10.1145/1376616.1376629

from collections import defaultdict

import numpy as np


class DegreeContext:
    __slots__ = ("vertex", "degree")

    def __init__(self, vertex, degree):
        self.vertex = vertex
        self.degree = degree

    def __eq__(self, other):
        if not isinstance(other, DegreeContext):
            return NotImplemented
        return self.vertex == other.vertex and self.degree == other.degree

    def __repr__(self):
        return f"{self.vertex}:{self.degree}"


# vertices sorted by degree, descending; ties keep the graph's vertex order
def degree_vector(graph):
    dv = [DegreeContext(v, graph.degree(v)) for v in graph.vertices()]
    dv.sort(key=lambda dc: dc.degree, reverse=True)
    return dv


def degrees_of(vector):
    return np.array([dc.degree for dc in vector], dtype=np.int64)


# every element of vector[start:stop] takes the degree of vector[start]
def _group(vector, start, stop):
    degree = vector[start].degree
    for dc in vector[start:stop]:
        dc.degree = degree


# Carves blocks of k off the tail of the sorted vector until fewer than 2k
# elements remain, then merges the remainder into a single block. Degrees are
# only ever raised to the largest degree of their block.
def degree_anonymization(vector, k):
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    anonymized = [DegreeContext(dc.vertex, dc.degree) for dc in vector]
    stop = len(anonymized)
    while stop >= 2 * k:
        _group(anonymized, stop - k, stop)
        stop -= k
    if stop > 0:
        _group(anonymized, 0, stop)
    return anonymized


# per-vertex number of degrees still to be added, index-aligned with both inputs
def additional_degree_vector(original, anonymized):
    return [DegreeContext(a.vertex, a.degree - o.degree) for o, a in zip(original, anonymized)]


# "degree anonymization cost" as defined in Section 4 of [1]
def anonymization_cost(original, anonymized):
    return int(np.sum(degrees_of(anonymized) - degrees_of(original)))


def degree_groups(graph):
    groups = defaultdict(list)
    for v in graph.vertices():
        groups[graph.degree(v)].append(v)
    return dict(groups)


def is_k_degree_anonymous(graph, k):
    return all(len(members) >= k for members in degree_groups(graph).values())
