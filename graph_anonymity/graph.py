# Undirected simple graph shared by the anonymisation algorithms.
# Vertices and edges are only ever added, never removed.

from dataclasses import dataclass

import networkx as nx

# marker prepended once per copy generation when a vertex is printed
TAG_MARKER = "-"
ESCAPE = "\\"


@dataclass(frozen=True)
class Vertex:
    name: str
    generation: int = 0

    @property
    def is_copy(self):
        return self.generation > 0

    # the same base vertex at another copy depth
    def copy(self, generation):
        return Vertex(self.name, generation)

    # Labels are unambiguous: a name that itself starts with the marker or
    # the escape character is escaped, so "-a" (original) and the first copy
    # of "a" render as "\-a" and "-a".
    @property
    def label(self):
        name = self.name
        if name.startswith((TAG_MARKER, ESCAPE)):
            name = ESCAPE + name
        return TAG_MARKER * self.generation + name

    @classmethod
    def from_label(cls, label):
        name = label.lstrip(TAG_MARKER)
        generation = len(label) - len(name)
        if name.startswith(ESCAPE):
            name = name[1:]
        return cls(name, generation)

    def __str__(self):
        return self.label


class Edge:
    __slots__ = ("u", "v")

    def __init__(self, u, v):
        self.u = u
        self.v = v

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return frozenset((self.u, self.v)) == frozenset((other.u, other.v))

    def __hash__(self):
        return hash(frozenset((self.u, self.v)))

    def __iter__(self):
        return iter((self.u, self.v))

    def __repr__(self):
        return f"Edge({self.u}, {self.v})"


class Graph:
    """Undirected graph without self-loops or parallel edges.

    Backed by a ``networkx.Graph`` whose nodes are :class:`Vertex` objects.
    The vertex order is the insertion order and never changes, so a vertex
    index stays valid for the lifetime of the graph.
    """

    def __init__(self):
        self._graph = nx.Graph()
        self._index = {}

    @classmethod
    def from_edges(cls, pairs, vertices=()):
        graph = cls()
        for v in vertices:
            graph.add_vertex(_as_vertex(v))
        for u, v in pairs:
            graph.add_edge(_as_vertex(u), _as_vertex(v))
        return graph

    @classmethod
    def from_networkx(cls, g):
        graph = cls()
        for node in g.nodes:
            graph.add_vertex(_as_vertex(node))
        for u, v in g.edges:
            graph.add_edge(_as_vertex(u), _as_vertex(v))
        return graph

    # vertex operations

    def add_vertex(self, vertex):
        if vertex in self._index:
            return
        self._index[vertex] = len(self._index)
        self._graph.add_node(vertex)

    def vertices(self):
        return list(self._graph.nodes)

    def index_of(self, vertex):
        return self._index[vertex]

    def has_vertex(self, vertex):
        return vertex in self._index

    def number_of_vertices(self):
        return len(self._index)

    # edge operations

    def add_edge(self, u, v):
        if u == v:
            raise ValueError(f"Self-loop on vertex '{u}' is not allowed.")
        self.add_vertex(u)
        self.add_vertex(v)
        self._graph.add_edge(u, v)

    def has_edge(self, u, v):
        return self._graph.has_edge(u, v)

    def edges(self):
        return {Edge(u, v) for u, v in self._graph.edges}

    def number_of_edges(self):
        return self._graph.number_of_edges()

    def neighbors_of(self, vertex):
        if vertex not in self._index:
            return set()
        return set(self._graph.adj[vertex])

    def degree(self, vertex):
        return self._graph.degree(vertex)

    def degrees(self):
        return [self._graph.degree(v) for v in self._graph.nodes]

    # conversions

    def copy(self):
        graph = Graph()
        for v in self.vertices():
            graph.add_vertex(v)
        for u, v in self._graph.edges:
            graph.add_edge(u, v)
        return graph

    def to_networkx(self, labels="index"):
        # labels: "index" for vertex positions, "name" for printed names,
        # anything else keeps the Vertex objects
        if labels == "index":
            relabel = self._index.get
        elif labels == "name":
            relabel = str
        else:
            return self._graph.copy()
        g = nx.Graph()
        g.add_nodes_from(relabel(v) for v in self._graph.nodes)
        g.add_edges_from((relabel(u), relabel(v)) for u, v in self._graph.edges)
        return g

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return f"Graph(vertices={self.number_of_vertices()}, edges={self.number_of_edges()})"


def _as_vertex(value):
    if isinstance(value, Vertex):
        return value
    return Vertex(str(value))
