# Demo graphs and a plain edge-list reader for the command line.

import networkx as nx

from .graph import Graph, Vertex


def random_graph(n=50, p=0.1, seed=None):
    return Graph.from_networkx(nx.gnp_random_graph(n, p, seed=seed))


# Two triangles joined through a hub, with a pendant tail on the hub.
# Orbits: {a1, a2, b1, b2}, {a, b}, {hub}, {t1}, {t2}.
def symmetry_graph():
    return Graph.from_edges([
        ("a", "a1"), ("a", "a2"), ("a1", "a2"),
        ("b", "b1"), ("b", "b2"), ("b1", "b2"),
        ("hub", "a"), ("hub", "b"),
        ("hub", "t1"), ("t1", "t2"),
    ])


def read_edge_list(path, delimiter=None):
    g = nx.read_edgelist(path, delimiter=delimiter, nodetype=str, create_using=nx.Graph)
    g.remove_edges_from(list(nx.selfloop_edges(g)))
    # labels written by write_edge_list carry the copy generation
    return Graph.from_networkx(nx.relabel_nodes(g, Vertex.from_label))


def write_edge_list(graph, path, delimiter=" "):
    nx.write_edgelist(graph.to_networkx(labels="name"), path, delimiter=delimiter, data=False)
