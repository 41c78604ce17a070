from __future__ import annotations

from typing import Callable

import networkx as nx

from rewiregraph.graph.adjlist import AdjListGraph
from rewiregraph.graph.protocol import GraphLike


def from_nx(
    G: nx.Graph,
    backend: Callable[[int], GraphLike] = AdjListGraph,
) -> GraphLike:
    """
    Build a GraphLike from an undirected NetworkX graph.

    Nodes are relabelled 0..n-1 in G's node order; the original node is
    kept in the vertex attribute "label".  Graph, node and edge attributes
    are shallow-copied.  Multigraphs are collapsed to simple graphs.

    backend is any callable n -> GraphLike, e.g. AdjListGraph or
    NxGraph.with_vertices.
    """
    if G.is_directed():
        raise ValueError("from_nx expects an undirected graph")
    if G.is_multigraph():
        G = nx.Graph(G)

    nodes = list(G.nodes)
    idx = {v: i for i, v in enumerate(nodes)}
    out = backend(len(nodes))
    out.graph.update(G.graph)
    for v, data in G.nodes(data=True):
        attrs = out.vertex_attrs(idx[v])
        attrs.update(data)
        attrs["label"] = v
    for u, v, data in G.edges(data=True):
        out.add_edge(idx[u], idx[v])
        out.edge_attrs(idx[u], idx[v]).update(data)
    return out


def to_nx(graph: GraphLike) -> nx.Graph:
    """
    Copy any GraphLike into a new nx.Graph on nodes 0..n-1.
    """
    G = nx.Graph()
    G.graph.update(graph.graph)
    for v in graph.vertices():
        G.add_node(v)
        G.nodes[v].update(graph.vertex_attrs(v))
    for u in graph.vertices():
        for v in graph.neighbors(u):
            if v >= u:
                G.add_edge(u, v)
                G.edges[u, v].update(graph.edge_attrs(u, v))
    return G
