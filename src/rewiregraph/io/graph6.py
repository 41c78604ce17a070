from __future__ import annotations

from typing import Callable

import networkx as nx

from rewiregraph.graph.adjlist import AdjListGraph
from rewiregraph.graph.protocol import GraphLike

from .nxconvert import from_nx, to_nx


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_graph(
    g6: str,
    backend: Callable[[int], GraphLike] = AdjListGraph,
) -> GraphLike:
    """
    Parse a graph6 string into a GraphLike on vertices 0..n-1.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    out = from_nx(G, backend=backend)
    # graph6 nodes are already 0..n-1; the label attribute is redundant
    for v in out.vertices():
        out.vertex_attrs(v).pop("label", None)
    return out


def graph_to_g6(graph: GraphLike) -> str:
    """
    Encode a GraphLike as a graph6 string (no header).

    Attributes and self-loops are not representable and are dropped.
    """
    G = to_nx(graph)
    G.remove_edges_from(list(nx.selfloop_edges(G)))
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
