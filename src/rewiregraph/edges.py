"""Edge-level views of a GraphLike: enumeration, insertion, adjacency."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from rewiregraph.errors import check_vertex
from rewiregraph.graph.protocol import GraphLike

Edge = Tuple[int, int]


def list_edges(graph: GraphLike) -> List[Edge]:
    """
    Return undirected edges as (u,v) with u <= v, each exactly once.

    A self-loop on v appears once as (v,v).
    """
    eds: List[Edge] = []
    for u in graph.vertices():
        for v in graph.neighbors(u):
            if v >= u:
                eds.append((u, v))
    return eds


def install_edges(pairs: Iterable[Edge], graph: GraphLike) -> None:
    """Add every pair as an edge; duplicates follow the backend's policy."""
    for u, v in pairs:
        graph.add_edge(u, v)


def is_adjacent(graph: GraphLike, u: int, v: int) -> bool:
    """
    True iff an edge joins u and v.

    Scans the adjacency of whichever endpoint has the smaller degree,
    so the answer does not depend on argument order.
    """
    n = graph.number_of_vertices()
    check_vertex(u, n)
    check_vertex(v, n)
    if graph.degree(v) < graph.degree(u):
        u, v = v, u
    for w in graph.neighbors(u):
        if w == v:
            return True
    return False


def remove_self_loops(graph: GraphLike) -> int:
    """Remove every (v,v) edge in place; return how many were removed."""
    loops = [v for v in graph.vertices() if any(w == v for w in graph.neighbors(v))]
    for v in loops:
        graph.remove_edge(v, v)
    return len(loops)


def degree_sequence(graph: GraphLike) -> List[int]:
    """degree(v) for v = 0..n-1 (a self-loop counts twice)."""
    return [graph.degree(v) for v in graph.vertices()]
