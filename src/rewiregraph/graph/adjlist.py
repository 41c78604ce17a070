from __future__ import annotations

from typing import Any, Dict, Iterator, List

from rewiregraph.errors import EdgeNotFound, check_vertex


class AdjListGraph:
    """
    Simple undirected graph on vertices 0..n-1.

    adj[u] maps each neighbor v to the attribute dict of edge {u, v};
    both endpoints share the same dict object.  Re-adding an existing
    edge updates its attributes instead of creating a parallel edge.
    A self-loop is stored once in adj[v] and counts 2 towards degree(v).
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.graph: Dict[str, Any] = {}
        self._adj: List[Dict[int, Dict[str, Any]]] = [{} for _ in range(n)]
        self._vattrs: List[Dict[str, Any]] = [{} for _ in range(n)]

    # -- vertices --

    def number_of_vertices(self) -> int:
        return len(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def vertices(self) -> range:
        return range(len(self._adj))

    def add_vertex(self, **attr: Any) -> int:
        """Append a vertex and return its id."""
        self._adj.append({})
        self._vattrs.append(dict(attr))
        return len(self._adj) - 1

    def vertex_attrs(self, v: int) -> Dict[str, Any]:
        return self._vattrs[check_vertex(v, len(self._adj))]

    # -- edges --

    def neighbors(self, v: int) -> Iterator[int]:
        return iter(self._adj[check_vertex(v, len(self._adj))])

    def degree(self, v: int) -> int:
        nbrs = self._adj[check_vertex(v, len(self._adj))]
        return len(nbrs) + (1 if v in nbrs else 0)

    def has_edge(self, u: int, v: int) -> bool:
        n = len(self._adj)
        return check_vertex(v, n) in self._adj[check_vertex(u, n)]

    def add_edge(self, u: int, v: int, **attr: Any) -> None:
        n = len(self._adj)
        check_vertex(u, n)
        check_vertex(v, n)
        data = self._adj[u].get(v)
        if data is None:
            data = {}
            self._adj[u][v] = data
            self._adj[v][u] = data
        data.update(attr)

    def remove_edge(self, u: int, v: int) -> None:
        n = len(self._adj)
        check_vertex(u, n)
        check_vertex(v, n)
        if v not in self._adj[u]:
            raise EdgeNotFound(u, v)
        del self._adj[u][v]
        if u != v:
            del self._adj[v][u]

    def edge_attrs(self, u: int, v: int) -> Dict[str, Any]:
        n = len(self._adj)
        check_vertex(v, n)
        try:
            return self._adj[check_vertex(u, n)][v]
        except KeyError:
            raise EdgeNotFound(u, v) from None

    def number_of_edges(self) -> int:
        loops = sum(1 for u, nbrs in enumerate(self._adj) if u in nbrs)
        return (sum(len(nbrs) for nbrs in self._adj) + loops) // 2

    def empty_like(self, n: int) -> "AdjListGraph":
        return AdjListGraph(n)

    def __repr__(self) -> str:
        return (
            f"AdjListGraph(n={self.number_of_vertices()}, "
            f"m={self.number_of_edges()})"
        )
