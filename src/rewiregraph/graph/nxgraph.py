from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import networkx as nx

from rewiregraph.errors import EdgeNotFound, check_vertex


class NxGraph:
    """
    GraphLike adapter over a networkx.Graph whose nodes are exactly 0..n-1.

    The wrapped graph is shared, not copied: mutations through the adapter
    are visible on .G and vice versa.  Use rewiregraph.io.from_nx to
    bring in a graph with arbitrary node labels.
    """

    def __init__(self, G: Optional[nx.Graph] = None) -> None:
        if G is None:
            G = nx.Graph()
        if G.is_directed() or G.is_multigraph():
            raise ValueError("NxGraph requires a simple undirected nx.Graph")
        n = G.number_of_nodes()
        if set(G.nodes) != set(range(n)):
            raise ValueError(
                "NxGraph requires nodes labelled 0..n-1; "
                "use nx.convert_node_labels_to_integers or rewiregraph.io.from_nx"
            )
        self._G = G

    @classmethod
    def with_vertices(cls, n: int) -> "NxGraph":
        G = nx.Graph()
        G.add_nodes_from(range(n))
        return cls(G)

    @property
    def G(self) -> nx.Graph:
        return self._G

    @property
    def graph(self) -> Dict[str, Any]:
        return self._G.graph

    @graph.setter
    def graph(self, value: Dict[str, Any]) -> None:
        self._G.graph = value

    def number_of_vertices(self) -> int:
        return self._G.number_of_nodes()

    def vertices(self) -> range:
        return range(self._G.number_of_nodes())

    def neighbors(self, v: int) -> Iterator[int]:
        return iter(self._G[check_vertex(v, self._G.number_of_nodes())])

    def degree(self, v: int) -> int:
        return self._G.degree(check_vertex(v, self._G.number_of_nodes()))

    def has_edge(self, u: int, v: int) -> bool:
        n = self._G.number_of_nodes()
        return self._G.has_edge(check_vertex(u, n), check_vertex(v, n))

    def add_edge(self, u: int, v: int, **attr: Any) -> None:
        n = self._G.number_of_nodes()
        # nx.Graph.add_edge would silently create missing nodes
        self._G.add_edge(check_vertex(u, n), check_vertex(v, n), **attr)

    def remove_edge(self, u: int, v: int) -> None:
        try:
            self._G.remove_edge(u, v)
        except nx.NetworkXError:
            raise EdgeNotFound(u, v) from None

    def empty_like(self, n: int) -> "NxGraph":
        return NxGraph.with_vertices(n)

    def vertex_attrs(self, v: int) -> Dict[str, Any]:
        return self._G.nodes[check_vertex(v, self._G.number_of_nodes())]

    def edge_attrs(self, u: int, v: int) -> Dict[str, Any]:
        try:
            return self._G.edges[u, v]
        except KeyError:
            raise EdgeNotFound(u, v) from None

    def __repr__(self) -> str:
        return (
            f"NxGraph(n={self._G.number_of_nodes()}, "
            f"m={self._G.number_of_edges()})"
        )
