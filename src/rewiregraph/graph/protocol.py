"""Capability contract consumed by the graph algorithms.

Vertices are always the dense range 0..n-1.  Edges are undirected:
neighbors(u) must report v whenever an edge {u, v} exists, regardless
of the order the endpoints were given to add_edge.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Protocol, runtime_checkable


@runtime_checkable
class GraphLike(Protocol):
    graph: Dict[str, Any]

    def number_of_vertices(self) -> int: ...

    def vertices(self) -> range: ...

    def neighbors(self, v: int) -> Iterable[int]: ...

    def degree(self, v: int) -> int: ...

    def has_edge(self, u: int, v: int) -> bool: ...

    def add_edge(self, u: int, v: int, **attr: Any) -> None: ...

    def remove_edge(self, u: int, v: int) -> None: ...

    def empty_like(self, n: int) -> "GraphLike": ...

    def vertex_attrs(self, v: int) -> Dict[str, Any]: ...

    def edge_attrs(self, u: int, v: int) -> Dict[str, Any]: ...
