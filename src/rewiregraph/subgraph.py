from __future__ import annotations

import logging
from typing import Dict, Sequence

from rewiregraph.edges import list_edges
from rewiregraph.errors import check_vertex
from rewiregraph.graph.protocol import GraphLike

LOGGER = logging.getLogger(__name__)


def subgraph(graph: GraphLike, vertices: Sequence[int]) -> GraphLike:
    """Induced subgraph on *vertices*, relabelled to 0..k-1.

    Output vertex i is ``vertices[i]``.  Graph, vertex and edge attributes
    are shallow-copied.  The result is built with ``graph.empty_like`` so it
    uses the same backend as the input.

    Raises IndexOutOfRange for an id outside 0..n-1 and ValueError for a
    repeated id; both are checked before anything is built.
    """
    n = graph.number_of_vertices()
    v_map: Dict[int, int] = {}
    for i, v in enumerate(vertices):
        check_vertex(v, n)
        if v in v_map:
            raise ValueError(f"vertex {v} listed twice in subgraph selection")
        v_map[v] = i

    out = graph.empty_like(len(v_map))
    out.graph.update(graph.graph)
    for v, i in v_map.items():
        out.vertex_attrs(i).update(graph.vertex_attrs(v))

    kept = 0
    for u, v in list_edges(graph):
        i = v_map.get(u)
        j = v_map.get(v)
        if i is None or j is None:
            continue
        out.add_edge(i, j)
        out.edge_attrs(i, j).update(graph.edge_attrs(u, v))
        kept += 1

    LOGGER.debug("subgraph: kept %d of %d vertices, %d edges", len(v_map), n, kept)
    return out
