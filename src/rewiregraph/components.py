"""Connected components and the filters built on them."""
from __future__ import annotations

import logging
from typing import List, Tuple

from rewiregraph.graph.protocol import GraphLike
from rewiregraph.subgraph import subgraph

LOGGER = logging.getLogger(__name__)


def connected_components(graph: GraphLike) -> Tuple[List[int], int]:
    """Label every vertex with its connected component.

    Returns ``(labels, count)`` where ``labels[v]`` is in ``0..count-1``.
    Seeds are taken in increasing vertex order, so label 0 is the component
    of vertex 0, label 1 the component of the lowest vertex outside it, etc.
    Isolated vertices are singleton components.
    """
    n = graph.number_of_vertices()
    labels = [-1] * n
    count = 0
    for start in range(n):
        if labels[start] != -1:
            continue
        labels[start] = count
        stack = [start]
        while stack:
            node = stack.pop()
            for nbr in graph.neighbors(node):
                if labels[nbr] == -1:
                    labels[nbr] = count
                    stack.append(nbr)
        count += 1
    LOGGER.debug("connected_components: %d vertices, %d components", n, count)
    return labels, count


def component_sizes(labels: List[int], count: int) -> List[int]:
    """Population of each component label."""
    sizes = [0] * count
    for c in labels:
        sizes[c] += 1
    return sizes


def components_as_lists(graph: GraphLike) -> List[List[int]]:
    """Vertices grouped by component, groups in label order."""
    labels, count = connected_components(graph)
    groups: List[List[int]] = [[] for _ in range(count)]
    for v, c in enumerate(labels):
        groups[c].append(v)
    return groups


def filter_components(graph: GraphLike, min_size: int) -> GraphLike:
    """Induced subgraph on the components with at least *min_size* vertices.

    Relative vertex order is preserved.  min_size <= 1 keeps every vertex.
    """
    labels, count = connected_components(graph)
    sizes = component_sizes(labels, count)
    keep = [v for v, c in enumerate(labels) if sizes[c] >= min_size]
    LOGGER.debug(
        "filter_components: min_size=%d keeps %d of %d vertices",
        min_size, len(keep), len(labels),
    )
    return subgraph(graph, keep)


def largest_component_indices(graph: GraphLike) -> List[int]:
    """Ascending vertex ids of the largest component.

    Ties go to the lowest label, i.e. the component whose smallest vertex
    is smallest.  An empty graph gives [].
    """
    labels, count = connected_components(graph)
    if count == 0:
        return []
    sizes = component_sizes(labels, count)
    largest = 0
    for c in range(1, count):
        if sizes[c] > sizes[largest]:
            largest = c
    return [v for v, c in enumerate(labels) if c == largest]


def largest_component(graph: GraphLike) -> GraphLike:
    """Induced subgraph on the largest connected component."""
    return subgraph(graph, largest_component_indices(graph))
