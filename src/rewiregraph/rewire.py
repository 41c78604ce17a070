"""Degree-preserving randomization by double edge swaps."""
from __future__ import annotations

import logging
import os
import random
from typing import List, Optional, Union

from networkx.utils import create_py_random_state

from rewiregraph.edges import Edge, is_adjacent, list_edges
from rewiregraph.errors import EmptyGraph, SwapBudgetExhausted
from rewiregraph.graph.protocol import GraphLike

LOGGER = logging.getLogger(__name__)

# Default attempt cap is count * this factor.
REWIRE_MAX_TRIES_FACTOR = int(os.environ.get("REWIREGRAPH_MAX_TRIES_FACTOR", "100"))

Seed = Union[None, int, random.Random]


def _oriented(e: Edge, rng: random.Random) -> Edge:
    return e if rng.random() < 0.5 else (e[1], e[0])


def randomize_endpoints(
    graph: GraphLike,
    count: int,
    *,
    seed: Seed = None,
    max_tries: Optional[int] = None,
) -> int:
    """Perform *count* double edge swaps on *graph* in place.

    Each swap picks two distinct edges (a1,a2), (b1,b2), each in a random
    orientation, and replaces them with (a1,b2), (b1,a2).  A swap is
    rejected when the four endpoints are not distinct or when either new
    edge already exists, so no self-loops or parallel edges are created
    and every vertex keeps its degree.

    Parameters
    ----------
    graph : GraphLike
        Mutated in place.
    count : int
        Number of accepted swaps to perform.  count <= 0 is a no-op.
    seed : None, int or random.Random
        Random source; an int gives reproducible results.
    max_tries : int, optional
        Cap on attempts (accepted or not).  Defaults to
        count * REWIRE_MAX_TRIES_FACTOR.

    Returns
    -------
    int
        Number of swaps performed (always count on success).

    Raises
    ------
    EmptyGraph
        If the graph has fewer than two edges.
    SwapBudgetExhausted
        If max_tries attempts did not yield count swaps.  Swaps accepted
        before that point remain applied.
    """
    if count <= 0:
        return 0

    edges: List[Edge] = list_edges(graph)
    m = len(edges)
    if m < 2:
        raise EmptyGraph(f"double edge swap needs at least 2 edges, graph has {m}")

    if max_tries is None:
        max_tries = count * REWIRE_MAX_TRIES_FACTOR
    rng = create_py_random_state(seed)

    swaps = 0
    tries = 0
    while swaps < count:
        if tries >= max_tries:
            LOGGER.debug(
                "randomize_endpoints: gave up after %d tries (%d/%d swaps)",
                tries, swaps, count,
            )
            raise SwapBudgetExhausted(swaps, count, tries)
        tries += 1

        e1 = rng.randrange(m)
        e2 = rng.randrange(m)
        if e1 == e2:
            continue

        a1, a2 = _oriented(edges[e1], rng)
        b1, b2 = _oriented(edges[e2], rng)

        # pre-existing self-loops are never swapped
        if a1 == a2 or b1 == b2:
            continue
        if a1 == b1 or a1 == b2 or a2 == b1 or a2 == b2:
            continue
        if is_adjacent(graph, a1, b2) or is_adjacent(graph, b1, a2):
            continue

        graph.remove_edge(a1, a2)
        graph.remove_edge(b1, b2)
        graph.add_edge(a1, b2)
        graph.add_edge(b1, a2)

        edges[e1] = (a1, b2)
        edges[e2] = (b1, a2)
        swaps += 1

    LOGGER.debug("randomize_endpoints: %d swaps in %d tries", swaps, tries)
    return swaps
