"""Exception hierarchy shared by all rewiregraph modules."""
from __future__ import annotations


class GraphError(Exception):
    """Base class for errors raised by rewiregraph."""


class IndexOutOfRange(GraphError, IndexError):
    """A vertex id lies outside 0..n-1."""

    def __init__(self, v: int, n: int) -> None:
        super().__init__(f"vertex {v!r} out of range for graph with {n} vertices")
        self.vertex = v
        self.n = n


class EdgeNotFound(GraphError, KeyError):
    """An edge expected to exist is missing."""

    def __init__(self, u: int, v: int) -> None:
        super().__init__(f"edge ({u}, {v}) not in graph")
        self.edge = (u, v)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EmptyGraph(GraphError, ValueError):
    """Rewiring requested on a graph with fewer than two edges."""


class SwapBudgetExhausted(GraphError, RuntimeError):
    """The rewirer ran out of attempts before reaching the requested swaps."""

    def __init__(self, performed: int, requested: int, tries: int) -> None:
        super().__init__(
            f"only {performed} of {requested} swaps accepted after {tries} tries"
        )
        self.performed = performed
        self.requested = requested
        self.tries = tries


def check_vertex(v: int, n: int) -> int:
    """Return v unchanged, or raise IndexOutOfRange if not in 0..n-1."""
    if not 0 <= v < n:
        raise IndexOutOfRange(v, n)
    return v
