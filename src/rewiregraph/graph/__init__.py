from .protocol import GraphLike
from .adjlist import AdjListGraph
from .nxgraph import NxGraph

__all__ = [
    "GraphLike",
    "AdjListGraph",
    "NxGraph",
]
