from .nxconvert import from_nx, to_nx
from .graph6 import g6_to_graph, graph_to_g6, strip_graph6_header

__all__ = [
    "from_nx",
    "to_nx",
    "g6_to_graph",
    "graph_to_g6",
    "strip_graph6_header",
]
