"""
rewiregraph: connected components, induced subgraphs and degree-preserving
edge rewiring over a small undirected graph protocol.
"""

from .errors import (
    GraphError,
    IndexOutOfRange,
    EdgeNotFound,
    EmptyGraph,
    SwapBudgetExhausted,
)

# Graph backends
from .graph import GraphLike, AdjListGraph, NxGraph

# Algorithms
from .edges import list_edges, install_edges, is_adjacent, remove_self_loops, degree_sequence
from .components import (
    connected_components,
    component_sizes,
    components_as_lists,
    filter_components,
    largest_component_indices,
    largest_component,
)
from .subgraph import subgraph
from .rewire import randomize_endpoints

# Interchange
from .io import from_nx, to_nx, g6_to_graph, graph_to_g6

__all__ = [
    # Errors
    "GraphError",
    "IndexOutOfRange",
    "EdgeNotFound",
    "EmptyGraph",
    "SwapBudgetExhausted",
    # Graphs
    "GraphLike",
    "AdjListGraph",
    "NxGraph",
    # Edges
    "list_edges",
    "install_edges",
    "is_adjacent",
    "remove_self_loops",
    "degree_sequence",
    # Components
    "connected_components",
    "component_sizes",
    "components_as_lists",
    "filter_components",
    "largest_component_indices",
    "largest_component",
    "subgraph",
    # Rewiring
    "randomize_endpoints",
    # IO
    "from_nx",
    "to_nx",
    "g6_to_graph",
    "graph_to_g6",
]
