"""graphkit - in-memory graph representations, traversal, shortest paths,
strongly connected components and transitive closure."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_same_closure,
    assert_symmetric,
    assert_valid_topological_order,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    Condensation,
    DirectedGraph,
    DirectedListGraph,
    DirectedWeightedGraph,
    Edge,
    ListGraph,
    MatrixGraph,
    Node,
    ReachabilityMatrix,
    UndirectedGraph,
    UndirectedListGraph,
    UndirectedWeightedGraph,
    WeightedMatrixGraph,
    bfs,
    closure_by_condensation,
    closure_by_traversal,
    condense,
    dfs,
    dijkstra,
    dijkstra_costs,
    group_components,
    make_matrix_graph,
    path_cost,
    path_to,
    random_graph,
    reachable,
    reconstruct_path,
    strongly_connected_components,
    tarjan,
    topological_sort,
    transitive_closure,
    transpose,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph representations
    "Edge",
    "Node",
    "ListGraph",
    "DirectedListGraph",
    "UndirectedListGraph",
    "MatrixGraph",
    "WeightedMatrixGraph",
    "UndirectedGraph",
    "DirectedGraph",
    "UndirectedWeightedGraph",
    "DirectedWeightedGraph",
    "make_matrix_graph",
    "transpose",
    # Algorithms
    "bfs",
    "dfs",
    "reachable",
    "dijkstra",
    "dijkstra_costs",
    "path_to",
    "path_cost",
    "tarjan",
    "strongly_connected_components",
    "ReachabilityMatrix",
    "Condensation",
    "condense",
    "topological_sort",
    "closure_by_traversal",
    "closure_by_condensation",
    "transitive_closure",
    "random_graph",
    "group_components",
    "reconstruct_path",
    # Diagnostics
    "is_symmetric",
    "assert_symmetric",
    "assert_valid_topological_order",
    "assert_same_closure",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
