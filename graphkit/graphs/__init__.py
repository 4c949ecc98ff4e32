"""
Graph representations and algorithms.

This package provides:
- Adjacency-list graphs (DirectedListGraph, UndirectedListGraph)
- Adjacency-matrix graphs (UndirectedGraph, DirectedGraph,
  UndirectedWeightedGraph, DirectedWeightedGraph) and in-place transpose
- Lazy traversal (BFS, DFS)
- Dijkstra shortest paths with cost cutoff and early exit
- Tarjan strongly connected components
- Transitive closure by repeated traversal and by SCC condensation (Purdom)

Nodes are identified by dense integer indices issued at insertion time.
"""

from .closure import (
    Condensation,
    ReachabilityMatrix,
    closure_by_condensation,
    closure_by_traversal,
    condense,
    topological_sort,
    transitive_closure,
)
from .generators import random_graph
from .list_graph import DirectedListGraph, Edge, ListGraph, Node, UndirectedListGraph
from .matrix_graph import (
    DirectedGraph,
    DirectedWeightedGraph,
    MatrixGraph,
    UndirectedGraph,
    UndirectedWeightedGraph,
    WeightedMatrixGraph,
    make_matrix_graph,
    transpose,
)
from .scc import strongly_connected_components, tarjan
from .shortest import dijkstra, dijkstra_costs, path_cost, path_to
from .traversal import bfs, dfs, reachable
from .utils import check_node_index, group_components, reconstruct_path

__all__ = [
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
    "check_node_index",
    "group_components",
    "reconstruct_path",
]

# Example usage:
# from graphkit.graphs import DirectedGraph, transitive_closure
#
# g = DirectedGraph()
# a, b = g.add_node("a"), g.add_node("b")
# g.add_edge(a, b)
# transitive_closure(g) == [[True, True], [False, True]]  # True
