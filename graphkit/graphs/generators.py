"""
Seeded random graph builders.

Used by the test suite and the benchmarks to produce reproducible graphs in
either representation. Node values are the node indices.
"""

from typing import Optional, Union

import numpy as np

from .list_graph import DirectedListGraph, ListGraph, UndirectedListGraph
from .matrix_graph import MatrixGraph, make_matrix_graph

_REPRESENTATIONS = ("matrix", "list")


def random_graph(
    num_nodes: int,
    edge_probability: float = 0.1,
    *,
    directed: bool = True,
    weighted: bool = False,
    max_weight: int = 10,
    representation: str = "matrix",
    rng: Optional[np.random.Generator] = None,
) -> Union[MatrixGraph, ListGraph]:
    """
    Build an Erdos-Renyi style random graph.

    Each ordered pair (i, j), self-pairs included, receives an edge with
    probability ``edge_probability``. For undirected graphs only pairs with
    i <= j are drawn and the edge is inserted in both directions.

    Args:
        num_nodes: Number of nodes (>= 0).
        edge_probability: Probability of each edge, in [0, 1].
        directed: Build a directed graph.
        weighted: Draw integer weights uniformly from [1, max_weight];
            otherwise every edge has weight 1.
        max_weight: Upper bound for drawn weights (>= 1).
        representation: "matrix" or "list".
        rng: numpy Generator; a fresh unseeded one is used when omitted.

    Returns:
        The populated graph.

    Raises:
        ValueError: On out-of-range arguments or an unknown representation.

    Example:
        >>> g = random_graph(5, 0.3, rng=np.random.default_rng(0))
        >>> g.node_count()
        5
    """
    if num_nodes < 0:
        raise ValueError(f"num_nodes must be >= 0, got {num_nodes}")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError(f"edge_probability must be in [0, 1], got {edge_probability}")
    if max_weight < 1:
        raise ValueError(f"max_weight must be >= 1, got {max_weight}")
    if representation not in _REPRESENTATIONS:
        raise ValueError(
            f"Unknown representation {representation!r}; expected one of {_REPRESENTATIONS}"
        )

    if rng is None:
        rng = np.random.default_rng()

    mask = rng.random((num_nodes, num_nodes)) < edge_probability
    if not directed:
        mask = np.triu(mask)
    if weighted:
        weights = rng.integers(1, max_weight + 1, size=(num_nodes, num_nodes))
    else:
        weights = np.ones((num_nodes, num_nodes), dtype=np.int64)

    if representation == "matrix":
        graph = make_matrix_graph(directed=directed, weighted=weighted)
    elif directed:
        graph = DirectedListGraph()
    else:
        graph = UndirectedListGraph()

    for i in range(num_nodes):
        graph.add_node(i)

    for i, j in np.argwhere(mask):
        i, j = int(i), int(j)
        if weighted or representation == "list":
            graph.add_edge(i, j, int(weights[i, j]))
        else:
            graph.add_edge(i, j)

    return graph
