"""Consistency checks for graphs, orderings and reachability matrices."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

import numpy as np


def _edge_counter(graph: Any) -> Counter:
    counts: Counter = Counter()
    for u in range(graph.node_count()):
        for v, weight in graph.out_edges(u):
            counts[(u, v, weight)] += 1
    return counts


def is_symmetric(graph: Any) -> bool:
    """
    Check whether every edge of a graph has a reciprocal edge of equal weight.

    Works for either representation through ``out_edges``. Parallel edges in
    the adjacency-list form are counted, so two records a -> b need two
    records b -> a.

    Parameters
    ----------
    graph:
        A ListGraph or MatrixGraph.

    Returns
    -------
    bool
        True if the edge multiset equals its own reversal.
    """
    counts = _edge_counter(graph)
    for (u, v, weight), count in counts.items():
        if counts.get((v, u, weight), 0) != count:
            return False
    return True


def assert_symmetric(graph: Any) -> None:
    """
    Assert that a graph is symmetric (see :func:`is_symmetric`).

    Raises
    ------
    ValueError
        If some edge lacks a reciprocal edge with the same weight.
    """
    counts = _edge_counter(graph)
    for (u, v, weight), count in counts.items():
        if counts.get((v, u, weight), 0) != count:
            raise ValueError(
                f"Graph is not symmetric: edge ({u}, {v}) with weight {weight} "
                f"has no matching reverse edge."
            )


def assert_valid_topological_order(graph: Any, order: Sequence[int]) -> None:
    """
    Assert that ``order`` is a topological ordering of ``graph``.

    Self-edges are ignored; every other edge u -> v must have u placed
    before v, and ``order`` must be a permutation of the node indices.

    Raises
    ------
    ValueError
        If the ordering is not a permutation or violates an edge.
    """
    n = graph.node_count()
    if sorted(order) != list(range(n)):
        raise ValueError(
            f"Topological order must be a permutation of 0..{n - 1}, got {list(order)}."
        )

    position = {node: pos for pos, node in enumerate(order)}
    for u in range(n):
        for v in graph.neighbors(u):
            if u != v and position[u] > position[v]:
                raise ValueError(
                    f"Edge ({u}, {v}) violates topological order: "
                    f"{v} is placed before {u}."
                )


def assert_same_closure(expected: Any, actual: Any) -> None:
    """
    Assert that two reachability matrices agree on every cell.

    Parameters
    ----------
    expected, actual:
        ReachabilityMatrix instances or anything ``numpy.asarray`` accepts.

    Raises
    ------
    ValueError
        If the shapes differ or any cell differs; the message lists up to
        five differing cells.
    """
    a = np.asarray(getattr(expected, "array", expected), dtype=bool)
    b = np.asarray(getattr(actual, "array", actual), dtype=bool)

    if a.shape != b.shape:
        raise ValueError(f"Closure shapes differ: {a.shape} vs {b.shape}.")

    diff = np.argwhere(a != b)
    if diff.size:
        cells = [tuple(int(x) for x in cell) for cell in diff[:5]]
        raise ValueError(
            f"Closures differ in {len(diff)} cell(s), first differences at {cells}."
        )
