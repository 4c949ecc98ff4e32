"""Benchmark transitive closure algorithms."""

import time
from typing import Dict

import numpy as np

from graphkit import closure_by_condensation, closure_by_traversal, random_graph


def benchmark_closure(
    n_nodes: int,
    edge_probability: float = 0.02,
    representation: str = "matrix",
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark closure by traversal against closure by condensation.

    Args:
        n_nodes: Number of nodes.
        edge_probability: Probability of each directed edge.
        representation: 'matrix' or 'list'.
        seed: Seed for the random graph.

    Returns:
        Dictionary with timing results.
    """
    g = random_graph(
        n_nodes,
        edge_probability,
        representation=representation,
        rng=np.random.default_rng(seed),
    )

    # Warmup
    closure_by_condensation(g)

    start = time.perf_counter()
    by_traversal = closure_by_traversal(g)
    traversal_time = time.perf_counter() - start

    start = time.perf_counter()
    by_condensation = closure_by_condensation(g)
    condensation_time = time.perf_counter() - start

    assert by_traversal == by_condensation

    return {
        "n_nodes": n_nodes,
        "edges": g.edge_count(),
        "traversal_sec": traversal_time,
        "condensation_sec": condensation_time,
        "speedup": traversal_time / condensation_time,
    }


if __name__ == "__main__":
    print("Benchmarking transitive closure...")

    for representation in ("matrix", "list"):
        for n in (100, 300, 600):
            results = benchmark_closure(n_nodes=n, representation=representation)
            print(f"{representation} graph ({n} nodes, {results['edges']} edges):")
            print(f"  Traversal:    {results['traversal_sec']*1e3:.1f} ms")
            print(f"  Condensation: {results['condensation_sec']*1e3:.1f} ms")
            print(f"  Speedup:      {results['speedup']:.1f}x")
