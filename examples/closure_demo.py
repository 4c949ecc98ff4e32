"""Example: Reachability and Shortest Paths with graphkit

Builds a small build-dependency graph and walks through traversal,
shortest paths, strongly connected components and transitive closure.
"""

import numpy as np

import graphkit as gk
from graphkit import (
    DirectedListGraph,
    DirectedWeightedGraph,
    closure_by_condensation,
    closure_by_traversal,
    path_to,
    random_graph,
    strongly_connected_components,
    transitive_closure,
)


def example_dependency_graph():
    """Example: Traversal and shortest paths on a weighted matrix graph."""
    print("=" * 60)
    print("Example 1: Build Dependency Graph")
    print("=" * 60)

    g = DirectedWeightedGraph()
    names = ["app", "http", "json", "parser", "io", "log"]
    idx = {name: g.add_node(name) for name in names}

    # Edge weights are build times in seconds
    for src, dst, w in [
        ("app", "http", 3),
        ("app", "json", 2),
        ("http", "io", 4),
        ("json", "parser", 1),
        ("parser", "io", 1),
        ("io", "log", 2),
    ]:
        g.add_edge(idx[src], idx[dst], w)

    print(f"Graph: {g}")
    print(f"BFS from app: {[g.node_value(i) for i in g.bfs(idx['app'])]}")
    print(f"DFS from app: {[g.node_value(i) for i in g.dfs(idx['app'])]}")

    path = path_to(g, idx["app"], idx["log"])
    print(f"Cheapest path app -> log: {[g.node_value(i) for i in path]}")

    nearby = g.dijkstra(idx["app"], max_cost=3)
    print(f"Within 3s of app: {sorted(g.node_value(i) for i in nearby)}")

    g.transpose()
    print(f"After transpose, log reaches: {[g.node_value(i) for i in g.bfs(idx['log'])]}")
    print()


def example_components_and_closure():
    """Example: Components and closure on an adjacency-list graph."""
    print("=" * 60)
    print("Example 2: Components and Transitive Closure")
    print("=" * 60)

    g = DirectedListGraph()
    a, b, c, d = (g.add_node(v) for v in "abcd")
    g.add_edge(a, b)
    g.add_edge(a, c)
    g.add_edge(b, c)
    g.add_edge(c, a)
    g.add_edge(c, d)

    print(f"Component labels: {g.sccs()}")
    print(f"Components: {strongly_connected_components(g)}")
    print(transitive_closure(g))
    print()


def example_random_closure_agreement():
    """Example: Both closure algorithms agree on a random graph."""
    print("=" * 60)
    print("Example 3: Traversal vs Condensation Closure")
    print("=" * 60)

    rng = np.random.default_rng(42)
    g = random_graph(40, 0.05, rng=rng)

    by_traversal = closure_by_traversal(g)
    by_condensation = closure_by_condensation(g)
    print(f"Reachable pairs: {by_traversal.count()}")
    print(f"Algorithms agree: {by_traversal == by_condensation}")
    print()


if __name__ == "__main__":
    gk.configure_logging(level="WARNING")
    example_dependency_graph()
    example_components_and_closure()
    example_random_closure_agreement()
    print("All examples completed.")
