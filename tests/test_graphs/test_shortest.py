"""Tests for shortest path algorithms."""

import math

import pytest

from graphkit.graphs import (
    DirectedListGraph,
    DirectedWeightedGraph,
    UndirectedWeightedGraph,
    dijkstra,
    dijkstra_costs,
    path_cost,
    path_to,
    random_graph,
)


def _weighted(edges, n):
    g = DirectedWeightedGraph()
    for i in range(n):
        g.add_node(i)
    for x, y, w in edges:
        g.add_edge(x, y, w)
    return g


def _reference_costs(graph, start):
    """Bellman-Ford style relaxation used as an oracle."""
    n = graph.node_count()
    dist = [math.inf] * n
    dist[start] = 0
    for _ in range(n):
        changed = False
        for u in range(n):
            if dist[u] == math.inf:
                continue
            for v, w in graph.out_edges(u):
                if dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    changed = True
        if not changed:
            break
    return {v: d for v, d in enumerate(dist) if d != math.inf}


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_simple(self):
        """The cheaper two-hop path wins over the direct edge."""
        g = _weighted([(0, 1, 1), (1, 2, 2), (0, 2, 5)], 3)
        predecessors = dijkstra(g, 0)
        assert predecessors == {0: None, 1: 0, 2: 1}

        _, costs = dijkstra_costs(g, 0)
        assert costs == {0: 0, 1: 1, 2: 3}

    def test_dijkstra_method(self):
        """Matrix graphs expose dijkstra as a method."""
        g = _weighted([(0, 1, 2)], 2)
        assert g.dijkstra(0) == {0: None, 1: 0}

    def test_dijkstra_unreachable(self):
        """Unreachable nodes are absent from the predecessor map."""
        g = _weighted([(0, 1, 1)], 3)
        predecessors = dijkstra(g, 0)
        assert 2 not in predecessors
        assert predecessors[0] is None

    def test_dijkstra_single_node(self):
        g = _weighted([], 1)
        assert dijkstra(g, 0) == {0: None}

    def test_max_cost_excludes_farther_nodes(self):
        """A node whose shortest distance exceeds max_cost is excluded."""
        g = _weighted([(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)], 4)

        limited = dijkstra(g, 0, max_cost=2)
        assert set(limited) == {0, 1}

        at_limit = dijkstra(g, 0, max_cost=3)
        assert set(at_limit) == {0, 1, 2}
        assert at_limit[2] == 1

        assert set(dijkstra(g, 0, max_cost=4)) == {0, 1, 2, 3}

    def test_max_cost_random(self, rng):
        """With a cutoff, exactly the nodes within the radius are discovered."""
        for _ in range(10):
            g = random_graph(20, 0.15, weighted=True, rng=rng)
            full = _reference_costs(g, 0)
            for radius in (0, 3, 8):
                found = dijkstra(g, 0, max_cost=radius)
                assert set(found) == {v for v, d in full.items() if d <= radius}

    def test_target_stops_early(self):
        """The search returns as soon as the target is settled."""
        g = _weighted([(0, 1, 1), (0, 2, 10), (1, 3, 1)], 4)

        predecessors = dijkstra(g, 0, target=1)
        assert predecessors == {0: None, 1: 0, 2: 0}
        assert 3 not in predecessors

        assert 3 in dijkstra(g, 0)

    def test_target_equal_to_start(self):
        g = _weighted([(0, 1, 1)], 2)
        assert dijkstra(g, 0, target=0) == {0: None}

    def test_zero_cells_are_not_edges(self):
        """Only positive cells relax distances."""
        g = _weighted([(0, 2, 4)], 3)
        assert dijkstra(g, 0) == {0: None, 2: 0}

    def test_undirected_weighted(self):
        g = UndirectedWeightedGraph()
        for i in range(3):
            g.add_node(i)
        g.add_edge(0, 1, 2)
        g.add_edge(1, 2, 2)
        assert dijkstra(g, 2) == {2: None, 1: 2, 0: 1}

    def test_list_graph_weights(self):
        """List graphs with numeric weights work too; parallel edges use the cheapest."""
        g = DirectedListGraph()
        for i in range(3):
            g.add_node(i)
        g.add_edge(0, 1, 4.0)
        g.add_edge(0, 1, 1.5)
        g.add_edge(1, 2, 0.5)
        predecessors, costs = dijkstra_costs(g, 0)
        assert predecessors == {0: None, 1: 0, 2: 1}
        assert costs[2] == 2.0

    def test_negative_weight_raises(self):
        """Negative weights are rejected like in any Dijkstra."""
        g = DirectedListGraph()
        a, b = g.add_node(), g.add_node()
        g.add_edge(a, b, -1)
        with pytest.raises(ValueError, match="non-negative"):
            dijkstra(g, a)

    def test_invalid_indices(self):
        g = _weighted([], 2)
        with pytest.raises(IndexError):
            dijkstra(g, 2)
        with pytest.raises(IndexError):
            dijkstra(g, 0, target=5)

    def test_costs_match_reference(self, rng):
        """Costs agree with a relaxation oracle on random graphs."""
        for _ in range(15):
            n = int(rng.integers(1, 25))
            g = random_graph(n, 0.2, weighted=True, rng=rng)
            start = int(rng.integers(0, n))
            _, costs = dijkstra_costs(g, start)
            assert costs == _reference_costs(g, start)


class TestPathTo:
    """Tests for path reconstruction."""

    def test_path_to_simple(self):
        """Paths run from start to target, both included."""
        g = _weighted([(0, 1, 1), (1, 2, 2), (2, 3, 1), (0, 3, 10)], 4)
        assert path_to(g, 0, 3) == [0, 1, 2, 3]
        assert g.path_to(0, 3) == [0, 1, 2, 3]

    def test_path_to_self(self):
        g = _weighted([(0, 1, 1)], 2)
        assert path_to(g, 1, 1) == [1]

    def test_path_to_unreachable(self):
        """Unreachability is reported as None, not an error."""
        g = _weighted([(0, 1, 1)], 3)
        assert path_to(g, 0, 2) is None
        assert path_to(g, 1, 0) is None

    def test_path_to_invalid_index(self):
        g = _weighted([], 2)
        with pytest.raises(IndexError):
            path_to(g, 0, 2)

    def test_path_cost_matches_minimum(self, rng):
        """An early-exit path costs exactly the full search's minimum."""
        for _ in range(15):
            n = int(rng.integers(2, 30))
            g = random_graph(n, 0.15, weighted=True, rng=rng)
            _, costs = dijkstra_costs(g, 0)
            for target, cost in costs.items():
                path = path_to(g, 0, target)
                assert path is not None
                assert path[0] == 0 and path[-1] == target
                assert path_cost(g, path) == cost


def test_path_cost():
    """path_cost sums weights and rejects broken paths."""
    g = _weighted([(0, 1, 3), (1, 2, 4)], 3)
    assert path_cost(g, [0, 1, 2]) == 7
    assert path_cost(g, [2]) == 0
    with pytest.raises(ValueError, match="No edge"):
        path_cost(g, [0, 2])
    with pytest.raises(ValueError):
        path_cost(g, [])
