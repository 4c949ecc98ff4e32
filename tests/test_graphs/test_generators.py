"""Tests for random graph generation."""

import numpy as np
import pytest

from graphkit.graphs import (
    DirectedGraph,
    DirectedListGraph,
    DirectedWeightedGraph,
    UndirectedGraph,
    UndirectedListGraph,
    random_graph,
)


def test_representations(rng):
    assert type(random_graph(5, 0.5, rng=rng)) is DirectedGraph
    assert type(random_graph(5, 0.5, directed=False, rng=rng)) is UndirectedGraph
    assert type(random_graph(5, 0.5, weighted=True, rng=rng)) is DirectedWeightedGraph
    assert type(random_graph(5, 0.5, representation="list", rng=rng)) is DirectedListGraph
    g = random_graph(5, 0.5, directed=False, representation="list", rng=rng)
    assert type(g) is UndirectedListGraph


def test_node_values_are_indices(rng):
    g = random_graph(7, 0.2, rng=rng)
    assert g.values() == list(range(7))


def test_same_seed_same_graph():
    g1 = random_graph(15, 0.3, weighted=True, rng=np.random.default_rng(42))
    g2 = random_graph(15, 0.3, weighted=True, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(g1.matrix(), g2.matrix())


def test_probability_bounds(rng):
    """p = 0 gives no edges, p = 1 gives every edge including self-edges."""
    assert random_graph(6, 0.0, rng=rng).edge_count() == 0
    full = random_graph(6, 1.0, rng=rng)
    assert full.edge_count() == 36
    assert full.has_edge(3, 3)


def test_weights_in_range(rng):
    g = random_graph(20, 0.5, weighted=True, max_weight=4, rng=rng)
    m = g.matrix()
    assert m.min() >= 0
    assert m.max() <= 4
    assert (m[m > 0] >= 1).all()


def test_undirected_list_is_symmetric(rng):
    g = random_graph(12, 0.3, directed=False, representation="list", rng=rng)
    for u in range(12):
        for v in g.neighbors(u):
            assert g.has_edge(v, u)


def test_empty(rng):
    assert random_graph(0, 0.5, rng=rng).node_count() == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_nodes": -1},
        {"edge_probability": 1.5},
        {"max_weight": 0},
        {"representation": "csr"},
    ],
)
def test_invalid_arguments(rng, kwargs):
    args = {"num_nodes": 3, "edge_probability": 0.5, "rng": rng}
    args.update(kwargs)
    with pytest.raises(ValueError):
        random_graph(**args)
