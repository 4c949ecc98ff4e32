"""Pytest configuration and shared fixtures for graphkit tests.

This module provides:
- A deterministic numpy RNG fixture for random graph generation
- Small named graphs reused across test modules
"""

import os

import numpy as np
import pytest

from graphkit.diagnostics import set_debug_enabled
from graphkit.graphs import DirectedGraph, DirectedListGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


def _cycle_graph(graph):
    # a -> b, a -> c, b -> c, c -> a, c -> d
    a = graph.add_node("a")
    b = graph.add_node("b")
    c = graph.add_node("c")
    d = graph.add_node("d")
    graph.add_edge(a, b)
    graph.add_edge(a, c)
    graph.add_edge(b, c)
    graph.add_edge(c, a)
    graph.add_edge(c, d)
    return graph


@pytest.fixture
def cycle_matrix_graph() -> DirectedGraph:
    """Four-node directed matrix graph with the cycle a -> b -> c -> a and c -> d."""
    return _cycle_graph(DirectedGraph())


@pytest.fixture
def cycle_list_graph() -> DirectedListGraph:
    """List-graph version of ``cycle_matrix_graph``."""
    return _cycle_graph(DirectedListGraph())
