"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathfinder import WeightedGraph, new_graph


@pytest.fixture
def diamond() -> WeightedGraph:
    """Return a -> {b, c} -> d, where the b route is much cheaper."""
    graph = new_graph()
    for payload in ("a", "b", "c", "d"):
        graph.add_node(payload)
    graph.add_edge("a", "b", 1)
    graph.add_edge("a", "c", 10)
    graph.add_edge("b", "d", 1)
    graph.add_edge("c", "d", 10)
    return graph


@pytest.fixture
def cycle() -> WeightedGraph:
    """Return the directed three-node cycle a -> b -> c -> a, unit costs."""
    graph = new_graph()
    for payload in ("a", "b", "c"):
        graph.add_node(payload)
    graph.add_edge("a", "b", 1)
    graph.add_edge("b", "c", 1)
    graph.add_edge("c", "a", 1)
    return graph
