"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

import pytest

from mincut.examples import puzzle_sample_graph, textbook_graph
from mincut.graph.weighted_graph import WeightedGraph


@pytest.fixture
def square_with_chord() -> WeightedGraph:
    # A ──1── B
    # │ ╲     │
    # 1   5   1
    # │     ╲ │
    # D ──1── C
    g = WeightedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("D", "A", 1)
    g.add_edge("A", "C", 5)
    return g


@pytest.fixture
def two_triangles() -> WeightedGraph:
    # Triangles {1, 2, 3} and {4, 5, 6}, every triangle edge weight 3,
    # bridged by 3 ──1── 4
    g = WeightedGraph()
    for u, v in [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4)]:
        g.add_edge(u, v, 3)
    g.add_edge(3, 4, 1)
    return g


@pytest.fixture
def textbook() -> WeightedGraph:
    return textbook_graph()


@pytest.fixture
def puzzle_sample() -> WeightedGraph:
    return puzzle_sample_graph()
