"""Tests for `mincut.config` focusing on behavior and correctness."""

import dataclasses

import pytest

from mincut.config import (
    GRAPH_CONFIG,
    SOLVER_CONFIG,
    GraphConfig,
    ParallelEdgePolicy,
    SolverConfig,
)
from mincut.graph.weighted_graph import WeightedGraph


def test_defaults() -> None:
    assert GRAPH_CONFIG.parallel_edges is ParallelEdgePolicy.REPLACE
    assert SOLVER_CONFIG.require_connected is True
    assert WeightedGraph().config is GRAPH_CONFIG


def test_configs_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        GRAPH_CONFIG.parallel_edges = ParallelEdgePolicy.SUM  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        SOLVER_CONFIG.require_connected = False  # type: ignore[misc]


def test_policy_from_value() -> None:
    assert ParallelEdgePolicy("sum") is ParallelEdgePolicy.SUM
    assert GraphConfig(parallel_edges=ParallelEdgePolicy("keep")).parallel_edges is (
        ParallelEdgePolicy.KEEP
    )


def test_weights_match_tolerance() -> None:
    config = SolverConfig()
    assert config.weights_match(3.0, 3.0)
    assert config.weights_match(0.1 + 0.2, 0.3)
    assert not config.weights_match(3.0, 3.001)

    loose = SolverConfig(weight_tolerance=1e-2)
    assert loose.weights_match(3.0, 3.001)
    # Tolerance is relative for large weights
    assert loose.weights_match(1e6, 1e6 + 100)
