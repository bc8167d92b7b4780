import math
import random

import networkx as nx
import pytest

from mincut.algorithms.stoer_wagner import MinCutResult, MinCutSolver, stoer_wagner
from mincut.config import SolverConfig
from mincut.errors import (
    DisconnectedGraphError,
    EmptyGraphError,
    FrozenGraphError,
    InvalidEdgeError,
    TrivialGraphError,
)
from mincut.graph.convert import to_networkx
from mincut.graph.weighted_graph import Edge, WeightedGraph


def _assert_consistent(graph: WeightedGraph, solver: MinCutSolver) -> None:
    """Partitions cover the graph, are disjoint, and cut edges add up."""
    p1 = set(solver.partition1.get_vertices())
    p2 = set(solver.partition2.get_vertices())
    assert p1 and p2
    assert p1.isdisjoint(p2)
    assert p1 | p2 == set(graph.get_vertices())
    assert (
        solver.partition1.vertex_count() + solver.partition2.vertex_count()
        == graph.vertex_count()
    )
    assert sum(e.weight for e in solver.cut_edges) == solver.best_weight
    for edge in solver.cut_edges:
        assert (edge.u in p1) != (edge.v in p1)
    assert (
        solver.partition1.edge_count()
        + solver.partition2.edge_count()
        + len(solver.cut_edges)
        == graph.edge_count()
    )


def test_square_with_chord(square_with_chord):
    solver = MinCutSolver(square_with_chord)
    assert solver.best_weight == 2
    _assert_consistent(square_with_chord, solver)
    # Lightest cut isolates one of the chordless corners
    isolated = min(
        (set(solver.partition1.get_vertices()), set(solver.partition2.get_vertices())),
        key=len,
    )
    assert isolated in ({"B"}, {"D"})
    assert len(solver.cut_edges) == 2


def test_two_triangles(two_triangles):
    solver = MinCutSolver(two_triangles)
    assert solver.best_weight == 1
    _assert_consistent(two_triangles, solver)
    sides = {
        frozenset(solver.partition1.get_vertices()),
        frozenset(solver.partition2.get_vertices()),
    }
    assert sides == {frozenset({1, 2, 3}), frozenset({4, 5, 6})}
    assert solver.cut_edges == frozenset({Edge(3, 4)})
    # Each partition keeps its three triangle edges
    assert solver.partition1.edge_count() == 3
    assert solver.partition2.edge_count() == 3


def test_textbook_graph(textbook):
    solver = MinCutSolver(textbook)
    assert solver.best_weight == 4
    _assert_consistent(textbook, solver)
    sides = {
        frozenset(solver.partition1.get_vertices()),
        frozenset(solver.partition2.get_vertices()),
    }
    assert sides == {frozenset({1, 2, 5, 6}), frozenset({3, 4, 7, 8})}


def test_puzzle_sample(puzzle_sample):
    solver = MinCutSolver(puzzle_sample)
    assert solver.best_weight == 3
    _assert_consistent(puzzle_sample, solver)
    sizes = sorted(solver.result.sizes())
    assert sizes == [6, 9]
    assert sizes[0] * sizes[1] == 54
    assert solver.cut_edges == frozenset(
        {Edge("hfx", "pzl"), Edge("bvb", "cmg"), Edge("nvd", "jqt")}
    )


def test_two_vertices():
    g = WeightedGraph()
    g.add_edge("a", "b", 2.5)
    solver = MinCutSolver(g)
    assert solver.best_weight == 2.5
    assert solver.phases == 1
    assert solver.cut_edges == frozenset({Edge("a", "b")})
    _assert_consistent(g, solver)


def test_phase_count_is_vertex_count_minus_one(textbook):
    assert MinCutSolver(textbook).phases == textbook.vertex_count() - 1


def test_empty_graph_raises():
    with pytest.raises(EmptyGraphError):
        MinCutSolver(WeightedGraph())


def test_single_vertex_raises():
    g = WeightedGraph()
    g.add_vertex("only")
    with pytest.raises(TrivialGraphError):
        MinCutSolver(g)


def test_disconnected_graph_raises():
    g = WeightedGraph()
    g.add_edge("a", "b", 1)
    g.add_edge("c", "d", 1)
    with pytest.raises(DisconnectedGraphError, match="not connected"):
        MinCutSolver(g)


def test_disconnected_graph_allowed_gives_zero_cut(caplog):
    g = WeightedGraph()
    g.add_edge("a", "b", 1)
    g.add_edge("b", "c", 4)
    g.add_edge("x", "y", 2)
    g.add_vertex("z")
    solver = MinCutSolver(g, SolverConfig(require_connected=False))
    assert solver.best_weight == 0
    assert solver.cut_edges == frozenset()
    _assert_consistent(g, solver)
    assert any("not connected" in r.message for r in caplog.records)


def test_negative_weight_rejected():
    g = WeightedGraph()
    g.add_edge("a", "b", 1)
    g.add_edge("b", "c", -1)
    with pytest.raises(InvalidEdgeError, match="negative"):
        MinCutSolver(g)


@pytest.mark.parametrize("weight", [math.inf, -math.inf, math.nan])
def test_non_finite_weight_rejected(weight):
    g = WeightedGraph()
    g.add_edge("a", "b", weight)
    g.add_edge("b", "c", 1)
    with pytest.raises(InvalidEdgeError, match="non-finite"):
        MinCutSolver(g)


def test_zero_weight_edges_are_cut_first():
    g = WeightedGraph()
    g.add_edge("a", "b", 5)
    g.add_edge("b", "c", 0)
    g.add_edge("c", "d", 5)
    solver = MinCutSolver(g)
    assert solver.best_weight == 0
    assert solver.cut_edges == frozenset({Edge("b", "c")})


def test_input_graph_is_not_modified(textbook):
    vertices = set(textbook.get_vertices())
    edges = {(e, e.weight) for e in textbook.get_edges()}
    MinCutSolver(textbook)
    assert set(textbook.get_vertices()) == vertices
    assert {(e, e.weight) for e in textbook.get_edges()} == edges
    assert not nx.is_frozen(textbook)


def test_results_are_read_only(two_triangles):
    solver = MinCutSolver(two_triangles)
    with pytest.raises(FrozenGraphError):
        solver.partition1.add_vertex(99)
    with pytest.raises(AttributeError):
        solver.cut_edges.add(Edge(1, 5))  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        solver.best_weight = 0  # type: ignore[misc]


def test_stoer_wagner_function(two_triangles):
    result = stoer_wagner(two_triangles)
    assert isinstance(result, MinCutResult)
    assert result.weight == 1
    assert result.cut_set in (frozenset({1, 2, 3}), frozenset({4, 5, 6}))


def test_result_to_dict(two_triangles):
    data = stoer_wagner(two_triangles).to_dict()
    assert data["weight"] == 1
    assert {tuple(data["partition1"]), tuple(data["partition2"])} == {
        (1, 2, 3),
        (4, 5, 6),
    }
    assert len(data["cut_edges"]) == 1
    u, v, w = data["cut_edges"][0]
    assert {u, v} == {3, 4}
    assert w == 1.0
    assert data["phases"] == 5


def test_min_cut_bounded_by_min_weighted_degree():
    rng = random.Random(7)
    for _ in range(20):
        g = _random_connected_graph(rng, n=rng.randint(2, 12))
        solver = MinCutSolver(g)
        min_degree = min(
            sum(e.weight for e in g.get_edges_of(v)) for v in g.get_vertices()
        )
        assert solver.best_weight <= min_degree
        _assert_consistent(g, solver)


def test_fractional_weights_sum_exactly_to_best_weight():
    rng = random.Random(11)
    for _ in range(100):
        g = _random_connected_graph(rng, n=rng.randint(2, 12))
        for edge in list(g.get_edges()):
            g.add_edge(edge.u, edge.v, rng.choice([0.1, 0.2, 0.3, 0.7]))
        solver = MinCutSolver(g)
        assert sum(e.weight for e in solver.cut_edges) == solver.best_weight
        _assert_consistent(g, solver)


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx_stoer_wagner(seed):
    rng = random.Random(seed)
    g = _random_connected_graph(rng, n=rng.randint(2, 20))
    expected, _ = nx.stoer_wagner(to_networkx(g))
    solver = MinCutSolver(g)
    assert math.isclose(solver.best_weight, expected)
    _assert_consistent(g, solver)


def _random_connected_graph(rng: random.Random, n: int) -> WeightedGraph:
    """Random spanning tree plus extra edges, integer weights 1..10."""
    g = WeightedGraph()
    g.add_vertex(0)
    for v in range(1, n):
        g.add_edge(v, rng.randrange(v), rng.randint(1, 10))
    for _ in range(rng.randint(0, n * 2)):
        u, v = rng.sample(range(n), 2) if n > 1 else (0, 0)
        if u != v:
            g.add_edge(u, v, rng.randint(1, 10))
    return g


def test_result_to_dict_ignores_edge_direction():
    g1 = WeightedGraph()
    g1.add_edge("a", "b", 5)
    g1.add_edge("b", "c", 1)
    g2 = WeightedGraph()
    g2.add_edge("b", "a", 5)
    g2.add_edge("c", "b", 1)

    d1 = stoer_wagner(g1).to_dict()
    d2 = stoer_wagner(g2).to_dict()
    assert d1["cut_edges"] == d2["cut_edges"] == [["b", "c", 1.0]]
