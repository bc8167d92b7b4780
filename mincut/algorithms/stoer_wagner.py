"""Stoer-Wagner global minimum cut.

The solver copies the input graph into a working graph keyed by super-vertex
ids and repeats minimum-cut phases until one vertex remains. Each phase grows a
maximum adjacency ordering from an arbitrary start vertex; the attachment
weight of the last vertex ``t`` is the cut-of-the-phase. The lightest
cut-of-the-phase seen over all phases is a global minimum cut, and ``t``'s
represented vertex set is one side of it. After each phase the last two
vertices are contracted into a new super-vertex.

Runtime is O(V * E log V) using a binary heap with lazy deletion.

Example:
    >>> from mincut import WeightedGraph, MinCutSolver
    >>> g = WeightedGraph()
    >>> _ = g.add_edge("a", "b", 3)
    >>> _ = g.add_edge("b", "c", 1)
    >>> MinCutSolver(g).best_weight
    1.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from heapq import heapify, heappop, heappush
from typing import Any, Dict, FrozenSet, List, Optional, Set, Tuple

from mincut.algorithms.registry import SuperVertexRegistry
from mincut.config import SOLVER_CONFIG, GraphConfig, SolverConfig
from mincut.errors import (
    DisconnectedGraphError,
    EmptyGraphError,
    InvalidEdgeError,
    MinCutError,
    TrivialGraphError,
)
from mincut.graph.weighted_graph import Edge, NodeID, WeightedGraph
from mincut.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MinCutResult:
    """Global minimum cut of a weighted graph.

    Attributes:
        weight: Total weight of the cut.
        cut_set: Original vertices on the first side of the cut.
        partition1: Frozen graph induced on ``cut_set``.
        partition2: Frozen graph induced on the remaining vertices.
        cut_edges: Original edges with one endpoint on each side.
        phases: Number of minimum-cut phases executed.
    """

    weight: float
    cut_set: FrozenSet[NodeID]
    partition1: WeightedGraph
    partition2: WeightedGraph
    cut_edges: FrozenSet[Edge]
    phases: int

    def sizes(self) -> Tuple[int, int]:
        """Return the vertex counts of both partitions."""
        return self.partition1.vertex_count(), self.partition2.vertex_count()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "weight": self.weight,
            "partition1": _sorted_labels(self.partition1.get_vertices()),
            "partition2": _sorted_labels(self.partition2.get_vertices()),
            "cut_edges": [
                [*edge.ordered(), edge.weight]
                for edge in sorted(self.cut_edges, key=_edge_sort_key)
            ],
            "phases": self.phases,
        }


class MinCutSolver:
    """Run Stoer-Wagner on a graph and hold the resulting cut.

    The whole algorithm runs inside the constructor; the instance is read-only
    afterwards. The input graph must not be mutated while the constructor runs.

    Args:
        graph: Undirected graph with non-negative edge weights.
        config: Solver options; defaults to the global SOLVER_CONFIG.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        TrivialGraphError: If the graph has exactly one vertex.
        DisconnectedGraphError: If the graph is disconnected and
            ``config.require_connected`` is set.
        InvalidEdgeError: If an edge weight is negative, infinite or NaN.
    """

    def __init__(
        self, graph: WeightedGraph, config: Optional[SolverConfig] = None
    ) -> None:
        self._original = graph
        self._config = config if config is not None else SOLVER_CONFIG
        self._registry = SuperVertexRegistry()
        self._working = WeightedGraph(config=GraphConfig())
        self._best_weight = math.inf
        self._best_cut: FrozenSet[NodeID] = frozenset()
        self._phases = 0

        self._validate()
        self._seed()
        self._find_best_cut()
        self._result = self._build_result()

    #
    # Read-only results
    #
    @property
    def result(self) -> MinCutResult:
        return self._result

    @property
    def partition1(self) -> WeightedGraph:
        return self._result.partition1

    @property
    def partition2(self) -> WeightedGraph:
        return self._result.partition2

    @property
    def cut_edges(self) -> FrozenSet[Edge]:
        return self._result.cut_edges

    @property
    def best_weight(self) -> float:
        return self._result.weight

    @property
    def cut_set(self) -> FrozenSet[NodeID]:
        return self._result.cut_set

    @property
    def phases(self) -> int:
        return self._result.phases

    #
    # Algorithm
    #
    def _validate(self) -> None:
        count = self._original.vertex_count()
        if count == 0:
            raise EmptyGraphError("Cannot cut a graph without vertices.")
        if count == 1:
            raise TrivialGraphError("Cannot cut a graph with a single vertex.")
        for edge in self._original.get_edges():
            if not math.isfinite(edge.weight) or edge.weight < 0:
                raise InvalidEdgeError(
                    f"Edge {edge} has a negative or non-finite weight; "
                    "minimum cut requires finite non-negative weights."
                )
        if not self._original.is_connected():
            if self._config.require_connected:
                raise DisconnectedGraphError("Graph is not connected.")
            logger.warning(
                "Graph is not connected; the minimum cut separates components "
                "and has weight 0."
            )

    def _seed(self) -> None:
        ids: Dict[NodeID, int] = {}
        for vertex in self._original.get_vertices():
            ids[vertex] = self._registry.register((vertex,))
            self._working.add_vertex(ids[vertex])
        for edge in self._original.get_edges():
            self._working.add_edge(ids[edge.u], ids[edge.v], edge.weight)

    def _find_best_cut(self) -> None:
        while self._working.vertex_count() > 1:
            self._minimum_cut_phase()
        logger.debug(
            "Minimum cut weight %s found after %d phases", self._best_weight, self._phases
        )

    def _minimum_cut_phase(self) -> None:
        working = self._working
        vertices = working.get_vertices()

        # Disconnected input (when allowed) seeds every vertex so each phase
        # still orders the whole working graph.
        if self._config.require_connected:
            attachment: Dict[int, float] = {next(iter(vertices)): 0.0}
        else:
            attachment = {vertex: 0.0 for vertex in vertices}
        queue: List[Tuple[float, int]] = [(-w, v) for v, w in attachment.items()]
        heapify(queue)

        selected: Set[int] = set()
        before_last: Optional[int] = None
        last: Optional[int] = None
        cut_of_the_phase = 0.0

        while queue:
            neg_weight, vertex = heappop(queue)
            if vertex in selected or -neg_weight < attachment[vertex]:
                continue  # stale entry

            selected.add(vertex)
            before_last, last = last, vertex
            cut_of_the_phase = -neg_weight

            for edge in working.get_edges_of(vertex):
                other = edge.other(vertex)
                if other in selected:
                    continue
                updated = attachment.get(other, 0.0) + edge.weight
                attachment[other] = updated
                heappush(queue, (-updated, other))

        if (
            len(selected) != working.vertex_count()
            or before_last is None
            or last is None
        ):
            raise MinCutError(
                f"Phase {self._phases} reached {len(selected)} of "
                f"{working.vertex_count()} vertices."
            )

        self._phases += 1
        if cut_of_the_phase < self._best_weight:
            self._best_weight = cut_of_the_phase
            self._best_cut = self._registry.members(last)
            logger.debug(
                "Phase %d: new best cut of weight %s isolating %d vertices",
                self._phases,
                cut_of_the_phase,
                len(self._best_cut),
            )

        self._contract(before_last, last)

    def _contract(self, s: int, t: int) -> None:
        working = self._working
        merged = self._registry.merge(s, t)

        summed: Dict[int, float] = {}
        for vertex in (s, t):
            for edge in working.get_edges_of(vertex):
                other = edge.other(vertex)
                if other == s or other == t:
                    continue
                summed[other] = summed.get(other, 0.0) + edge.weight

        working.remove_vertex(s)
        working.remove_vertex(t)
        working.add_vertex(merged)
        for other, weight in summed.items():
            working.add_edge(merged, other, weight)

    def _build_result(self) -> MinCutResult:
        cut_set = self._best_cut
        original = self._original
        partition1 = original.induced(cut_set).freeze()
        partition2 = original.induced(
            v for v in original.get_vertices() if v not in cut_set
        ).freeze()
        cut_edges = frozenset(
            edge
            for edge in original.get_edges()
            if (edge.u in cut_set) != (edge.v in cut_set)
        )

        cut_weight = math.fsum(edge.weight for edge in cut_edges)
        if not self._config.weights_match(self._best_weight, cut_weight):
            raise MinCutError(
                f"Phase weight {self._best_weight} does not match the weight "
                f"{cut_weight} of the {len(cut_edges)} cut edges."
            )

        # Summed in the stored set order so it equals sum() over cut_edges exactly
        return MinCutResult(
            weight=sum((edge.weight for edge in cut_edges), 0.0),
            cut_set=cut_set,
            partition1=partition1,
            partition2=partition2,
            cut_edges=cut_edges,
            phases=self._phases,
        )


def stoer_wagner(
    graph: WeightedGraph, config: Optional[SolverConfig] = None
) -> MinCutResult:
    """Compute a global minimum cut of ``graph``.

    Args:
        graph: Undirected graph with non-negative edge weights.
        config: Solver options; defaults to the global SOLVER_CONFIG.

    Returns:
        MinCutResult: The cut, its weight and both induced partitions.
    """
    return MinCutSolver(graph, config).result


def _sorted_labels(labels: Any) -> List[Any]:
    try:
        return sorted(labels)
    except TypeError:
        return sorted(labels, key=repr)


def _edge_sort_key(edge: Edge) -> Tuple[str, str]:
    a, b = edge.ordered()
    return str(a), str(b)
