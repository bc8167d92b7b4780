"""Configuration classes for mincut components."""

from dataclasses import dataclass
from enum import Enum


class ParallelEdgePolicy(Enum):
    """How `WeightedGraph.add_edge` resolves a second edge between the same pair.

    Only one edge per unordered vertex pair is ever stored; the policy decides
    which weight that edge ends up with.
    """

    # Last write wins
    REPLACE = "replace"
    # First write wins, later edges are ignored
    KEEP = "keep"
    # Weights accumulate, as in a multigraph collapsed to a simple graph
    SUM = "sum"
    # Heaviest edge wins
    MAX = "max"


@dataclass(frozen=True)
class GraphConfig:
    """Configuration for `WeightedGraph` mutation."""

    parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.REPLACE


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the Stoer-Wagner solver."""

    # Reject disconnected input before running any phase
    require_connected: bool = True

    # Allowed drift between the best phase weight and the summed cut edges
    weight_tolerance: float = 1e-9

    def weights_match(self, phase_weight: float, cut_weight: float) -> bool:
        """Return True if two cut weights agree within the configured tolerance."""
        scale = max(1.0, abs(phase_weight), abs(cut_weight))
        return abs(phase_weight - cut_weight) <= self.weight_tolerance * scale


# Global configuration instances
GRAPH_CONFIG = GraphConfig()
SOLVER_CONFIG = SolverConfig()
