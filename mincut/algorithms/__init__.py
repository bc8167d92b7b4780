"""Graph algorithms: the Stoer-Wagner minimum cut and its super-vertex registry."""

from mincut.algorithms.registry import SuperVertexRegistry
from mincut.algorithms.stoer_wagner import MinCutResult, MinCutSolver, stoer_wagner

__all__ = [
    "MinCutResult",
    "MinCutSolver",
    "SuperVertexRegistry",
    "stoer_wagner",
]
