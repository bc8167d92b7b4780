"""Exception hierarchy for mincut.

Every error raised by the package derives from `MinCutError`. Each concrete
error also derives from the closest built-in exception so callers that catch
``ValueError`` or ``KeyError`` keep working.
"""

from __future__ import annotations


class MinCutError(Exception):
    """Base class for all mincut errors."""


class InvalidEdgeError(MinCutError, ValueError):
    """Edge is a self-loop, has an undefined endpoint, or an unusable weight."""


class VertexNotFoundError(MinCutError, KeyError):
    """Operation referenced a vertex that is not in the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class FrozenGraphError(MinCutError, RuntimeError):
    """Attempted to mutate a graph that has been frozen."""


class EmptyGraphError(MinCutError, ValueError):
    """Minimum cut requested on a graph without vertices."""


class TrivialGraphError(MinCutError, ValueError):
    """Minimum cut requested on a graph with a single vertex."""


class DisconnectedGraphError(MinCutError, ValueError):
    """Minimum cut requested on a graph that is not connected."""


class GraphFormatError(MinCutError, ValueError):
    """Graph input text or document could not be parsed."""
