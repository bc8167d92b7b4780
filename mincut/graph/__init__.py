"""Graph primitives and helpers.

This package provides the undirected `WeightedGraph` and its `Edge` type, plus
helper modules for text/YAML input (`io`) and networkx conversion (`convert`).
"""

from mincut.graph.weighted_graph import Edge, NodeID, WeightedGraph

__all__ = [
    "Edge",
    "NodeID",
    "WeightedGraph",
]
