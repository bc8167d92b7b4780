"""mincut: weighted undirected graphs and global minimum cuts.

Primary API:
    WeightedGraph, Edge - Undirected weighted graph with one edge per vertex pair
    MinCutSolver - Stoer-Wagner global minimum cut, computed on construction
    stoer_wagner() - Functional shortcut returning a MinCutResult
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from mincut import WeightedGraph, MinCutSolver

    g = WeightedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("D", "A", 1)
    g.add_edge("A", "C", 5)

    solver = MinCutSolver(g)
    solver.best_weight            # 2.0
    solver.partition1.get_vertices()
    solver.cut_edges
"""

from __future__ import annotations

from mincut import cli, logging
from mincut._version import __version__
from mincut.algorithms.registry import SuperVertexRegistry
from mincut.algorithms.stoer_wagner import MinCutResult, MinCutSolver, stoer_wagner
from mincut.config import GraphConfig, ParallelEdgePolicy, SolverConfig
from mincut.errors import (
    DisconnectedGraphError,
    EmptyGraphError,
    FrozenGraphError,
    GraphFormatError,
    InvalidEdgeError,
    MinCutError,
    TrivialGraphError,
    VertexNotFoundError,
)
from mincut.graph.convert import from_networkx, to_networkx
from mincut.graph.io import (
    edgelist_to_graph,
    load_yaml_graph,
    parse_adjacency_lines,
    read_graph,
)
from mincut.graph.weighted_graph import Edge, WeightedGraph

__all__ = [
    # Version
    "__version__",
    # Graph
    "Edge",
    "WeightedGraph",
    # Algorithm
    "MinCutSolver",
    "MinCutResult",
    "SuperVertexRegistry",
    "stoer_wagner",
    # Configuration
    "GraphConfig",
    "ParallelEdgePolicy",
    "SolverConfig",
    # Errors
    "MinCutError",
    "InvalidEdgeError",
    "VertexNotFoundError",
    "FrozenGraphError",
    "EmptyGraphError",
    "TrivialGraphError",
    "DisconnectedGraphError",
    "GraphFormatError",
    # Input and interop
    "parse_adjacency_lines",
    "edgelist_to_graph",
    "load_yaml_graph",
    "read_graph",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
