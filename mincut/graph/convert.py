"""Graph conversion utilities between WeightedGraph and NetworkX graphs.

Directed graphs and multigraphs are consolidated into one undirected edge per
vertex pair. Self-loops are dropped since they never cross a cut.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from mincut.config import GraphConfig, ParallelEdgePolicy
from mincut.graph.weighted_graph import WeightedGraph
from mincut.logging import get_logger

logger = get_logger(__name__)


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.SUM,
    config: Optional[GraphConfig] = None,
) -> WeightedGraph:
    """Convert any NetworkX graph to a WeightedGraph.

    Args:
        nx_graph: Source graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges without ``weight_attr``.
        parallel_edges: How to combine several edges between the same pair
            while converting (multi-edges, or ``u->v`` and ``v->u``).
        config: Configuration for the returned graph; defaults to the global
            GRAPH_CONFIG.

    Returns:
        A WeightedGraph with every node and every non-loop edge of ``nx_graph``.
    """
    staging = WeightedGraph(config=GraphConfig(parallel_edges=parallel_edges))
    staging.add_nodes_from(nx_graph.nodes)

    dropped = 0
    for u, v, data in nx_graph.edges(data=True):
        if u == v:
            dropped += 1
            continue
        staging.add_edge(u, v, data.get(weight_attr, default_weight))
    if dropped:
        logger.debug("Dropped %d self-loop(s) while converting from networkx", dropped)

    if config is None:
        graph = WeightedGraph()
    else:
        graph = WeightedGraph(config=config)
    graph.graph.update(nx_graph.graph)
    for vertex in staging.get_vertices():
        graph.add_vertex(vertex)
    for edge in staging.get_edges():
        graph.add_edge(edge.u, edge.v, edge.weight)
    return graph


def to_networkx(graph: WeightedGraph, weight_attr: str = "weight") -> nx.Graph:
    """Convert a WeightedGraph to a plain NetworkX Graph.

    Args:
        graph: The WeightedGraph to convert.
        weight_attr: Edge attribute name that receives the weight.

    Returns:
        A new ``networkx.Graph`` with the same vertices and weighted edges.
    """
    nx_graph = nx.Graph()
    nx_graph.graph.update(graph.graph)
    nx_graph.add_nodes_from(graph.get_vertices())
    for edge in graph.get_edges():
        nx_graph.add_edge(edge.u, edge.v, **{weight_attr: edge.weight})
    return nx_graph
