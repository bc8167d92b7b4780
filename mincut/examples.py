"""Built-in example graphs."""

from __future__ import annotations

from typing import Callable, Dict

from mincut.graph.io import parse_adjacency_lines
from mincut.graph.weighted_graph import WeightedGraph

# Eight-vertex example from Stoer and Wagner, "A Simple Min-Cut Algorithm"
# (JACM 1997). Minimum cut weight is 4.
TEXTBOOK_EDGES = [
    (1, 2, 2),
    (1, 5, 3),
    (5, 6, 3),
    (5, 2, 2),
    (2, 6, 2),
    (2, 3, 3),
    (6, 7, 1),
    (3, 7, 2),
    (3, 4, 4),
    (7, 4, 2),
    (7, 8, 3),
    (4, 8, 2),
]

# Three unit edges split this graph into groups of 9 and 6 vertices.
PUZZLE_SAMPLE = """\
jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr
"""


def textbook_graph() -> WeightedGraph:
    """Return the eight-vertex Stoer-Wagner example graph."""
    graph = WeightedGraph()
    for u, v, weight in TEXTBOOK_EDGES:
        graph.add_edge(u, v, weight)
    return graph


def puzzle_sample_graph() -> WeightedGraph:
    """Return the fifteen-vertex unit-weight sample graph."""
    return parse_adjacency_lines(PUZZLE_SAMPLE.splitlines())


EXAMPLES: Dict[str, Callable[[], WeightedGraph]] = {
    "textbook": textbook_graph,
    "sample": puzzle_sample_graph,
}
