"""Text and YAML input/output for WeightedGraph.

Supported inputs:
  - adjacency lines, ``name: neighbor1 neighbor2 ...`` with unit weights
  - edge lists, ``u v [weight]`` per line, ``#`` starts a comment
  - YAML documents with ``vertices`` and ``edges`` keys
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from mincut.errors import GraphFormatError
from mincut.graph.weighted_graph import WeightedGraph

ADJACENCY = "adjacency"
EDGELIST = "edgelist"
YAML = "yaml"
FORMATS = (ADJACENCY, EDGELIST, YAML)

_SUFFIX_FORMATS = {
    ".yaml": YAML,
    ".yml": YAML,
    ".edges": EDGELIST,
    ".edgelist": EDGELIST,
}


def parse_adjacency_lines(
    lines: Iterable[str],
    weight: float = 1.0,
    graph: Optional[WeightedGraph] = None,
) -> WeightedGraph:
    """Build or update a graph from ``name: neighbor1 neighbor2 ...`` lines.

    Every neighbor listed after the colon becomes an edge of weight ``weight``
    to ``name``. Blank lines are skipped. A name without neighbors is added
    as an isolated vertex.

    Args:
        lines: An iterable of strings, one vertex per line.
        weight: Weight given to every edge.
        graph: An existing graph to update; if None, a new graph is created.

    Returns:
        The updated (or newly created) WeightedGraph.

    Raises:
        GraphFormatError: If a line has no colon or an empty name.
    """
    if graph is None:
        graph = WeightedGraph()

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        name, sep, rest = line.partition(":")
        name = name.strip()
        if not sep or not name:
            raise GraphFormatError(
                f"Line {lineno} '{line}' is not of the form 'name: neighbor ...'."
            )
        graph.add_vertex(name)
        for neighbor in rest.split():
            graph.add_edge(name, neighbor, weight)

    return graph


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    default_weight: float = 1.0,
    graph: Optional[WeightedGraph] = None,
) -> WeightedGraph:
    """Build or update a graph from an edge list.

    Each non-empty line holds ``u v`` or ``u v weight``. Text after ``#`` is
    ignored. Vertex labels are kept as strings.

    Args:
        lines: An iterable of strings, each representing one edge.
        separator: Token separator; None splits on any whitespace.
        default_weight: Weight for lines without a third column.
        graph: An existing graph to update; if None, a new graph is created.

    Returns:
        The updated (or newly created) WeightedGraph.

    Raises:
        GraphFormatError: On a wrong token count or a non-numeric weight.
    """
    if graph is None:
        graph = WeightedGraph()

    for lineno, line in enumerate(lines, start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = [t.strip() for t in line.split(separator)]
        if len(tokens) == 2:
            u, v = tokens
            weight: Any = default_weight
        elif len(tokens) == 3:
            u, v, weight = tokens
        else:
            raise GraphFormatError(
                f"Line {lineno} '{line}' must have 2 or 3 columns, got {len(tokens)}."
            )
        try:
            weight = float(weight)
        except ValueError as exc:
            raise GraphFormatError(
                f"Line {lineno}: weight '{weight}' is not a number."
            ) from exc
        graph.add_edge(u, v, weight)

    return graph


def graph_to_edgelist(graph: WeightedGraph, separator: str = " ") -> List[str]:
    """Convert a graph into ``u v weight`` lines, one per edge.

    Isolated vertices are not represented.
    """
    lines = []
    for edge in graph.get_edges():
        u, v = edge.ordered()
        lines.append(separator.join((str(u), str(v), f"{edge.weight:g}")))
    return lines


def load_yaml_graph(
    text: str, graph: Optional[WeightedGraph] = None
) -> WeightedGraph:
    """Build or update a graph from a YAML document.

    Expected structure::

        vertices: [a, b, c]        # optional, for isolated vertices
        edges:
          - [a, b, 2.5]
          - [b, c]                 # weight defaults to 1
          - {u: a, v: c, weight: 4}

    Args:
        text: YAML source.
        graph: An existing graph to update; if None, a new graph is created.

    Returns:
        The updated (or newly created) WeightedGraph.

    Raises:
        GraphFormatError: If the document does not have the expected shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GraphFormatError(f"Invalid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GraphFormatError("Graph YAML must be a mapping with an 'edges' key.")
    unknown = set(data) - {"vertices", "edges"}
    if unknown:
        raise GraphFormatError(f"Unrecognized graph keys: {sorted(unknown)}")

    if graph is None:
        graph = WeightedGraph()

    for vertex in data.get("vertices") or []:
        graph.add_vertex(vertex)

    for entry in data.get("edges") or []:
        if isinstance(entry, dict):
            try:
                u, v = entry["u"], entry["v"]
            except KeyError as exc:
                raise GraphFormatError(f"Edge {entry!r} needs 'u' and 'v'.") from exc
            weight = entry.get("weight", 1.0)
        elif isinstance(entry, list) and len(entry) in (2, 3):
            u, v = entry[0], entry[1]
            weight = entry[2] if len(entry) == 3 else 1.0
        else:
            raise GraphFormatError(
                f"Edge {entry!r} must be [u, v], [u, v, weight] or a mapping."
            )
        graph.add_edge(u, v, weight)

    return graph


def graph_to_node_link(graph: WeightedGraph) -> Dict[str, Any]:
    """Convert a graph into a node-link dict suitable for JSON serialization.

    The returned dict has the following structure::

        {
            "graph": {...},
            "nodes": [{"id": node_id}, ...],
            "links": [{"source": index, "target": index, "weight": w}, ...]
        }

    Nodes are sorted and each link lists its endpoints in canonical order.
    """
    try:
        node_list = sorted(graph.get_vertices())
    except TypeError:
        node_list = sorted(graph.get_vertices(), key=repr)
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    links = []
    for edge in graph.get_edges():
        u, v = edge.ordered()
        links.append(
            {"source": node_map[u], "target": node_map[v], "weight": edge.weight}
        )

    return {
        "graph": dict(graph.graph),
        "nodes": [{"id": node_id} for node_id in node_list],
        "links": links,
    }


def detect_format(path: Path) -> str:
    """Guess the input format from a file suffix; adjacency is the fallback."""
    return _SUFFIX_FORMATS.get(path.suffix.lower(), ADJACENCY)


def read_graph(path: Union[str, Path], fmt: Optional[str] = None) -> WeightedGraph:
    """Read a graph file.

    Args:
        path: File to read.
        fmt: One of ``adjacency``, ``edgelist`` or ``yaml``; guessed from the
            suffix when None.

    Returns:
        The parsed WeightedGraph.

    Raises:
        FileNotFoundError: If the file does not exist.
        GraphFormatError: If the content or ``fmt`` is invalid.
    """
    path = Path(path)
    fmt = fmt or detect_format(path)
    if fmt not in FORMATS:
        raise GraphFormatError(f"Unknown graph format '{fmt}'; expected one of {FORMATS}.")

    text = path.read_text(encoding="utf-8")
    if fmt == YAML:
        return load_yaml_graph(text)
    if fmt == EDGELIST:
        return edgelist_to_graph(text.splitlines())
    return parse_adjacency_lines(text.splitlines())
