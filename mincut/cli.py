"""Command-line interface for mincut."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from mincut.algorithms.stoer_wagner import MinCutResult, MinCutSolver
from mincut.config import SolverConfig
from mincut.errors import MinCutError
from mincut.examples import EXAMPLES
from mincut.graph.io import FORMATS, read_graph
from mincut.graph.weighted_graph import WeightedGraph
from mincut.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Format a duration in seconds as a short human-readable string."""
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _format_vertices(vertices: Any) -> str:
    try:
        ordered = sorted(vertices)
    except TypeError:
        ordered = sorted(vertices, key=str)
    return "{" + ", ".join(str(v) for v in ordered) + "}"


def _print_result(result: MinCutResult, elapsed: float) -> None:
    size1, size2 = result.sizes()
    edges = sorted(result.cut_edges, key=lambda e: tuple(map(str, e.ordered())))
    print(f"partition group 1: {_format_vertices(result.partition1.get_vertices())}")
    print(f"partition group 2: {_format_vertices(result.partition2.get_vertices())}")
    print("edges cut: " + ", ".join(str(edge) for edge in edges))
    print(f"cost of cut: {result.weight:g}")
    print(f"partition size product: {size1 * size2}")
    print(f"time: {_format_duration(elapsed)}")


def _solve(graph: WeightedGraph, as_json: bool, allow_disconnected: bool) -> None:
    logger.info(
        "Solving minimum cut for %d vertices and %d edges",
        graph.vertex_count(),
        graph.edge_count(),
    )
    config = SolverConfig(require_connected=not allow_disconnected)

    start = perf_counter()
    result = MinCutSolver(graph, config).result
    elapsed = perf_counter() - start
    logger.debug("Solved in %d phases", result.phases)

    if as_json:
        size1, size2 = result.sizes()
        payload: Dict[str, Any] = result.to_dict()
        payload["size_product"] = size1 * size2
        payload["elapsed_seconds"] = elapsed
        print(json.dumps(payload, indent=2, default=str))
    else:
        _print_result(result, elapsed)


def _run_cut(path: Path, fmt: Optional[str], as_json: bool, allow_disconnected: bool) -> None:
    try:
        graph = read_graph(path, fmt)
    except FileNotFoundError:
        print(f"Can not find: {path}", file=sys.stderr)
        sys.exit(1)
    except MinCutError as exc:
        print(f"Invalid graph file {path}: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("Loaded graph from %s", path)
    try:
        _solve(graph, as_json, allow_disconnected)
    except MinCutError as exc:
        print(f"Cannot cut {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def _run_example(name: str, as_json: bool) -> None:
    graph = EXAMPLES[name]()
    logger.info("Using built-in example '%s'", name)
    _solve(graph, as_json, allow_disconnected=False)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``mincut`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="mincut",
        description="Compute global minimum cuts of weighted graphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{cut,example}",
        help="Available commands",
    )

    # Cut command
    cut_parser = subparsers.add_parser("cut", help="Cut a graph read from a file")
    cut_parser.add_argument("graph", type=Path, help="Path to the graph file")
    cut_parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=None,
        help="Input format (default: guessed from the file suffix, else adjacency)",
    )
    cut_parser.add_argument(
        "--allow-disconnected",
        action="store_true",
        help="Cut disconnected graphs instead of rejecting them",
    )

    # Example command
    example_parser = subparsers.add_parser("example", help="Cut a built-in graph")
    example_parser.add_argument("name", choices=sorted(EXAMPLES), help="Example name")

    for p in (cut_parser, example_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "cut":
        _run_cut(args.graph, args.format, args.json, args.allow_disconnected)
    elif args.command == "example":
        _run_example(args.name, args.json)


if __name__ == "__main__":
    main()
