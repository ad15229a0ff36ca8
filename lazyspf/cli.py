"""Command-line interface for lazyspf."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from lazyspf.adapters import from_adjacency
from lazyspf.algorithms.paths import shortest_path, shortest_paths
from lazyspf.algorithms.spf import spf, spf_all
from lazyspf.exceptions import SPFError
from lazyspf.io import Adjacency, load_adjacency_file
from lazyspf.logging import get_logger, level_for_flags, set_global_log_level
from lazyspf.types import Cost

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Cost) -> str:
    """Return integer costs as-is and float costs with at most three decimals."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "123.0 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load_graph(path: Path, source: str) -> Adjacency:
    adjacency = load_adjacency_file(path)
    logger.info("Loaded %s: %d nodes", path, len(adjacency))
    if source not in adjacency:
        logger.warning("Source %r does not appear in %s", source, path)
    return adjacency


def _run_path(
    path: Path,
    source: str,
    target: str,
    all_paths: bool,
    as_json: bool,
) -> None:
    adjacency = _load_graph(path, source)
    successors = from_adjacency(adjacency)

    started = perf_counter()
    if all_paths:
        result = spf_all(successors, source)
        paths, cost = shortest_paths(result, target)
    else:
        tree = spf(successors, source)
        single, cost = shortest_path(tree, target)
        paths = [single]
    logger.info(
        "Search from %r finished in %s", source, _format_duration(perf_counter() - started)
    )

    if as_json:
        payload = {"source": source, "target": target, "cost": cost, "paths": paths}
        print(json.dumps(payload, indent=2))
        return

    print(f"Shortest {'paths' if len(paths) != 1 else 'path'} {source} -> {target}")
    print(f"   cost: {_format_cost(cost)}")
    for hops in paths:
        print("   " + " -> ".join(hops))


def _run_distances(path: Path, source: str, as_json: bool) -> None:
    adjacency = _load_graph(path, source)
    tree = spf(from_adjacency(adjacency), source)

    if as_json:
        payload = {
            "source": source,
            "distances": dict(tree.distances),
            "predecessors": dict(tree.predecessors),
        }
        print(json.dumps(payload, indent=2))
        return

    rows = [
        [str(node), _format_cost(cost), str(tree.predecessors.get(node, "-"))]
        for node, cost in sorted(tree.distances.items(), key=lambda kv: (kv[1], kv[0]))
    ]
    unreachable = len(adjacency) - sum(1 for node in adjacency if node in tree)
    print(f"Distances from {source} ({len(rows)} reachable, {unreachable} unreachable)")
    print(_format_table(["Node", "Cost", "Predecessor"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``lazyspf`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="lazyspf",
        description="Compute shortest paths over a graph described in YAML.",
    )
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
        metavar="{path,distances}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Shortest path(s) between two nodes"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    path_parser.add_argument("--source", "-s", required=True, help="Start node")
    path_parser.add_argument("--target", "-t", required=True, help="Destination node")
    path_parser.add_argument(
        "--all",
        "-a",
        dest="all_paths",
        action="store_true",
        help="Print every tied shortest path instead of one",
    )

    dist_parser = subparsers.add_parser(
        "distances", help="Distance table from a start node"
    )
    dist_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    dist_parser.add_argument("--source", "-s", required=True, help="Start node")

    for p in (path_parser, dist_parser):
        p.add_argument("--json", action="store_true", help="Print JSON to stdout")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        if args.command == "path":
            _run_path(
                path=args.graph,
                source=args.source,
                target=args.target,
                all_paths=args.all_paths,
                as_json=args.json,
            )
        elif args.command == "distances":
            _run_distances(path=args.graph, source=args.source, as_json=args.json)
    except FileNotFoundError:
        logger.error("Graph file not found: %s", args.graph)
        sys.exit(1)
    except SPFError as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
