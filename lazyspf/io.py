"""Loading adjacency documents for use with the search engine.

Two YAML layouts are accepted.

Edge list::

    edges:
      - {source: A, target: B, weight: 1}
      - {source: B, target: C, weight: 2}
    bidirectional: false   # optional, add the reverse of every edge

Adjacency mapping::

    adjacency:
      A: {B: 1}
      B: {C: 2}

Node identifiers are normalized to strings. Weights must be non-negative
numbers. JSON is a subset of YAML and is accepted as well.
"""

from __future__ import annotations

from numbers import Real
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from lazyspf.exceptions import GraphFormatError
from lazyspf.logging import get_logger
from lazyspf.types import Cost
from lazyspf.utils.yaml_utils import normalize_node_id, normalize_yaml_dict_keys

logger = get_logger(__name__)

Adjacency = Dict[str, Dict[str, Cost]]

_ALLOWED_TOP_LEVEL = {"edges", "adjacency", "bidirectional"}
_ALLOWED_EDGE_KEYS = {"source", "target", "weight"}


def _check_weight(value: Any, where: str) -> Cost:
    # bool is a subclass of int; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise GraphFormatError(f"{where}: weight must be a number, got {value!r}")
    if value < 0:
        raise GraphFormatError(f"{where}: weight must be non-negative, got {value!r}")
    return value


def _add_edge(adjacency: Adjacency, src: str, dst: str, weight: Cost) -> None:
    adjacency.setdefault(src, {})
    adjacency.setdefault(dst, {})
    previous = adjacency[src].get(dst)
    # Parallel edges collapse to the cheapest one
    if previous is None or weight < previous:
        adjacency[src][dst] = weight


def _parse_edges(edges: Any, bidirectional: bool) -> Adjacency:
    if not isinstance(edges, list):
        raise GraphFormatError("'edges' must be a list")

    adjacency: Adjacency = {}
    for idx, entry in enumerate(edges):
        where = f"edges[{idx}]"
        if not isinstance(entry, dict):
            raise GraphFormatError(
                f"{where}: each edge must be a mapping with 'source' and 'target'"
            )
        for key in entry:
            if key not in _ALLOWED_EDGE_KEYS:
                raise GraphFormatError(f"{where}: unrecognized key '{key}'")
        if "source" not in entry or "target" not in entry:
            raise GraphFormatError(f"{where}: edge must include 'source' and 'target'")

        src = normalize_node_id(entry["source"])
        dst = normalize_node_id(entry["target"])
        weight = _check_weight(entry.get("weight", 1), where)
        _add_edge(adjacency, src, dst, weight)
        if bidirectional:
            _add_edge(adjacency, dst, src, weight)
    return adjacency


def _parse_adjacency(section: Any) -> Adjacency:
    if not isinstance(section, dict):
        raise GraphFormatError("'adjacency' must be a mapping")

    adjacency: Adjacency = {}
    for src, neighbors in normalize_yaml_dict_keys(section).items():
        if neighbors is None:
            neighbors = {}
        if not isinstance(neighbors, dict):
            raise GraphFormatError(
                f"adjacency[{src!r}]: successors must be a mapping of node to weight"
            )
        adjacency.setdefault(src, {})
        for dst, weight in normalize_yaml_dict_keys(neighbors).items():
            adjacency.setdefault(dst, {})
            adjacency[src][dst] = _check_weight(weight, f"adjacency[{src!r}][{dst!r}]")
    return adjacency


def load_adjacency(text: str) -> Adjacency:
    """Parse a YAML (or JSON) adjacency document.

    Args:
        text: Document contents.

    Returns:
        ``{node: {neighbor: weight}}`` with string node identifiers. Every node
        that appears anywhere has an entry, possibly empty.

    Raises:
        GraphFormatError: If the document is not valid YAML or has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GraphFormatError(f"Invalid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GraphFormatError("The provided YAML must map to a dictionary at top-level.")

    for key in data:
        if key not in _ALLOWED_TOP_LEVEL:
            raise GraphFormatError(f"Unrecognized top-level key '{key}'")

    if "edges" in data and "adjacency" in data:
        raise GraphFormatError("Use either 'edges' or 'adjacency', not both")

    bidirectional = data.get("bidirectional", False)
    if not isinstance(bidirectional, bool):
        raise GraphFormatError("'bidirectional' must be true or false")

    if "adjacency" in data:
        if bidirectional:
            raise GraphFormatError("'bidirectional' only applies to 'edges'")
        adjacency = _parse_adjacency(data["adjacency"])
    else:
        adjacency = _parse_edges(data.get("edges", []), bidirectional)

    logger.debug(
        "Loaded adjacency with %d nodes and %d edges",
        len(adjacency),
        sum(len(nbrs) for nbrs in adjacency.values()),
    )
    return adjacency


def load_adjacency_file(path: Union[str, Path]) -> Adjacency:
    """Read ``path`` and parse it with :func:`load_adjacency`.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If the contents are malformed.
    """
    return load_adjacency(Path(path).read_text(encoding="utf-8"))


__all__ = ["Adjacency", "load_adjacency", "load_adjacency_file"]
