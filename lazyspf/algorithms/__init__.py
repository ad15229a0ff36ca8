"""Shortest-path search engines and path reconstruction."""

from lazyspf.algorithms.frontier import Frontier
from lazyspf.algorithms.paths import (
    count_shortest_paths,
    has_path_to,
    iter_shortest_paths,
    path_cost,
    shortest_path,
    shortest_paths,
)
from lazyspf.algorithms.spf import spf, spf_all

__all__ = [
    "Frontier",
    "spf",
    "spf_all",
    "has_path_to",
    "shortest_path",
    "shortest_paths",
    "iter_shortest_paths",
    "count_shortest_paths",
    "path_cost",
]
