"""lazyspf: single-source shortest paths over implicit graphs.

The graph is described by a successor function instead of a data structure:
given a node, it returns a mapping of neighbor -> non-negative edge weight.
Nodes are expanded lazily, so procedurally generated state spaces work as
well as concrete graphs.

Primary API:
    spf() - Shortest-path tree (one predecessor per node)
    spf_all() - Predecessor DAG keeping every tied shortest path
    has_path_to() - Reachability query on either result
    shortest_path() - Reconstruct one path and its cost
    shortest_paths() - Reconstruct every tied shortest path and their cost

Example:
    from lazyspf import spf, spf_all, shortest_path, shortest_paths

    graph = {0: {1: 4, 2: 3}, 1: {3: 5}, 2: {3: 5}, 3: {}}
    tree = spf(graph.__getitem__, 0)
    shortest_path(tree, 3)        # ([0, 2, 3], 8)

    diamond = {0: {1: 1, 2: 1}, 1: {3: 1}, 2: {3: 1}, 3: {}}
    dag = spf_all(diamond.__getitem__, 0)
    shortest_paths(dag, 3)        # ([[0, 1, 3], [0, 2, 3]], 2)
"""

from __future__ import annotations

from lazyspf import logging
from lazyspf._version import __version__
from lazyspf.adapters import from_adjacency, from_networkx
from lazyspf.algorithms.paths import (
    count_shortest_paths,
    has_path_to,
    iter_shortest_paths,
    path_cost,
    shortest_path,
    shortest_paths,
)
from lazyspf.algorithms.spf import spf, spf_all
from lazyspf.config import SEARCH_CONFIG, SearchConfig
from lazyspf.exceptions import (
    GraphFormatError,
    InvariantViolationError,
    SPFError,
    UnreachableNodeError,
)
from lazyspf.results import AllShortestPaths, SearchStats, ShortestPaths

__all__ = [
    # Version
    "__version__",
    # Search
    "spf",
    "spf_all",
    # Results
    "ShortestPaths",
    "AllShortestPaths",
    "SearchStats",
    # Reconstruction
    "has_path_to",
    "shortest_path",
    "shortest_paths",
    "iter_shortest_paths",
    "count_shortest_paths",
    "path_cost",
    # Adapters
    "from_adjacency",
    "from_networkx",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "SPFError",
    "UnreachableNodeError",
    "InvariantViolationError",
    "GraphFormatError",
    # Utilities
    "logging",
]
