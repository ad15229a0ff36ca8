"""Reachability queries and path reconstruction over search results."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple, Union

from lazyspf.config import SEARCH_CONFIG, SearchConfig
from lazyspf.exceptions import InvariantViolationError, UnreachableNodeError
from lazyspf.logging import get_logger
from lazyspf.results import AllShortestPaths, ShortestPaths
from lazyspf.types import Cost, NodeID, SuccessorFunc

logger = get_logger(__name__)


def has_path_to(result: Union[ShortestPaths, AllShortestPaths], node: NodeID) -> bool:
    """Return True if ``node`` was reached by the search. Never raises."""
    return node in result.distances


def _require_reachable(
    result: Union[ShortestPaths, AllShortestPaths], dest: NodeID
) -> Cost:
    try:
        return result.distances[dest]
    except KeyError:
        raise UnreachableNodeError(dest, result.start) from None


def shortest_path(result: ShortestPaths, dest: NodeID) -> Tuple[List[NodeID], Cost]:
    """Reconstruct the recorded shortest path from the search start to ``dest``.

    Args:
        result: Result of :func:`~lazyspf.algorithms.spf.spf`.
        dest: Destination node.

    Returns:
        ``(path, cost)`` where ``path`` runs from start to ``dest`` inclusive.
        When ``dest`` is the start node the path is ``[dest]`` and cost is 0.

    Raises:
        UnreachableNodeError: If ``dest`` was not reached by the search.
        InvariantViolationError: If predecessor links do not lead back to start.
    """
    cost = _require_reachable(result, dest)
    predecessors = result.predecessors
    limit = len(result.distances)

    path = [dest]
    node = dest
    while node in predecessors:
        node = predecessors[node]
        path.append(node)
        if len(path) > limit:
            raise InvariantViolationError(
                f"Predecessor chain from {dest!r} does not terminate at {result.start!r}"
            )
    path.reverse()
    return path, cost


def iter_shortest_paths(
    result: AllShortestPaths,
    dest: NodeID,
    config: Optional[SearchConfig] = None,
) -> Iterator[List[NodeID]]:
    """Lazily enumerate every tied shortest path from the search start to ``dest``.

    Paths are produced depth first. At each node the predecessors are tried in
    the order they were recorded, so the first path follows the first
    predecessor all the way back to the start. The number of paths can grow
    exponentially with the number of tie junctions; iterate instead of calling
    :func:`shortest_paths` when that matters.

    A predecessor that already lies on the partial path is skipped. This only
    happens with zero-weight cycles.

    Args:
        result: Result of :func:`~lazyspf.algorithms.spf.spf_all`.
        dest: Destination node.
        config: Optional settings; ``path_warning_threshold`` controls a one-off
            warning for very large enumerations.

    Yields:
        Node lists running from start to ``dest`` inclusive.

    Raises:
        UnreachableNodeError: If ``dest`` was not reached by the search. Raised
            on the first ``next()`` call.
    """
    _require_reachable(result, dest)
    config = config or SEARCH_CONFIG
    predecessors = result.predecessors

    seen: Set[NodeID] = {dest}
    # Each stack entry: [node, index of the next predecessor to try]
    stack: List[List] = [[dest, 0]]
    top = 0
    emitted = 0

    while top >= 0:
        current_node, pred_idx = stack[top]
        current_preds = predecessors.get(current_node, ())

        if not current_preds:
            emitted += 1
            if emitted == config.path_warning_threshold + 1:
                logger.warning(
                    "Enumerating more than %d tied shortest paths from %r to %r",
                    config.path_warning_threshold,
                    result.start,
                    dest,
                )
            yield [frame[0] for frame in reversed(stack[: top + 1])]

        if pred_idx < len(current_preds):
            stack[top][1] = pred_idx + 1
            next_pred = current_preds[pred_idx]
            if next_pred in seen:
                continue
            seen.add(next_pred)

            top += 1
            if top == len(stack):
                stack.append([next_pred, 0])
            else:
                stack[top] = [next_pred, 0]
        else:
            # backtrack
            seen.discard(current_node)
            top -= 1


def shortest_paths(
    result: AllShortestPaths,
    dest: NodeID,
    config: Optional[SearchConfig] = None,
) -> Tuple[List[List[NodeID]], Cost]:
    """Return every tied shortest path to ``dest`` and their shared cost.

    Args:
        result: Result of :func:`~lazyspf.algorithms.spf.spf_all`.
        dest: Destination node.
        config: Optional settings forwarded to :func:`iter_shortest_paths`.

    Returns:
        ``(paths, cost)``; see :func:`iter_shortest_paths` for path order.

    Raises:
        UnreachableNodeError: If ``dest`` was not reached by the search.
    """
    cost = _require_reachable(result, dest)
    return list(iter_shortest_paths(result, dest, config)), cost


def count_shortest_paths(result: AllShortestPaths, dest: NodeID) -> int:
    """Count tied shortest paths to ``dest`` without enumerating them.

    Uses memoized counting over the predecessor DAG, iteratively. The result
    always equals ``len(shortest_paths(...)[0])``. Zero-weight cycles can make
    the predecessor graph cyclic; memoized counts are then path dependent, so
    the paths are enumerated and counted instead.

    Raises:
        UnreachableNodeError: If ``dest`` was not reached by the search.
    """
    _require_reachable(result, dest)
    predecessors = result.predecessors

    counts: Dict[NodeID, int] = {}
    in_progress: Set[NodeID] = set()
    stack: List[NodeID] = [dest]

    while stack:
        node = stack[-1]
        if node in counts:
            stack.pop()
            continue
        preds = predecessors.get(node, ())
        if not preds:
            counts[node] = 1
            stack.pop()
            continue
        if node not in in_progress:
            in_progress.add(node)
            stack.extend(
                p for p in preds if p not in counts and p not in in_progress
            )
            continue
        if not all(p in counts for p in preds):
            # A predecessor is still on the DFS path: cycle
            return sum(1 for _ in iter_shortest_paths(result, dest))
        counts[node] = sum(counts[p] for p in preds)
        in_progress.discard(node)
        stack.pop()

    return counts[dest]


def path_cost(successors: SuccessorFunc, path: Sequence[NodeID]) -> Cost:
    """Sum edge weights along ``path`` as reported by the successor function.

    Args:
        successors: The same successor function given to the search.
        path: Node sequence, start first.

    Returns:
        Total cost; 0 for a single-node path.

    Raises:
        ValueError: If ``path`` is empty or a hop is not an edge.
    """
    if not path:
        raise ValueError("Cannot compute the cost of an empty path")

    total: Cost = 0
    for src, dst in zip(path, path[1:]):
        edges = successors(src)
        if dst not in edges:
            raise ValueError(f"No edge from {src!r} to {dst!r}")
        total += edges[dst]
    return total


__all__ = [
    "has_path_to",
    "shortest_path",
    "shortest_paths",
    "iter_shortest_paths",
    "count_shortest_paths",
    "path_cost",
]
