"""Shortest-path-first (SPF) search over implicit graphs.

The graph is never materialized. The caller passes a successor function that,
given a node, returns a mapping of neighbor -> edge weight. The search runs
Dijkstra's relaxation loop until the frontier is exhausted, i.e. over the whole
set of nodes reachable from the start.

Two variants share one loop:

- :func:`spf` keeps a single predecessor per node. On equal-cost
  rediscovery the first-discovered predecessor is kept.
- :func:`spf_all` keeps every predecessor that yields the minimal cost, in
  discovery order, so all tied shortest paths can be enumerated later.

Notes:
    Edge weights must be non-negative. Negative weights are not detected and
    produce undefined results.

    Termination is only guaranteed when the reachable set is finite. Callers
    wanting a bounded exploration should stop returning successors past their
    own depth or cost limit.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

from lazyspf.algorithms.frontier import Frontier
from lazyspf.config import SEARCH_CONFIG, SearchConfig
from lazyspf.exceptions import InvariantViolationError
from lazyspf.logging import get_logger
from lazyspf.results import AllShortestPaths, SearchStats, ShortestPaths
from lazyspf.types import Cost, NodeID, SuccessorFunc

logger = get_logger(__name__)

PredTable = Union[Dict[NodeID, NodeID], Dict[NodeID, List[NodeID]]]


def _record_tie(
    pred: Dict[NodeID, List[NodeID]],
    node_id: NodeID,
    pred_id: NodeID,
    cost: Cost,
) -> None:
    """Append ``pred_id`` to the predecessor list of an already reached node."""
    node_preds = pred.get(node_id)
    if node_preds is None:
        raise InvariantViolationError(
            f"Tie for {node_id!r} at cost {cost!r} but no predecessor list was recorded"
        )
    node_preds.append(pred_id)


def _dijkstra(
    successors: SuccessorFunc,
    start: NodeID,
    multipath: bool,
    config: SearchConfig,
) -> Tuple[Dict[NodeID, Cost], PredTable, SearchStats]:
    """Run the relaxation loop shared by both search variants.

    Args:
        successors: Node -> mapping of neighbor to edge weight.
        start: Source node.
        multipath: If True, record every equal-cost predecessor as a list.
            If False, keep exactly one predecessor per node.
        config: Progress reporting settings.

    Returns:
        A tuple ``(costs, pred, stats)``:
          - costs: Reachable node -> minimal cost from ``start``.
          - pred: Non-start node -> predecessor (or list of predecessors when
            ``multipath`` is set).
          - stats: Search counters.

    Raises:
        InvariantViolationError: If a tie is found for a non-start node that
            has no predecessor list.
        Exception: Whatever the successor function raises, unchanged.
    """
    costs: Dict[NodeID, Cost] = {start: 0}
    pred: dict = {}
    frontier: Frontier[NodeID] = Frontier()
    frontier.push(start, 0)

    settled = stale = relaxations = ties = 0
    debug = logger.isEnabledFor(logging.DEBUG)

    while frontier:
        node_id, current_cost = frontier.pop()
        # Stale entry: a cheaper cost was recorded after this one was pushed.
        if current_cost > costs[node_id]:
            stale += 1
            continue

        settled += 1
        if debug and config.should_report_progress(settled):
            logger.debug(
                "SPF from %r: settled=%d pending=%d reached=%d",
                start,
                settled,
                len(frontier),
                len(costs),
            )

        for neighbor_id, weight in successors(node_id).items():
            new_cost = current_cost + weight
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = [node_id] if multipath else node_id
                frontier.push(neighbor_id, new_cost)
                relaxations += 1
            elif new_cost == costs[neighbor_id]:
                ties += 1
                # The start node never gains a predecessor, even through a
                # zero-cost cycle.
                if not multipath or neighbor_id == start:
                    continue
                _record_tie(pred, neighbor_id, node_id, new_cost)

    stats = SearchStats(
        settled=settled,
        pushes=frontier.pushes,
        pops=frontier.pops,
        stale=stale,
        relaxations=relaxations,
        ties=ties,
    )
    if debug:
        logger.debug(
            "SPF from %r finished: reached=%d settled=%d stale=%d ties=%d",
            start,
            len(costs),
            settled,
            stale,
            ties,
        )
    return costs, pred, stats


def spf(
    successors: SuccessorFunc,
    start: NodeID,
    config: Optional[SearchConfig] = None,
) -> ShortestPaths:
    """Compute a shortest-path tree from ``start``.

    Each reachable non-start node gets exactly one predecessor. When several
    paths tie, the predecessor discovered first wins; which one that is depends
    on the iteration order of the successor mappings.

    Args:
        successors: Node -> mapping of neighbor to non-negative edge weight.
            Called once per settled node.
        start: Source node.
        config: Optional search settings. Defaults to ``SEARCH_CONFIG``.

    Returns:
        Frozen :class:`ShortestPaths` result.

    Example:
        >>> graph = {0: {1: 4, 2: 3}, 1: {3: 5}, 2: {3: 5}, 3: {}}
        >>> result = spf(graph.__getitem__, 0)
        >>> dict(result.distances)
        {0: 0, 1: 4, 2: 3, 3: 8}
    """
    costs, pred, stats = _dijkstra(
        successors, start, multipath=False, config=config or SEARCH_CONFIG
    )
    return ShortestPaths.freeze(start, costs, pred, stats)


def spf_all(
    successors: SuccessorFunc,
    start: NodeID,
    config: Optional[SearchConfig] = None,
) -> AllShortestPaths:
    """Compute the predecessor DAG of all tied shortest paths from ``start``.

    Distances are identical to :func:`spf`. On an equal-cost rediscovery the
    new predecessor is appended instead of discarded.

    Args:
        successors: Node -> mapping of neighbor to non-negative edge weight.
            Called once per settled node.
        start: Source node.
        config: Optional search settings. Defaults to ``SEARCH_CONFIG``.

    Returns:
        Frozen :class:`AllShortestPaths` result.
    """
    costs, pred, stats = _dijkstra(
        successors, start, multipath=True, config=config or SEARCH_CONFIG
    )
    return AllShortestPaths.freeze(start, costs, pred, stats)


__all__ = ["spf", "spf_all"]
