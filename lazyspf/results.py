"""Immutable results produced by the shortest-path searches."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterator, List, Mapping, Tuple, TypeVar

from lazyspf.types import Cost

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True)
class SearchStats:
    """Counters collected while running one search.

    Attributes:
        settled: Nodes expanded (successor function calls).
        pushes: Entries pushed onto the frontier.
        pops: Entries popped from the frontier, stale ones included.
        stale: Popped entries discarded because a better cost was already known.
        relaxations: Strict improvements of a recorded cost, first discovery included.
        ties: Equal-cost rediscoveries of an already reached node.
    """

    settled: int = 0
    pushes: int = 0
    pops: int = 0
    stale: int = 0
    relaxations: int = 0
    ties: int = 0


class _SearchResult(Generic[N]):
    """Reachability helpers shared by both result shapes."""

    start: N
    distances: Mapping[N, Cost]

    def __contains__(self, node: object) -> bool:
        return node in self.distances

    def __iter__(self) -> Iterator[N]:
        return iter(self.distances)

    def __len__(self) -> int:
        return len(self.distances)


@dataclass(frozen=True, eq=False)
class ShortestPaths(_SearchResult[N]):
    """Shortest-path tree: one predecessor per reachable non-start node.

    Attributes:
        start: Node the search was rooted at.
        distances: Reachable node -> minimal cost from ``start``. Presence of a key
            is the reachability predicate.
        predecessors: Reachable non-start node -> its predecessor on one shortest
            path. ``start`` never has an entry.
        stats: Search counters.
    """

    start: N
    distances: Mapping[N, Cost]
    predecessors: Mapping[N, N]
    stats: SearchStats = field(default_factory=SearchStats, repr=False)

    @classmethod
    def freeze(
        cls,
        start: N,
        distances: Dict[N, Cost],
        predecessors: Dict[N, N],
        stats: SearchStats,
    ) -> "ShortestPaths[N]":
        """Wrap tables built by a finished search in read-only views."""
        return cls(
            start=start,
            distances=MappingProxyType(distances),
            predecessors=MappingProxyType(predecessors),
            stats=stats,
        )


@dataclass(frozen=True, eq=False)
class AllShortestPaths(_SearchResult[N]):
    """Predecessor DAG capturing every tied shortest path.

    Attributes:
        start: Node the search was rooted at.
        distances: Reachable node -> minimal cost from ``start``.
        predecessors: Reachable non-start node -> non-empty tuple of predecessors,
            each on a shortest path, in the order the ties were discovered.
        stats: Search counters.
    """

    start: N
    distances: Mapping[N, Cost]
    predecessors: Mapping[N, Tuple[N, ...]]
    stats: SearchStats = field(default_factory=SearchStats, repr=False)

    @classmethod
    def freeze(
        cls,
        start: N,
        distances: Dict[N, Cost],
        predecessors: Dict[N, List[N]],
        stats: SearchStats,
    ) -> "AllShortestPaths[N]":
        """Wrap tables built by a finished search in read-only views.

        Predecessor lists become tuples so the result cannot be mutated
        through them.
        """
        frozen_pred = {node: tuple(preds) for node, preds in predecessors.items()}
        return cls(
            start=start,
            distances=MappingProxyType(distances),
            predecessors=MappingProxyType(frozen_pred),
            stats=stats,
        )
