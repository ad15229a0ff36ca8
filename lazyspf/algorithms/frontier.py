"""Min-priority queue used as the search frontier."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Generic, Hashable, Iterator, List, Tuple, TypeVar

from lazyspf.types import Cost

N = TypeVar("N", bound=Hashable)


class Frontier(Generic[N]):
    """Binary-heap frontier of ``(node, cost)`` entries ordered by ascending cost.

    Entries with equal cost pop in insertion order. A monotonic sequence number
    sits between cost and node in each heap item, so nodes themselves are never
    compared and only need to be hashable.

    The frontier is a multiset: the same node may be pushed several times with
    decreasing costs. Callers are expected to discard stale entries on pop.
    """

    __slots__ = ("_heap", "_seq", "pushes", "pops")

    def __init__(self) -> None:
        self._heap: List[Tuple[Cost, int, N]] = []
        self._seq: Iterator[int] = count()
        self.pushes = 0
        self.pops = 0

    def push(self, node: N, cost: Cost) -> None:
        heappush(self._heap, (cost, next(self._seq), node))
        self.pushes += 1

    def pop(self) -> Tuple[N, Cost]:
        """Remove and return the minimum-cost entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        cost, _, node = heappop(self._heap)
        self.pops += 1
        return node, cost

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"Frontier(pending={len(self._heap)}, pushes={self.pushes}, pops={self.pops})"
