"""Shared fixtures: successor functions over small sample graphs."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, List, Mapping

import pytest


class CountingSuccessors:
    """Successor function over an adjacency dict that records every call."""

    def __init__(self, adjacency: Dict[Hashable, Dict[Hashable, int]]) -> None:
        self.adjacency = adjacency
        self.calls: List[Hashable] = []

    def __call__(self, node: Hashable) -> Mapping[Hashable, int]:
        self.calls.append(node)
        return self.adjacency.get(node, {})


@pytest.fixture
def dag4() -> CountingSuccessors:
    # Metric:
    #        [4]      [5]
    #   ┌───────►1───────┐
    #   │                ▼
    #   0                3
    #   │                ▲
    #   └───────►2───────┘
    #        [3]      [5]
    return CountingSuccessors({0: {1: 4, 2: 3}, 1: {3: 5}, 2: {3: 5}, 3: {}})


@pytest.fixture
def textbook9() -> CountingSuccessors:
    # Classic 9-node undirected example, every edge present in both directions.
    edges = [
        (0, 1, 4),
        (0, 7, 8),
        (1, 2, 8),
        (1, 7, 11),
        (2, 3, 7),
        (2, 8, 2),
        (2, 5, 4),
        (3, 4, 9),
        (3, 5, 14),
        (4, 5, 10),
        (5, 6, 2),
        (6, 7, 1),
        (6, 8, 6),
        (7, 8, 7),
    ]
    adjacency: Dict[int, Dict[int, int]] = {n: {} for n in range(9)}
    for u, v, w in edges:
        adjacency[u][v] = w
        adjacency[v][u] = w
    return CountingSuccessors(adjacency)


@pytest.fixture
def tie5() -> CountingSuccessors:
    # Metric:
    #        [1]      [2]
    #   ┌───────►1───────┐
    #   │   [2]      [1] ▼
    #   0───────►2──────►4
    #   │                ▲
    #   └───────►3───────┘
    #        [5]      [1]
    return CountingSuccessors(
        {0: {1: 1, 2: 2, 3: 5}, 1: {4: 2}, 2: {4: 1}, 3: {4: 1}, 4: {}}
    )


@pytest.fixture
def grid_successors() -> Callable[[tuple], Dict[tuple, int]]:
    """Implicit 3x3 grid with unit moves right and down, never materialized."""
    size = 3

    def successors(node: tuple) -> Dict[tuple, int]:
        row, col = node
        out = {}
        if col + 1 < size:
            out[(row, col + 1)] = 1
        if row + 1 < size:
            out[(row + 1, col)] = 1
        return out

    return successors
