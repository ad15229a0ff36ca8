"""Shared type aliases for lazyspf."""

from __future__ import annotations

from typing import Callable, Hashable, Mapping, TypeVar, Union

#: Opaque node identifier. Only hashing and equality are ever used.
NodeID = TypeVar("NodeID", bound=Hashable)

#: Numeric distance. Edge weights are assumed non-negative; this is not checked.
Cost = Union[int, float]

#: Caller-supplied oracle returning the outgoing neighbors of a node and their
#: edge weights. Called exactly once per settled node and never memoized.
SuccessorFunc = Callable[[NodeID], Mapping[NodeID, Cost]]
