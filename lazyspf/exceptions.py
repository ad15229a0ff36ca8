"""Exception types raised by :mod:`lazyspf`."""

from __future__ import annotations

from typing import Hashable


class SPFError(Exception):
    """Base class for all package-specific errors."""


class UnreachableNodeError(SPFError, LookupError):
    """Raised when a path is requested to a node the search never reached.

    Check ``has_path_to`` first when reachability is uncertain.
    """

    def __init__(self, node: Hashable, start: Hashable) -> None:
        self.node = node
        self.start = start
        super().__init__(f"Node {node!r} is not reachable from {start!r}")


class InvariantViolationError(SPFError, RuntimeError):
    """Raised when an internal invariant of the search is broken."""


class GraphFormatError(SPFError, ValueError):
    """Raised when parsing an adjacency document fails."""


__all__ = [
    "SPFError",
    "UnreachableNodeError",
    "InvariantViolationError",
    "GraphFormatError",
]
