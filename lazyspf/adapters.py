"""Successor-function adapters for concrete graph representations.

The search engine only needs ``node -> {neighbor: weight}``. These helpers
build that function from common concrete graphs so callers do not have to.

Example:
    >>> import networkx as nx
    >>> from lazyspf import spf, shortest_path
    >>> from lazyspf.adapters import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>> shortest_path(spf(from_networkx(G), "A"), "C")
    (['A', 'B', 'C'], 3)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Hashable, Mapping, Union

from lazyspf.types import Cost, SuccessorFunc

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

_NO_SUCCESSORS: Mapping[Any, Cost] = MappingProxyType({})


def from_adjacency(adjacency: Mapping[Hashable, Mapping[Hashable, Cost]]) -> SuccessorFunc:
    """Build a successor function from an adjacency mapping.

    Args:
        adjacency: ``{node: {neighbor: weight}}``. Nodes missing from the
            outer mapping have no successors.

    Returns:
        Successor function reading ``adjacency`` on every call. Later changes
        to ``adjacency`` are visible to searches started afterwards.
    """

    def successors(node: Hashable) -> Mapping[Hashable, Cost]:
        return adjacency.get(node, _NO_SUCCESSORS)

    return successors


def from_networkx(
    G: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: Cost = 1,
) -> SuccessorFunc:
    """Build a successor function over a NetworkX graph.

    Works with DiGraph, MultiDiGraph, Graph and MultiGraph. Undirected graphs
    expose each edge in both directions. For multigraphs the cheapest of the
    parallel edges between two nodes is used.

    Args:
        G: NetworkX graph.
        cost_attr: Edge attribute holding the weight (default: "cost").
        default_cost: Weight used when the attribute is missing (default: 1).

    Returns:
        Successor function; nodes not in ``G`` have no successors.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    is_multigraph = G.is_multigraph()
    adj = G.adj

    def successors(node: Hashable) -> Dict[Hashable, Cost]:
        if node not in adj:
            return {}
        out: Dict[Hashable, Cost] = {}
        for neighbor, data in adj[node].items():
            if is_multigraph:
                out[neighbor] = min(
                    attrs.get(cost_attr, default_cost) for attrs in data.values()
                )
            else:
                out[neighbor] = data.get(cost_attr, default_cost)
        return out

    return successors


__all__ = ["from_adjacency", "from_networkx"]
