import networkx as nx
import pytest

from lazyspf.adapters import from_adjacency, from_networkx
from lazyspf.algorithms.paths import shortest_path
from lazyspf.algorithms.spf import spf


def test_from_adjacency_missing_node_has_no_successors():
    successors = from_adjacency({"A": {"B": 2}})
    assert dict(successors("A")) == {"B": 2}
    assert dict(successors("B")) == {}


def test_from_adjacency_search():
    successors = from_adjacency({"A": {"B": 1, "C": 5}, "B": {"C": 1}})
    assert shortest_path(spf(successors, "A"), "C") == (["A", "B", "C"], 2)


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("A", "B", cost=1)
    G.add_edge("B", "C", cost=2)
    G.add_edge("A", "C")  # default cost 1
    successors = from_networkx(G)
    assert successors("A") == {"B": 1, "C": 1}
    assert successors("C") == {}
    assert successors("missing") == {}


def test_from_networkx_custom_attr_and_default():
    G = nx.DiGraph()
    G.add_edge("A", "B", latency=7)
    G.add_edge("A", "C")
    successors = from_networkx(G, cost_attr="latency", default_cost=3)
    assert successors("A") == {"B": 7, "C": 3}


def test_from_networkx_multigraph_uses_cheapest_parallel_edge():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", cost=5)
    G.add_edge("A", "B", cost=2)
    G.add_edge("A", "B", cost=9)
    assert from_networkx(G)("A") == {"B": 2}


def test_from_networkx_undirected_graph_both_directions():
    G = nx.Graph()
    G.add_edge("A", "B", cost=4)
    successors = from_networkx(G)
    assert successors("A") == {"B": 4}
    assert successors("B") == {"A": 4}


def test_from_networkx_rejects_non_graph():
    with pytest.raises(TypeError, match="Expected NetworkX graph"):
        from_networkx({"A": {"B": 1}})
