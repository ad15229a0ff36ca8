from pathlib import Path

import pytest

from lazyspf.exceptions import GraphFormatError
from lazyspf.io import load_adjacency, load_adjacency_file


def test_load_edge_list():
    text = """
edges:
  - {source: A, target: B, weight: 1}
  - {source: B, target: C, weight: 2}
  - {source: A, target: C}
"""
    assert load_adjacency(text) == {
        "A": {"B": 1, "C": 1},
        "B": {"C": 2},
        "C": {},
    }


def test_load_edge_list_bidirectional_and_parallel_edges():
    text = """
bidirectional: true
edges:
  - {source: A, target: B, weight: 3}
  - {source: A, target: B, weight: 2}
"""
    assert load_adjacency(text) == {"A": {"B": 2}, "B": {"A": 2}}


def test_load_adjacency_mapping_normalizes_keys():
    text = """
adjacency:
  1: {2: 5, yes: 1}
  2:
"""
    assert load_adjacency(text) == {
        "1": {"2": 5, "True": 1},
        "2": {},
        "True": {},
    }


def test_load_json_document():
    text = '{"adjacency": {"A": {"B": 0.5}}}'
    assert load_adjacency(text) == {"A": {"B": 0.5}, "B": {}}


def test_empty_document():
    assert load_adjacency("") == {}


@pytest.mark.parametrize(
    "text,message",
    [
        ("- a\n- b\n", "top-level"),
        ("nodes: {}\n", "Unrecognized top-level key 'nodes'"),
        ("edges: {A: B}\n", "'edges' must be a list"),
        ("edges:\n  - A\n", "must be a mapping"),
        ("edges:\n  - {source: A}\n", "must include 'source' and 'target'"),
        ("edges:\n  - {source: A, target: B, cost: 1}\n", "unrecognized key 'cost'"),
        ("edges:\n  - {source: A, target: B, weight: -1}\n", "non-negative"),
        ("edges:\n  - {source: A, target: B, weight: x}\n", "must be a number"),
        ("edges:\n  - {source: A, target: B, weight: true}\n", "must be a number"),
        ("adjacency: [A]\n", "'adjacency' must be a mapping"),
        ("adjacency: {A: [B]}\n", "successors must be a mapping"),
        ("adjacency: {}\nedges: []\n", "not both"),
        ("bidirectional: maybe\n", "'bidirectional' must be true or false"),
        ("bidirectional: true\nadjacency: {}\n", "only applies to 'edges'"),
        ("edges: [\n", "Invalid YAML"),
    ],
)
def test_malformed_documents(text, message):
    with pytest.raises(GraphFormatError, match=message):
        load_adjacency(text)


def test_graph_format_error_is_value_error():
    with pytest.raises(ValueError):
        load_adjacency("edges: 3\n")


def test_load_adjacency_file(tmp_path: Path):
    path = tmp_path / "graph.yaml"
    path.write_text("edges:\n  - {source: A, target: B, weight: 4}\n")
    assert load_adjacency_file(path) == {"A": {"B": 4}, "B": {}}


def test_load_adjacency_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_adjacency_file(tmp_path / "absent.yaml")
