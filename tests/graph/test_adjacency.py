import logging

import networkx as nx
import pytest

from tracegraph.errors import MalformedInputError
from tracegraph.graph import build_graph, neighbors, to_adjacency


def test_build_graph_reproduces_reference_adjacency(
    reference_graph, reference_adjacency
):
    assert to_adjacency(reference_graph) == reference_adjacency
    assert neighbors(reference_graph, "A") == {"B": 5, "D": 5, "E": 7}


def test_neighbor_order_follows_first_insertion(reference_graph):
    assert list(neighbors(reference_graph, "A")) == ["B", "D", "E"]
    assert list(neighbors(reference_graph, "C")) == ["D", "E"]
    assert list(neighbors(reference_graph, "D")) == ["C", "E"]


def test_neighbors_unknown_and_childless_nodes_are_empty():
    graph = build_graph([("A", "B", 1)])
    assert neighbors(graph, "B") == {}
    assert neighbors(graph, "Z") == {}


def test_neighbors_returns_a_copy(reference_graph):
    succ = neighbors(reference_graph, "A")
    succ["Z"] = 1
    assert "Z" not in neighbors(reference_graph, "A")


def test_neighbors_on_plain_mapping():
    adjacency = {"A": {"B": 1, "C": 2}, "B": {}}
    assert neighbors(adjacency, "A") == {"B": 1, "C": 2}
    assert neighbors(adjacency, "B") == {}
    assert neighbors(adjacency, "C") == {}
    assert to_adjacency(adjacency) == {"A": {"B": 1, "C": 2}}


def test_graph_is_frozen(reference_graph):
    assert isinstance(reference_graph, nx.DiGraph)
    assert nx.is_frozen(reference_graph)
    with pytest.raises(nx.NetworkXError):
        reference_graph.add_edge("A", "C", latency=1)


def test_duplicate_edge_last_wins_and_keeps_position(caplog):
    records = [("A", "B", 1), ("A", "C", 2), ("A", "B", 3)]
    with caplog.at_level(logging.WARNING):
        graph = build_graph(records)

    assert neighbors(graph, "A") == {"B": 3, "C": 2}
    assert list(neighbors(graph, "A")) == ["B", "C"]
    assert "Duplicate edge A->B" in caplog.text


def test_non_string_node_identifiers():
    graph = build_graph([(1, 2, 3), ((0, 0), (0, 1), 4)])
    assert neighbors(graph, 1) == {2: 3}
    assert neighbors(graph, (0, 0)) == {(0, 1): 4}


def test_numeric_string_latency_accepted():
    graph = build_graph([("A", "B", "12")])
    assert neighbors(graph, "A") == {"B": 12}


def test_empty_input_builds_empty_graph():
    graph = build_graph([])
    assert graph.number_of_nodes() == 0
    assert to_adjacency(graph) == {}


@pytest.mark.parametrize(
    "record",
    [
        ("A", "B"),
        ("A", "B", 1, 2),
        ("A", "B", -1),
        ("A", "B", 1.5),
        ("A", "B", True),
        ("A", "B", "x"),
        ("A", "B", "²"),
        ("A", "B", None),
        (None, "B", 1),
        (["A"], "B", 1),
        "AB5",
        42,
    ],
)
def test_malformed_records_rejected(record):
    with pytest.raises(MalformedInputError):
        build_graph([("A", "B", 1), record])


def test_malformed_error_names_record_index():
    with pytest.raises(MalformedInputError, match="#1"):
        build_graph([("A", "B", 1), ("A", "C", -4)])


def test_malformed_error_is_value_error():
    with pytest.raises(ValueError):
        build_graph([("A",)])
