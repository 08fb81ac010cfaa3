"""Shared fixtures: the reference service graph used throughout the tests.

    A -> B: 5   A -> D: 5   A -> E: 7
    B -> C: 4
    C -> D: 8   C -> E: 2
    D -> C: 8   D -> E: 6
    E -> B: 3
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tracegraph.graph import build_graph

SAMPLE_DATA = Path(__file__).parent / "sample_data"

REFERENCE_ADJACENCY = {
    "A": {"B": 5, "D": 5, "E": 7},
    "B": {"C": 4},
    "C": {"D": 8, "E": 2},
    "D": {"C": 8, "E": 6},
    "E": {"B": 3},
}


@pytest.fixture
def trace_file() -> Path:
    return SAMPLE_DATA / "traces.csv"


@pytest.fixture
def reference_records():
    # Same order as sample_data/traces.csv
    return [
        ("A", "B", 5),
        ("B", "C", 4),
        ("C", "D", 8),
        ("D", "C", 8),
        ("D", "E", 6),
        ("A", "D", 5),
        ("C", "E", 2),
        ("E", "B", 3),
        ("A", "E", 7),
    ]


@pytest.fixture
def reference_graph(reference_records):
    return build_graph(reference_records)


@pytest.fixture
def reference_adjacency():
    return {node: dict(succ) for node, succ in REFERENCE_ADJACENCY.items()}
