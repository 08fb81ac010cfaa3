"""Tests for the Trace dataclass."""

import dataclasses

import pytest

from tracegraph.paths import Trace


def test_trace_basic_properties():
    trace = Trace(("A", "B", "C"), 9)

    assert trace.hops == 2
    assert len(trace) == 3
    assert trace.src_node == "A"
    assert trace.dst_node == "C"
    assert list(trace) == ["A", "B", "C"]


def test_trace_path_normalized_to_tuple():
    trace = Trace(["A", "B"], 5)
    assert trace.path == ("A", "B")
    assert trace == Trace(("A", "B"), 5)
    assert hash(trace) == hash(Trace(("A", "B"), 5))


def test_trace_is_frozen():
    trace = Trace(("A",), 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        trace.latency = 3  # type: ignore[misc]


def test_extend_returns_new_trace():
    base = Trace(("A",), 0)
    longer = base.extend("B", 5)

    assert longer == Trace(("A", "B"), 5)
    assert base == Trace(("A",), 0)


def test_trace_equality_includes_latency():
    assert Trace(("A", "B"), 5) != Trace(("A", "B"), 6)


def test_trace_to_dict_and_str():
    trace = Trace(("C", "D", "C"), 16)
    assert trace.to_dict() == {"path": ["C", "D", "C"], "latency": 16}
    assert str(trace) == "C-D-C 16"
