"""Immutable latency graph built on ``networkx.DiGraph``.

The graph maps each node to its successors and the latency of the edge to
each of them. ``build_graph`` validates raw edge records, keeps successor
order equal to the order edges were first seen, and freezes the result so
nothing downstream can modify it.

Readers (:func:`neighbors`, :func:`to_adjacency`) also accept a plain nested
mapping ``{node: {neighbor: latency}}`` so callers holding adjacency data in
that shape need no conversion.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Union

import networkx as nx

from tracegraph.config import TRACE_CONFIG
from tracegraph.errors import MalformedInputError
from tracegraph.logging import get_logger
from tracegraph.types.base import Latency, NodeID

logger = get_logger(__name__)

Adjacency = Mapping[NodeID, Mapping[NodeID, Latency]]
Graph = Union[nx.DiGraph, Adjacency]


def _coerce_latency(value: Any) -> Latency:
    """Return ``value`` as a non-negative int or raise ``ValueError``."""
    if isinstance(value, bool):
        raise ValueError(f"latency must be an integer, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ValueError(f"latency must be decimal digits, got {value!r}")
        return int(text)
    if not isinstance(value, int):
        raise ValueError(f"latency must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"latency must be non-negative, got {value}")
    return value


def _check_node(value: Any) -> NodeID:
    if value is None:
        raise ValueError("node identifier must not be None")
    try:
        hash(value)
    except TypeError:
        raise ValueError(f"node identifier {value!r} is not hashable") from None
    return value


def build_graph(edges: Iterable[Any]) -> nx.DiGraph:
    """Build a frozen latency graph from ``(src, dst, latency)`` records.

    Args:
        edges: Records unpackable into exactly three fields. Latency may be an
            ``int`` or a string of decimal digits.

    Returns:
        A frozen ``networkx.DiGraph`` whose edges carry the latency under
        ``TRACE_CONFIG.latency_attr``. Successor order follows the first
        occurrence of each edge.

    Raises:
        MalformedInputError: If a record cannot be decoded.
    """
    attr = TRACE_CONFIG.latency_attr
    graph = nx.DiGraph()

    for index, record in enumerate(edges):
        if isinstance(record, (str, bytes)):
            raise MalformedInputError(
                f"Edge record #{index} {record!r} is raw text; parse it first."
            )
        try:
            src, dst, raw_latency = record
        except (TypeError, ValueError):
            raise MalformedInputError(
                f"Edge record #{index} {record!r} is not a (src, dst, latency) triple."
            ) from None

        try:
            src = _check_node(src)
            dst = _check_node(dst)
            latency = _coerce_latency(raw_latency)
        except ValueError as exc:
            raise MalformedInputError(
                f"Edge record #{index} {record!r}: {exc}"
            ) from exc

        if graph.has_edge(src, dst):
            logger.warning(
                "Duplicate edge %s->%s: latency %s replaces %s",
                src,
                dst,
                latency,
                graph[src][dst][attr],
            )
        # Updating an existing edge keeps its original position among successors
        graph.add_edge(src, dst, **{attr: latency})

    logger.debug(
        "Built latency graph: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return nx.freeze(graph)


def neighbors(graph: Graph, node: NodeID) -> Dict[NodeID, Latency]:
    """Return the successors of ``node`` mapped to edge latency.

    Unknown and childless nodes both yield an empty dict. The result is a new
    dict; changing it does not touch the graph.
    """
    if isinstance(graph, nx.DiGraph):
        if node not in graph:
            return {}
        attr = TRACE_CONFIG.latency_attr
        return {nbr: data[attr] for nbr, data in graph.succ[node].items()}
    return dict(graph.get(node) or {})


def to_adjacency(graph: Graph) -> Dict[NodeID, Dict[NodeID, Latency]]:
    """Return the graph as a plain nested dict.

    Only nodes with at least one outgoing edge appear as outer keys.
    """
    nodes = graph.nodes if isinstance(graph, nx.DiGraph) else graph.keys()
    adjacency = {}
    for node in nodes:
        successors = neighbors(graph, node)
        if successors:
            adjacency[node] = successors
    return adjacency
