"""tracegraph: latency and trace queries over a service call graph.

The graph maps each service to the services it calls and the latency of each
call. Two queries run against it:

    path_latency() - total latency of an explicit trace, or NO_SUCH_PATH
    find()         - every trace from a start node accepted by a decision
                     function returning Decision.STOP/CONTINUE/INCLUDE

Example:
    from tracegraph import build_graph, find, max_hops, path_latency

    graph = build_graph([("A", "B", 5), ("B", "C", 4), ("C", "A", 2)])
    path_latency(graph, ["A", "B", "C"])  # 9

    # [Trace(path=('A', 'B', 'C', 'A'), latency=11)]
    find(graph, "A", max_hops(3, "A"))
"""

from __future__ import annotations

from tracegraph import cli, logging
from tracegraph._version import __version__
from tracegraph.errors import InvalidPathError, MalformedInputError, TraceGraphError
from tracegraph.graph import build_graph, neighbors, to_adjacency
from tracegraph.io import load_graph, parse_traces
from tracegraph.paths import (
    ShortestTrace,
    Trace,
    exact_hops,
    find,
    iter_traces,
    max_hops,
    max_latency,
    path_latency,
    repeats_edge,
    revisits_node,
    sum_path,
)
from tracegraph.types.base import NO_SUCH_PATH, Decision, NoSuchPath

__all__ = [
    # Version
    "__version__",
    # Model
    "build_graph",
    "neighbors",
    "to_adjacency",
    "load_graph",
    "parse_traces",
    # Queries
    "path_latency",
    "sum_path",
    "find",
    "iter_traces",
    "Trace",
    "Decision",
    "NoSuchPath",
    "NO_SUCH_PATH",
    # Policies
    "max_hops",
    "exact_hops",
    "max_latency",
    "repeats_edge",
    "revisits_node",
    "ShortestTrace",
    # Errors
    "TraceGraphError",
    "MalformedInputError",
    "InvalidPathError",
    # Utilities
    "cli",
    "logging",
]
