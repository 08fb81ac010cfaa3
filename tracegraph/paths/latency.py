"""Latency of an explicit path."""

from __future__ import annotations

from typing import Sequence, Union

from tracegraph.errors import InvalidPathError
from tracegraph.graph.adjacency import Graph, neighbors
from tracegraph.types.base import NO_SUCH_PATH, Latency, NodeID, NoSuchPath


def path_latency(graph: Graph, path: Sequence[NodeID]) -> Union[Latency, NoSuchPath]:
    """Sum edge latencies along ``path``.

    Args:
        graph: Latency graph or nested mapping.
        path: Node identifiers in travel order; at least one.

    Returns:
        The summed latency, ``0`` for a single node, or ``NO_SUCH_PATH`` as
        soon as a consecutive pair has no edge.

    Raises:
        InvalidPathError: If ``path`` is empty.
    """
    if len(path) == 0:
        raise InvalidPathError("Cannot compute latency of an empty path.")

    total = 0
    for src, dst in zip(path, path[1:]):
        latency = neighbors(graph, src).get(dst)
        if latency is None:
            return NO_SUCH_PATH
        total += latency
    return total


sum_path = path_latency
