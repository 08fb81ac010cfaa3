"""Trace: a path from a start node together with its cumulative latency."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from tracegraph.config import TRACE_CONFIG
from tracegraph.types.base import Latency, NodeID


@dataclass(frozen=True)
class Trace:
    """A traversed path and the sum of edge latencies along it.

    Attributes:
        path: Node identifiers from the start node to the last node reached.
        latency: Sum of the latencies of the ``len(path) - 1`` edges.
    """

    path: Tuple[NodeID, ...]
    latency: Latency

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so traces stay hashable
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.path)

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.path) - 1

    @property
    def src_node(self) -> NodeID:
        return self.path[0]

    @property
    def dst_node(self) -> NodeID:
        return self.path[-1]

    def extend(self, node: NodeID, latency: Latency) -> Trace:
        """Return a new trace one edge longer; ``self`` is left untouched."""
        return Trace(self.path + (node,), self.latency + latency)

    def to_dict(self) -> Dict[str, Any]:
        """Return ``{"path": [...], "latency": n}`` for JSON output."""
        return {"path": list(self.path), "latency": self.latency}

    def __str__(self) -> str:
        nodes = TRACE_CONFIG.path_separator.join(str(node) for node in self.path)
        return f"{nodes} {self.latency}"
