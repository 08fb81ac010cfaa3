"""Path evaluation and trace enumeration.

- ``path_latency`` sums latencies along an explicit path.
- ``find`` / ``iter_traces`` enumerate traces under a decision function.
- ``policies`` holds reusable decision functions.
"""

from tracegraph.paths.latency import path_latency, sum_path
from tracegraph.paths.policies import (
    ShortestTrace,
    exact_hops,
    max_hops,
    max_latency,
    repeats_edge,
    revisits_node,
)
from tracegraph.paths.trace import Trace
from tracegraph.paths.traverse import DecideFunc, find, iter_traces

__all__ = [
    "DecideFunc",
    "ShortestTrace",
    "Trace",
    "exact_hops",
    "find",
    "iter_traces",
    "max_hops",
    "max_latency",
    "path_latency",
    "repeats_edge",
    "revisits_node",
    "sum_path",
]
