"""Ready-made decision functions for :func:`tracegraph.paths.traverse.find`.

Each factory returns a fresh callable; :class:`ShortestTrace` keeps a running
minimum and must not be reused across queries.
"""

from __future__ import annotations

import math
from typing import Union

from tracegraph.paths.trace import Trace
from tracegraph.paths.traverse import DecideFunc
from tracegraph.types.base import Decision, Latency, NodeID


def max_hops(limit: int, target: NodeID) -> DecideFunc:
    """Include traces ending at ``target`` with at most ``limit`` hops."""

    def decide(trace: Trace, src: NodeID, dst: NodeID) -> Decision:
        if trace.hops > limit:
            return Decision.STOP
        if dst == target:
            return Decision.INCLUDE
        return Decision.CONTINUE

    return decide


def exact_hops(hops: int, target: NodeID) -> DecideFunc:
    """Include traces ending at ``target`` with exactly ``hops`` hops."""

    def decide(trace: Trace, src: NodeID, dst: NodeID) -> Decision:
        if trace.hops > hops:
            return Decision.STOP
        if trace.hops == hops and dst == target:
            return Decision.INCLUDE
        return Decision.CONTINUE

    return decide


def max_latency(limit: Latency, target: NodeID) -> DecideFunc:
    """Include traces ending at ``target`` with latency strictly below ``limit``."""

    def decide(trace: Trace, src: NodeID, dst: NodeID) -> Decision:
        if trace.latency >= limit:
            return Decision.STOP
        if dst == target:
            return Decision.INCLUDE
        return Decision.CONTINUE

    return decide


def repeats_edge(trace: Trace, src: NodeID, dst: NodeID) -> bool:
    """Return True if edge ``src->dst`` was also taken two hops earlier.

    Detects the ``X->Y->X->Y`` back-and-forth pattern.
    """
    path = trace.path
    return len(path) >= 4 and path[-4] == src and path[-3] == dst


def revisits_node(trace: Trace, src: NodeID, dst: NodeID) -> bool:
    """Return True if ``dst`` already occurs earlier in the trace.

    Returning to the start node once is allowed so a cycle through it can
    close. Every other node may appear only once.
    """
    earlier = trace.path[:-1]
    if dst not in earlier:
        return False
    return not (dst == earlier[0] and earlier.count(dst) == 1)


class ShortestTrace:
    """Decision policy that narrows in on the lowest-latency trace to ``target``.

    Any candidate at or above the best latency seen so far is pruned; every
    candidate landing on ``target`` below it becomes the new best and is
    included. Since earlier hits are not retracted, the result list ends with
    the shortest trace and ``min_latency`` holds its latency.

    ``upper_bound`` seeds the running minimum. Any bound above the latency of
    every simple path (e.g. the sum of all edge latencies plus one) keeps the
    walk finite on graphs with positive-latency cycles without changing which
    trace comes out shortest.

    With ``guard_oscillation`` enabled the policy also prunes edges that
    repeat the edge taken two hops earlier (see :func:`repeats_edge`), which is
    needed when ``target`` is also the start node.

    A bound alone cannot end a walk around a zero-latency cycle. With
    ``simple_only`` enabled the policy prunes any candidate that revisits a
    node (see :func:`revisits_node`). Latencies are non-negative, so a simple
    path (or a simple cycle back to the start) is always among the shortest
    and the answer is unchanged.

    Attributes:
        target: Destination node.
        guard_oscillation: Whether to prune ``X->Y->X->Y`` repeats.
        simple_only: Whether to prune candidates that revisit a node.
        upper_bound: Initial value of ``min_latency``.
        min_latency: Best latency found so far; ``upper_bound`` before any hit.
    """

    def __init__(
        self,
        target: NodeID,
        guard_oscillation: bool = False,
        upper_bound: Union[Latency, float] = math.inf,
        simple_only: bool = False,
    ) -> None:
        self.target = target
        self.guard_oscillation = guard_oscillation
        self.simple_only = simple_only
        self.upper_bound = upper_bound
        self.min_latency: Union[Latency, float] = upper_bound

    def __call__(self, trace: Trace, src: NodeID, dst: NodeID) -> Decision:
        if self.guard_oscillation and repeats_edge(trace, src, dst):
            return Decision.STOP
        if self.simple_only and revisits_node(trace, src, dst):
            return Decision.STOP
        if trace.latency >= self.min_latency:
            return Decision.STOP
        if dst == self.target:
            self.min_latency = trace.latency
            return Decision.INCLUDE
        return Decision.CONTINUE

    @property
    def found(self) -> bool:
        return self.min_latency != self.upper_bound
