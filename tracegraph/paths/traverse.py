"""Depth-first trace enumeration driven by a caller-supplied decision function.

The walk starts at one node and extends the current trace one edge at a time.
Every extension is shown to ``decide(candidate, from_node, to_node)`` which
answers with a :class:`~tracegraph.types.base.Decision`:

- ``STOP``: drop the candidate and prune everything beyond it;
- ``CONTINUE``: drop the candidate but keep walking from its last node;
- ``INCLUDE``: emit the candidate and keep walking from its last node.

Successors are visited in graph order and a node's whole subtree is finished
before its next sibling is offered, so results come out in pre-order. The
engine has no cycle protection and no depth or cost limit: on a cyclic graph
the walk ends only when ``decide`` stops every live branch.

The walk keeps an explicit stack of frames instead of recursing, so paths
longer than the interpreter recursion limit are fine. Each step advances the
top frame by a single edge, which keeps the sequence of ``decide`` calls
identical to a recursive walk; stateful policies such as a running minimum
rely on that.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from tracegraph.graph.adjacency import Graph, neighbors
from tracegraph.logging import get_logger
from tracegraph.paths.trace import Trace
from tracegraph.types.base import Decision, Latency, NodeID

logger = get_logger(__name__)

DecideFunc = Callable[[Trace, NodeID, NodeID], Decision]

# (node the frame expands, trace ending at that node, remaining successors)
_Frame = Tuple[NodeID, Trace, Iterator[Tuple[NodeID, Latency]]]


def _frame(graph: Graph, trace: Trace) -> _Frame:
    node = trace.dst_node
    return node, trace, iter(neighbors(graph, node).items())


def iter_traces(graph: Graph, start: NodeID, decide: DecideFunc) -> Iterator[Trace]:
    """Lazily yield every trace from ``start`` that ``decide`` includes.

    Args:
        graph: Latency graph or nested mapping; never modified.
        start: Node the walk begins at. The bare start node is never offered
            to ``decide``.
        decide: Called once per edge extension with the candidate trace and
            the edge endpoints.

    Yields:
        Included traces in depth-first discovery order.

    Raises:
        TypeError: If ``decide`` returns something other than a ``Decision``.
    """
    stack: List[_Frame] = [_frame(graph, Trace((start,), 0))]

    while stack:
        node, trace, successors = stack[-1]
        step = next(successors, None)
        if step is None:
            stack.pop()
            continue

        nxt, latency = step
        candidate = trace.extend(nxt, latency)
        decision = decide(candidate, node, nxt)

        if decision is Decision.STOP:
            continue
        if decision is Decision.INCLUDE:
            yield candidate
        elif decision is not Decision.CONTINUE:
            raise TypeError(
                f"Decision function returned {decision!r}; expected a Decision member."
            )
        stack.append(_frame(graph, candidate))


def find(graph: Graph, start: NodeID, decide: DecideFunc) -> List[Trace]:
    """Return every trace from ``start`` that ``decide`` includes.

    Exceptions raised by ``decide`` propagate unchanged; no partial result is
    returned.

    Example:
        >>> from tracegraph import Decision, build_graph, find
        >>> g = build_graph([("A", "B", 5), ("B", "C", 4)])
        >>> def to_c(trace, src, dst):
        ...     return Decision.INCLUDE if dst == "C" else Decision.CONTINUE
        >>> find(g, "A", to_c)
        [Trace(path=('A', 'B', 'C'), latency=9)]
    """
    results = list(iter_traces(graph, start, decide))
    logger.debug("Found %d trace(s) from %s", len(results), start)
    return results
