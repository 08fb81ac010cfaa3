"""Base aliases and enums shared across tracegraph."""

from __future__ import annotations

from enum import Enum, auto
from typing import Hashable

#: Node identifier. Any hashable value; the bundled data uses single letters.
NodeID = Hashable

#: Latency of an edge or cumulative latency of a path (non-negative integer).
Latency = int


class Decision(Enum):
    """Verdict returned by a decision function for each candidate trace.

    Members are compared by identity only; their values carry no ordering.
    """

    #: Drop the candidate and do not extend it any further.
    STOP = auto()
    #: Drop the candidate but keep extending it.
    CONTINUE = auto()
    #: Keep the candidate in the results and keep extending it.
    INCLUDE = auto()


class NoSuchPath(Enum):
    """Outcome of evaluating a path that has a missing edge.

    This is a value, not an exception; compare with ``is NO_SUCH_PATH``.
    """

    NO_SUCH_PATH = "NO SUCH TRACE"

    def __str__(self) -> str:
        return self.value


NO_SUCH_PATH = NoSuchPath.NO_SUCH_PATH
