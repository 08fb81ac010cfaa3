"""Exception types raised by tracegraph.

Both concrete errors subclass ``ValueError`` so callers that already guard
input handling with ``except ValueError`` keep working.
"""


class TraceGraphError(Exception):
    """Base class for all tracegraph errors."""


class MalformedInputError(TraceGraphError, ValueError):
    """An edge record cannot be decoded into ``(node, node, latency)``."""


class InvalidPathError(TraceGraphError, ValueError):
    """A path given for evaluation is unusable (e.g. empty)."""
