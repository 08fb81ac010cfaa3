"""Reading trace data in the compact ``AB5,BC4,...`` record format.

Each record names the source node (one character), the destination node
(one character) and the latency in decimal digits. Records are separated by
``TRACE_CONFIG.record_separator``; whitespace around records and empty
records are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

import networkx as nx

from tracegraph.config import TRACE_CONFIG
from tracegraph.errors import MalformedInputError
from tracegraph.graph.adjacency import build_graph
from tracegraph.logging import get_logger

logger = get_logger(__name__)

EdgeRecord = Tuple[str, str, int]


def parse_record(text: str) -> EdgeRecord:
    """Decode a single record such as ``"AB5"`` into ``("A", "B", 5)``.

    Raises:
        MalformedInputError: If the record is too short or the latency is not
            a non-negative decimal integer.
    """
    record = text.strip()
    if len(record) < 3:
        raise MalformedInputError(f"Trace record {text!r} is too short.")
    src, dst, digits = record[0], record[1], record[2:]
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedInputError(
            f"Trace record {text!r} has a non-numeric latency {digits!r}."
        )
    return src, dst, int(digits)


def parse_traces(text: str, separator: Optional[str] = None) -> List[EdgeRecord]:
    """Decode every record in ``text``.

    Args:
        text: Raw trace data.
        separator: Record separator; defaults to ``TRACE_CONFIG.record_separator``.

    Returns:
        Records in input order.
    """
    sep = separator if separator is not None else TRACE_CONFIG.record_separator
    return [parse_record(chunk) for chunk in text.split(sep) if chunk.strip()]


def load_graph(
    path: Union[str, Path], separator: Optional[str] = None
) -> nx.DiGraph:
    """Read a trace file and build the latency graph from it.

    Raises:
        OSError: If the file cannot be read.
        MalformedInputError: If the file is not UTF-8 text or any record
            cannot be decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(
            f"Trace file {path} is not UTF-8 text: {exc}"
        ) from exc
    records = parse_traces(text, separator)
    logger.debug("Loaded %d trace record(s) from %s", len(records), path)
    return build_graph(records)
