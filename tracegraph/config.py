"""Configuration values shared by the trace parser, graph model and CLI."""

from dataclasses import dataclass
from typing import List


@dataclass
class TraceFormatConfig:
    """Textual conventions for trace data."""

    # Separator between records in a trace file, e.g. "AB5,BC4"
    record_separator: str = ","

    # Separator between node names in a path given on the command line
    path_separator: str = "-"

    # Edge attribute holding the latency in the underlying networkx graph
    latency_attr: str = "latency"

    # Text shown for a path with a missing edge
    no_trace_text: str = "NO SUCH TRACE"

    def split_path(self, text: str) -> List[str]:
        """Split ``"A-B-C"`` into ``["A", "B", "C"]``, dropping blanks."""
        parts = (part.strip() for part in text.split(self.path_separator))
        return [part for part in parts if part]


# Global configuration instance
TRACE_CONFIG = TraceFormatConfig()
