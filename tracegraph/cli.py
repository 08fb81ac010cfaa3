"""Command-line interface for tracegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import networkx as nx

from tracegraph.config import TRACE_CONFIG
from tracegraph.errors import TraceGraphError
from tracegraph.io import load_graph
from tracegraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from tracegraph.paths import (
    ShortestTrace,
    Trace,
    exact_hops,
    find,
    max_hops,
    max_latency,
    path_latency,
)
from tracegraph.paths.traverse import DecideFunc
from tracegraph.types.base import NO_SUCH_PATH

logger = get_logger(__name__)


def _load(data: Path, separator: Optional[str]) -> nx.DiGraph:
    """Load the graph or exit with status 1 on unreadable or malformed data."""
    try:
        return load_graph(data, separator)
    except OSError as exc:
        print(f"❌ ERROR: cannot read {data}: {exc}", file=sys.stderr)
        sys.exit(1)
    except TraceGraphError as exc:
        print(f"❌ ERROR: invalid trace data in {data}: {exc}", file=sys.stderr)
        sys.exit(1)


def _run_latency(data: Path, path_text: str, separator: Optional[str]) -> None:
    graph = _load(data, separator)
    path = TRACE_CONFIG.split_path(path_text)
    if not path:
        print(f"❌ ERROR: empty path {path_text!r}", file=sys.stderr)
        sys.exit(1)

    result = path_latency(graph, path)
    if result is NO_SUCH_PATH:
        print(TRACE_CONFIG.no_trace_text)
    else:
        print(result)


def _select_policy(graph: nx.DiGraph, args: argparse.Namespace) -> DecideFunc:
    if args.max_hops is not None:
        return max_hops(args.max_hops, args.end)
    if args.exact_hops is not None:
        return exact_hops(args.exact_hops, args.end)
    if args.max_latency is not None:
        return max_latency(args.max_latency, args.end)
    # No simple path or cycle costs more than every edge combined; the bound
    # prunes early, simple_only ends walks around zero-latency cycles
    bound = int(graph.size(weight=TRACE_CONFIG.latency_attr)) + 1
    return ShortestTrace(
        args.end,
        guard_oscillation=args.start == args.end,
        upper_bound=bound,
        simple_only=True,
    )


def _print_traces(traces: List[Trace], as_json: bool) -> None:
    if as_json:
        payload = {"count": len(traces), "traces": [t.to_dict() for t in traces]}
        print(json.dumps(payload, indent=2))
        return
    for trace in traces:
        print(trace)
    print(f"{len(traces)} trace(s)")


def _run_find(args: argparse.Namespace) -> None:
    graph = _load(args.data, args.separator)
    policy = _select_policy(graph, args)
    traces = find(graph, args.start, policy)

    if isinstance(policy, ShortestTrace) and traces:
        # Earlier hits are upper bounds found on the way down
        traces = traces[-1:]

    logger.debug("Query %s -> %s: %d trace(s)", args.start, args.end, len(traces))
    _print_traces(traces, args.json)


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be non-negative")
    return value


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``tracegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="tracegraph",
        description="Query latencies and traces in a service call graph.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{latency,find}",
        help="Available commands",
    )

    latency_parser = subparsers.add_parser(
        "latency", help="Total latency of an explicit trace"
    )
    latency_parser.add_argument("data", type=Path, help="Path to trace data file")
    latency_parser.add_argument("path", help="Trace to evaluate, e.g. A-B-C")

    find_parser = subparsers.add_parser(
        "find", help="Enumerate traces between two services"
    )
    find_parser.add_argument("data", type=Path, help="Path to trace data file")
    find_parser.add_argument("--start", "-s", required=True, help="Start service")
    find_parser.add_argument("--end", "-e", required=True, help="End service")
    policy_group = find_parser.add_mutually_exclusive_group(required=True)
    policy_group.add_argument(
        "--max-hops", type=_non_negative_int, help="Traces with at most N hops"
    )
    policy_group.add_argument(
        "--exact-hops", type=_non_negative_int, help="Traces with exactly N hops"
    )
    policy_group.add_argument(
        "--max-latency",
        type=_non_negative_int,
        help="Traces with latency strictly below L",
    )
    policy_group.add_argument(
        "--shortest", action="store_true", help="The lowest-latency trace"
    )
    find_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    for p in (latency_parser, find_parser):
        p.add_argument(
            "--separator",
            default=None,
            help=(
                "Record separator in the data file"
                f" (default: {TRACE_CONFIG.record_separator!r})"
            ),
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "latency":
        _run_latency(args.data, args.path, args.separator)
    elif args.command == "find":
        _run_find(args)


if __name__ == "__main__":
    main()
