"""Shared type aliases and enums."""

from tracegraph.types.base import NO_SUCH_PATH, Decision, Latency, NodeID, NoSuchPath

__all__ = ["Decision", "Latency", "NO_SUCH_PATH", "NodeID", "NoSuchPath"]
