"""Latency graph model.

``build_graph`` turns edge records into a frozen ``networkx.DiGraph``;
``neighbors`` and ``to_adjacency`` read it (or a plain nested mapping).
"""

from tracegraph.graph.adjacency import (
    Adjacency,
    Graph,
    build_graph,
    neighbors,
    to_adjacency,
)

__all__ = ["Adjacency", "Graph", "build_graph", "neighbors", "to_adjacency"]
