"""In-memory graph library.

UnweightedGraph provides traversal (DFS, BFS), path and cycle queries;
WeightedGraph provides single-source shortest distances via Dijkstra's
algorithm. Both share one adjacency-map base and accept any hashable
vertex type.
"""

from .config import AppConfig, get_config, reset_config
from .domain import (
    INFINITY,
    NO_PATH,
    AdjGraphError,
    ConfigurationError,
    EmptyQueueError,
    WeightedEdge,
)
from .formatting import format_distances, format_graph, format_weighted_graph, render
from .graph import UnweightedGraph, WeightedGraph
from .observability import configure_logging

__all__ = [
    "AdjGraphError",
    "AppConfig",
    "ConfigurationError",
    "EmptyQueueError",
    "INFINITY",
    "NO_PATH",
    "UnweightedGraph",
    "WeightedEdge",
    "WeightedGraph",
    "configure_logging",
    "format_distances",
    "format_graph",
    "format_weighted_graph",
    "get_config",
    "render",
    "reset_config",
]
