"""In-memory graph structures and the algorithms that run on them.

UnweightedGraph covers traversal, path and cycle queries over
set-semantics adjacency; WeightedGraph stores costed edges and computes
single-source shortest distances with Dijkstra's algorithm.
"""

from .adjacency import AdjacencyMap
from .dijkstra import dijkstra_linear, dijkstra_with_queue, shortest_distances
from .unweighted import UnweightedGraph
from .weighted import WeightedGraph

__all__ = [
    "AdjacencyMap",
    "UnweightedGraph",
    "WeightedGraph",
    "dijkstra_linear",
    "dijkstra_with_queue",
    "shortest_distances",
]
