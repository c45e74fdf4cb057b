"""Weighted graph storing each edge as a separate adjacency entry.

Parallel edges are kept; an undirected ``add_edge`` appends one entry
to each endpoint's list. There is no removal API.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Optional, TypeVar

from ..domain.models import WeightedEdge
from .adjacency import AdjacencyMap
from .dijkstra import shortest_distances

T = TypeVar("T", bound=Hashable)


class WeightedGraph(AdjacencyMap[T, List[WeightedEdge[T]]]):
    """Directed or undirected graph whose edges carry a numeric cost.

    Example:
        >>> graph = WeightedGraph[str](directed=True)
        >>> graph.add_edge("A", "B", 4)
        >>> graph.add_edge("A", "C", 2)
        >>> graph.add_edge("C", "B", 1)
        >>> graph.dijkstra("A")
        {'A': 0.0, 'B': 3.0, 'C': 2.0}
    """

    def _new_bucket(self) -> List[WeightedEdge[T]]:
        return []

    def add_edge(self, source: T, target: T, weight: float) -> None:
        """Append an edge of cost ``weight``, adding missing endpoints.

        ``weight`` must be non-negative for ``dijkstra`` to be correct;
        this is not checked.
        """
        self.add_vertex(source)
        self.add_vertex(target)
        self._adjacency[source].append(WeightedEdge(target, weight))
        if not self._directed:
            self._adjacency[target].append(WeightedEdge(source, weight))

    def get_neighbors(self, vertex: T) -> List[WeightedEdge[T]]:
        """Return a copy of the outgoing edges of ``vertex`` (empty if unknown)."""
        return list(self._bucket(vertex))

    def dijkstra(self, start: T, strategy: Optional[str] = None) -> Dict[T, float]:
        """Shortest distance from ``start`` to every known vertex.

        Unreachable vertices map to ``INFINITY``. See
        ``adjgraph.graph.dijkstra.shortest_distances`` for ``strategy``.
        """
        return shortest_distances(self._adjacency, start, strategy)
