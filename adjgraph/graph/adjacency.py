"""Adjacency-map base shared by the unweighted and weighted graphs.

A vertex exists iff it is a key of the map, even when its bucket is
empty. Subclasses choose the bucket type: an insertion-ordered neighbor
set for UnweightedGraph, a list of WeightedEdge for WeightedGraph.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

from ..config import get_config

T = TypeVar("T", bound=Hashable)
B = TypeVar("B")


class AdjacencyMap(ABC, Generic[T, B]):
    """Mapping from vertex to its adjacency bucket.

    Vertices must be hashable and compared by value; adjacency
    membership uses the vertex's ``__eq__``/``__hash__``, never object
    identity.

    Args:
        directed: Whether edges are one-way. ``None`` takes the value of
            ``GraphConfig.default_directed``.
    """

    def __init__(self, directed: Optional[bool] = None) -> None:
        if directed is None:
            directed = get_config().graph.default_directed
        self._directed = directed
        self._adjacency: Dict[T, B] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    @abstractmethod
    def _new_bucket(self) -> B:
        """Return an empty adjacency bucket."""

    def _bucket(self, vertex: T) -> B:
        """Return the bucket of ``vertex``, or an empty one if unknown."""
        bucket = self._adjacency.get(vertex)
        if bucket is None:
            return self._new_bucket()
        return bucket

    def add_vertex(self, vertex: T) -> None:
        """Add ``vertex`` with no edges; no-op if it already exists."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = self._new_bucket()

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._adjacency

    def vertices(self) -> List[T]:
        """Return all vertices in insertion order."""
        return list(self._adjacency)

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"{type(self).__name__}({kind}, vertices={len(self._adjacency)})"
