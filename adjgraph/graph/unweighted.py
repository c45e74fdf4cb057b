"""Unweighted graph with set-semantics adjacency.

Neighbor sets are dicts with ``None`` values so that they keep edge
insertion order; every traversal visits neighbors in that order, which
makes results reproducible across runs.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Hashable, List, Optional, Set, Tuple, TypeVar

from .adjacency import AdjacencyMap

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)

# Parent marker for DFS roots; None is a valid vertex.
_NO_PARENT = object()

# Above this many vertices dfs() delegates to dfs_iterative() so the
# recursion stays well under the interpreter's default limit.
RECURSIVE_DFS_MAX_VERTICES = 500


class UnweightedGraph(AdjacencyMap[T, Dict[T, None]]):
    """Directed or undirected graph without edge costs.

    For an undirected graph, ``v in get_neighbors(u)`` holds iff
    ``u in get_neighbors(v)``. Self-loops are allowed.

    Example:
        >>> graph = UnweightedGraph[str](directed=False)
        >>> graph.add_edge("A", "B")
        >>> graph.add_edge("A", "C")
        >>> graph.bfs("A")
        ['A', 'B', 'C']
    """

    def _new_bucket(self) -> Dict[T, None]:
        return {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, source: T, target: T) -> None:
        """Connect ``source`` to ``target``, adding missing endpoints.

        Duplicate edges are absorbed.
        """
        self.add_vertex(source)
        self.add_vertex(target)
        self._adjacency[source][target] = None
        if not self._directed:
            self._adjacency[target][source] = None

    def remove_edge(self, source: T, target: T) -> None:
        """Remove the edge if present (both directions when undirected)."""
        self._adjacency.get(source, {}).pop(target, None)
        if not self._directed:
            self._adjacency.get(target, {}).pop(source, None)

    def remove_vertex(self, vertex: T) -> None:
        """Remove ``vertex`` and every edge pointing to it."""
        if vertex not in self._adjacency:
            return

        for neighbors in self._adjacency.values():
            neighbors.pop(vertex, None)
        del self._adjacency[vertex]

        logger.debug(
            "Vertex removed",
            extra={"vertex": repr(vertex), "vertices": len(self._adjacency)},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_neighbors(self, vertex: T) -> List[T]:
        """Return a copy of the neighbors of ``vertex`` (empty if unknown)."""
        return list(self._bucket(vertex))

    def has_edge(self, source: T, target: T) -> bool:
        return target in self._bucket(source)

    def dfs(self, start: T) -> List[T]:
        """Depth-first order from ``start``, recursive variant.

        Recursion depth grows with the longest DFS branch, which is
        bounded by the vertex count. Graphs with more than
        ``RECURSIVE_DFS_MAX_VERTICES`` vertices are handed to
        ``dfs_iterative``, which returns the same order. An unknown
        ``start`` yields an empty list.
        """
        if start not in self._adjacency:
            return []
        if len(self._adjacency) > RECURSIVE_DFS_MAX_VERTICES:
            return self.dfs_iterative(start)

        visited: Set[T] = set()
        order: List[T] = []

        def visit(vertex: T) -> None:
            visited.add(vertex)
            order.append(vertex)
            for neighbor in self._adjacency[vertex]:
                if neighbor not in visited:
                    visit(neighbor)

        visit(start)
        return order

    def dfs_iterative(self, start: T) -> List[T]:
        """Depth-first order from ``start`` using an explicit stack.

        Neighbors are pushed in reverse so that popping reproduces the
        recursive left-to-right order. An unknown ``start`` yields an
        empty list.
        """
        if start not in self._adjacency:
            return []

        visited: Set[T] = set()
        order: List[T] = []
        stack: List[T] = [start]

        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue

            visited.add(vertex)
            order.append(vertex)

            for neighbor in reversed(list(self._adjacency[vertex])):
                if neighbor not in visited:
                    stack.append(neighbor)

        return order

    def bfs(self, start: T) -> List[T]:
        """Breadth-first order from ``start``.

        Vertices are marked visited when enqueued, so none is queued
        twice. An unknown ``start`` yields an empty list.
        """
        if start not in self._adjacency:
            return []

        visited: Set[T] = {start}
        order: List[T] = []
        queue: Deque[T] = deque([start])

        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbor in self._adjacency[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return order

    def has_path(self, source: T, target: T) -> bool:
        """Return True if ``target`` is reachable from ``source``.

        The search stops as soon as ``target`` shows up as a neighbor.
        """
        if source == target:
            return True

        visited: Set[T] = {source}
        queue: Deque[T] = deque([source])

        while queue:
            vertex = queue.popleft()
            for neighbor in self._bucket(vertex):
                if neighbor == target:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return False

    def shortest_path(self, source: T, target: T) -> Optional[List[T]]:
        """Return a minimum-edge path from ``source`` to ``target``.

        The path includes both endpoints. Returns ``[source]`` when
        ``source == target`` and ``None`` (``NO_PATH``) when ``target``
        is unreachable.
        """
        if source == target:
            return [source]

        visited: Set[T] = {source}
        queue: Deque[Tuple[T, List[T]]] = deque([(source, [source])])

        while queue:
            vertex, path = queue.popleft()
            for neighbor in self._bucket(vertex):
                if neighbor == target:
                    return path + [neighbor]
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, path + [neighbor]))

        return None

    def has_cycle(self) -> bool:
        """Return True if the graph contains a cycle.

        Only meaningful for undirected graphs: a DFS from every
        unvisited vertex reports a cycle on reaching an already
        discovered vertex other than the current vertex's parent.
        A self-loop counts as a cycle.
        """
        visited: Set[T] = set()

        for root in self._adjacency:
            if root in visited:
                continue

            visited.add(root)
            stack: List[Tuple[T, object]] = [(root, _NO_PARENT)]
            while stack:
                vertex, parent = stack.pop()
                for neighbor in self._adjacency[vertex]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, vertex))
                    elif parent is _NO_PARENT or neighbor != parent:
                        return True

        return False

    def edge_count(self) -> int:
        """Number of edges; undirected edges count once, self-loops once."""
        total = sum(len(neighbors) for neighbors in self._adjacency.values())
        if self._directed:
            return total

        loops = sum(
            1 for vertex, neighbors in self._adjacency.items() if vertex in neighbors
        )
        return (total - loops) // 2 + loops
