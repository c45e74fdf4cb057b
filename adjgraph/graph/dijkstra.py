"""Single-source shortest distances using Dijkstra's algorithm.

Two strategies compute the same distance map:

- ``linear``: each round scans every unfinalized vertex for the minimum
  tentative distance. O(V^2 + E), no auxiliary structure.
- ``heap``: unfinalized vertices are pulled from a PriorityQueuePort
  (HeapPriorityQueue by default). O((V + E) log V).

Edge weights must be non-negative. Negative weights are not rejected,
but the resulting distances are undefined.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Mapping, Optional, Sequence, Set, TypeVar

from ..adapters.priority import HeapPriorityQueue
from ..config import get_config
from ..domain.errors import ConfigurationError
from ..domain.models import INFINITY, WeightedEdge
from ..ports.priority import PriorityQueuePort

T = TypeVar("T", bound=Hashable)

Adjacency = Mapping[T, Sequence[WeightedEdge[T]]]

STRATEGIES = ("linear", "heap")

logger = logging.getLogger(__name__)


def dijkstra_linear(adjacency: Adjacency[T], start: T) -> Dict[T, float]:
    """Compute shortest distances from ``start`` with a linear minimum scan.

    Parameters
    ----------
    adjacency:
        Mapping of every known vertex to its outgoing weighted edges.
    start:
        Source vertex.

    Returns
    -------
    dict
        Every known vertex mapped to its distance from ``start``;
        unreachable vertices (all of them, if ``start`` is unknown) keep
        ``INFINITY``.
    """
    distances: Dict[T, float] = {vertex: INFINITY for vertex in adjacency}
    if start not in adjacency:
        return distances

    distances[start] = 0.0
    finalized: Set[T] = set()

    for _ in range(len(adjacency)):
        closest: Optional[T] = None
        closest_distance = INFINITY
        found = False

        for vertex, distance in distances.items():
            if vertex not in finalized and distance < closest_distance:
                closest, closest_distance, found = vertex, distance, True

        # Remaining vertices are unreachable.
        if not found:
            break

        finalized.add(closest)
        for edge in adjacency[closest]:
            candidate = closest_distance + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate

    return distances


def dijkstra_with_queue(
    adjacency: Adjacency[T],
    start: T,
    queue: Optional[PriorityQueuePort[T]] = None,
) -> Dict[T, float]:
    """Compute shortest distances from ``start`` using a priority queue.

    Stale queue entries (vertices already finalized through a shorter
    distance) are skipped on extraction. Returns the same map as
    ``dijkstra_linear``.
    """
    distances: Dict[T, float] = {vertex: INFINITY for vertex in adjacency}
    if start not in adjacency:
        return distances

    if queue is None:
        queue = HeapPriorityQueue(name="dijkstra")

    distances[start] = 0.0
    finalized: Set[T] = set()
    queue.insert(start, 0.0)

    while not queue.is_empty():
        vertex = queue.extract_min()
        if vertex in finalized:
            continue

        finalized.add(vertex)
        for edge in adjacency[vertex]:
            candidate = distances[vertex] + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                queue.insert(edge.target, candidate)

    return distances


def shortest_distances(
    adjacency: Adjacency[T],
    start: T,
    strategy: Optional[str] = None,
) -> Dict[T, float]:
    """Dispatch to the configured Dijkstra strategy.

    Args:
        adjacency: Mapping of every known vertex to its outgoing edges.
        start: Source vertex.
        strategy: ``"linear"`` or ``"heap"``; ``None`` uses
            ``GraphConfig.dijkstra_strategy``.

    Raises:
        ConfigurationError: If ``strategy`` is not a known strategy.
    """
    if strategy is None:
        strategy = get_config().graph.dijkstra_strategy

    logger.debug(
        "Computing shortest distances",
        extra={"start": repr(start), "vertices": len(adjacency), "strategy": strategy},
    )

    if strategy == "linear":
        return dijkstra_linear(adjacency, start)
    if strategy == "heap":
        return dijkstra_with_queue(adjacency, start)

    raise ConfigurationError(
        f"Unknown Dijkstra strategy: {strategy!r}",
        setting_name="dijkstra_strategy",
        expected_type=" | ".join(STRATEGIES),
    )
