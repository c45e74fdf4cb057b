"""Text rendering of graphs and shortest-distance maps.

The graph classes only return data; these helpers turn that data into
lines for logs, notebooks or a caller's own CLI. Nothing here writes to
stdout.
"""

from __future__ import annotations

from typing import Hashable, Iterable, List, Mapping

from .graph import UnweightedGraph, WeightedGraph

ARROW = "→"


def _format_weight(weight: float) -> str:
    # 4.0 renders as "4", inf as "inf"
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def format_graph(graph: UnweightedGraph) -> List[str]:
    """One ``"A → B, C"`` line per vertex, in insertion order."""
    lines = []
    for vertex in graph:
        neighbors = ", ".join(str(neighbor) for neighbor in graph.get_neighbors(vertex))
        lines.append(f"{vertex} {ARROW} {neighbors}".rstrip())
    return lines


def format_weighted_graph(graph: WeightedGraph) -> List[str]:
    """One ``"A → B(4), C(2)"`` line per vertex, in insertion order."""
    lines = []
    for vertex in graph:
        edges = ", ".join(
            f"{edge.target}({_format_weight(edge.weight)})"
            for edge in graph.get_neighbors(vertex)
        )
        lines.append(f"{vertex} {ARROW} {edges}".rstrip())
    return lines


def format_distances(start: Hashable, distances: Mapping[Hashable, float]) -> List[str]:
    """One ``"A → B: 4"`` line per entry of a ``dijkstra`` result."""
    return [
        f"{start} {ARROW} {vertex}: {_format_weight(distance)}"
        for vertex, distance in distances.items()
    ]


def render(lines: Iterable[str]) -> str:
    return "\n".join(lines)
