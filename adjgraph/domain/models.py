"""Immutable value types for weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)

# Distance of a vertex that cannot be reached from the source.
INFINITY = float("inf")

# Returned by shortest_path when the target is unreachable.
NO_PATH = None


@dataclass(frozen=True, slots=True)
class WeightedEdge(Generic[T]):
    """A directional adjacency entry with its cost.

    Attributes:
        target: Vertex the edge points to
        weight: Non-negative cost of traversing the edge
    """

    target: T
    weight: float
