"""Priority queue port - Injectable min-priority abstraction.

Dijkstra's heap strategy selects the next vertex to finalize through
this protocol instead of scanning every tentative distance.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class PriorityQueuePort(Protocol[T]):
    """Port for min-priority containers.

    Implementations:
    - adapters/priority/heap_queue.py (HeapPriorityQueue)

    Items sharing a priority must be extracted in a stable order so that
    shortest-distance results do not depend on item comparability.
    """

    def insert(self, item: T, priority: float) -> None:
        """Add an item with the given priority.

        Args:
            item: The item to store.
            priority: Lower values are extracted first.
        """
        ...

    def extract_min(self) -> T:
        """Remove and return the item with the lowest priority.

        Raises:
            EmptyQueueError: If the queue holds no items.
        """
        ...

    def is_empty(self) -> bool:
        """Return True if no items remain."""
        ...
