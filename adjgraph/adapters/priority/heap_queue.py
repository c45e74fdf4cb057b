"""Binary-heap priority queue adapter.

Implements PriorityQueuePort on top of heapq. Each entry carries an
insertion sequence number, so equal priorities come out first-in
first-out and the stored items never need to be comparable.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Tuple, TypeVar

from ...domain.errors import EmptyQueueError

T = TypeVar("T")


@dataclass
class HeapPriorityQueue(Generic[T]):
    """Min-priority queue with stable ordering for duplicate priorities.

    Attributes:
        name: Queue name for logging and error reporting

    Example:
        queue = HeapPriorityQueue[str](name="frontier")
        queue.insert("B", 4.0)
        queue.insert("C", 2.0)
        queue.extract_min()  # "C"
    """

    name: str = "queue"

    _heap: List[Tuple[float, int, T]] = field(default_factory=list, repr=False)
    _sequence: Iterator[int] = field(default_factory=itertools.count, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def insert(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._sequence), item))

    def extract_min(self) -> T:
        """Remove and return the lowest-priority item.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            self._logger.debug("Extract from empty queue", extra={"queue": self.name})
            raise EmptyQueueError(
                f"Cannot extract from empty queue '{self.name}'",
                queue_name=self.name,
            )
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek(self) -> T:
        """Return the lowest-priority item without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError(
                f"Cannot peek into empty queue '{self.name}'",
                queue_name=self.name,
            )
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
