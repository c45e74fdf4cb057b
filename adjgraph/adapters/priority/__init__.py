"""Priority queue adapters.

Available implementations:
- HeapPriorityQueue: binary heap backed by heapq
"""

from .heap_queue import HeapPriorityQueue

__all__ = ["HeapPriorityQueue"]
