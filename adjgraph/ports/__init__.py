"""Ports: protocols for collaborators the graph algorithms can consume."""

from .priority import PriorityQueuePort

__all__ = ["PriorityQueuePort"]
