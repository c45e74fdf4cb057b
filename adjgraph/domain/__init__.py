"""Domain layer: value types and typed errors shared by the graph classes."""

from .errors import AdjGraphError, ConfigurationError, EmptyQueueError
from .models import INFINITY, NO_PATH, WeightedEdge

__all__ = [
    "AdjGraphError",
    "ConfigurationError",
    "EmptyQueueError",
    "INFINITY",
    "NO_PATH",
    "WeightedEdge",
]
