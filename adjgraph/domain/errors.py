"""Typed errors for the graph library.

Graph queries and mutations never raise: unknown vertices degrade to
empty results. These errors cover the remaining programmer mistakes,
such as naming an unknown algorithm or draining an empty queue.

All errors inherit from AdjGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AdjGraphError(Exception):
    """Base error for the graph library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConfigurationError(AdjGraphError):
    """Invalid configuration or algorithm selection.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class EmptyQueueError(AdjGraphError):
    """Extraction was attempted on an empty priority queue.

    Attributes:
        queue_name: Name of the queue, for logging
    """

    queue_name: str = ""
