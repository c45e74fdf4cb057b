"""Logging setup for the library.

Modules log through ``logging.getLogger(__name__)`` and attach context
with ``extra``; nothing is emitted until a handler is configured, either
by the host application or with ``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

LOGGER_NAME = "adjgraph"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Apply the configured level and format to the ``adjgraph`` logger.

    Calling it again updates the level and format instead of stacking
    handlers.

    Args:
        config: Logging settings; defaults to ``get_config().observability``.

    Returns:
        The package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())

    formatter = logging.Formatter(config.format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_adjgraph_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._adjgraph_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(formatter)

    return logger
