"""Centralized configuration using Pydantic Settings.

Graph defaults and logging settings live here instead of being
hardcoded in the graph classes.

Configuration can be overridden via environment variables:
- ADJGRAPH_GRAPH_DEFAULT_DIRECTED=true
- ADJGRAPH_GRAPH_DIJKSTRA_STRATEGY=heap
- ADJGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph construction and algorithm configuration.

    Environment variables prefixed with ADJGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ADJGRAPH_GRAPH_")

    default_directed: bool = False
    dijkstra_strategy: Literal["linear", "heap"] = "linear"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ADJGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ADJGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.dijkstra_strategy)

    Environment variables prefixed with ADJGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ADJGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
