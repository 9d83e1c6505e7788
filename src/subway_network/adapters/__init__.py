"""Adapters layer - external system integrations."""

from subway_network.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_network.adapters.memory import (
    InMemoryLineRepository,
    InMemorySectionRepository,
    InMemoryStationRepository,
)

__all__ = [
    "AppConfig",
    "InMemoryLineRepository",
    "InMemorySectionRepository",
    "InMemoryStationRepository",
    "NetworkConfigurationLoader",
]
