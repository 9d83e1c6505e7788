"""Configuration adapters."""

from subway_network.adapters.config.app_config import AppConfig
from subway_network.adapters.config.network_configuration_loader import (
    NetworkConfigurationLoader,
)

__all__ = ["AppConfig", "NetworkConfigurationLoader"]
