"""Network configuration loader."""

import logging
from typing import Any

from subway_network.adapters.config.app_config import AppConfig
from subway_network.domain.models.network_configuration import (
    LineConfiguration,
    NetworkConfiguration,
    SectionConfiguration,
)

logger = logging.getLogger(__name__)


class NetworkConfigurationLoader:
    """Loads the network configuration from app config."""

    @staticmethod
    def load_section_config_from_data(section_data: Any) -> SectionConfiguration:
        """Load a single section from a TOML table."""
        if not isinstance(section_data, dict):
            raise ValueError(f"Section must be a table, got {section_data!r}")

        up = section_data.get("up")
        down = section_data.get("down")
        distance = section_data.get("distance")
        if not isinstance(up, str) or not isinstance(down, str):
            raise ValueError(f"Section needs 'up' and 'down' station names: {section_data}")
        if isinstance(distance, bool) or not isinstance(distance, int):
            raise ValueError(f"Section distance must be whole meters: {section_data}")

        return SectionConfiguration(up=up, down=down, distance=distance)

    @staticmethod
    def load_line_config_from_data(line_data: Any) -> LineConfiguration | None:
        """Load a single line from a TOML table, or None if it is not a table."""
        if not isinstance(line_data, dict):
            return None

        name = line_data.get("name")
        color = line_data.get("color")
        if not name or not color:
            raise ValueError(f"Every line needs a 'name' and a 'color': {line_data}")

        sections_data = line_data.get("sections", [])
        if not isinstance(sections_data, list) or not sections_data:
            raise ValueError(f"Line '{name}' must list at least one section")

        extra_fare = line_data.get("extra_fare", 0)
        if isinstance(extra_fare, bool) or not isinstance(extra_fare, int):
            raise ValueError(f"Line '{name}' extra_fare must be a whole number: {extra_fare!r}")

        return LineConfiguration(
            name=str(name),
            color=str(color),
            sections=[
                NetworkConfigurationLoader.load_section_config_from_data(section)
                for section in sections_data
            ],
            extra_fare=extra_fare,
        )

    @staticmethod
    def load(config: AppConfig) -> NetworkConfiguration:
        """Load the network configuration from app config."""
        lines: list[LineConfiguration] = []
        for line_data in config.get_network_config():
            line_config = NetworkConfigurationLoader.load_line_config_from_data(line_data)
            if line_config is None:
                continue
            lines.append(line_config)

        logger.debug(f"Loaded {len(lines)} line(s) from {config.network_file}")
        return NetworkConfiguration(lines=lines)
