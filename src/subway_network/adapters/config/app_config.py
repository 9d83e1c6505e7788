"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import sys
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name (e.g. DEBUG, INFO)")

    # TOML network file with lines and their sections
    network_file: str | None = Field(
        default="network.example.toml",
        description="Path to TOML file describing the subway network",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def configure_logging(self) -> None:
        """Configure root logging at the configured level."""
        logging.basicConfig(
            level=self.log_level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            stream=sys.stderr,
        )

    def _load_toml_data(self) -> dict[str, Any]:
        if not self.network_file:
            raise ValueError("network_file must be set to load the network configuration")

        config_path = Path(self.network_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_network_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[lines]] entries of the network TOML file.

        Raises ValueError if 'lines' is not a list or a line name repeats.
        """
        toml_data = self._load_toml_data()

        lines = toml_data.get("lines", [])
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")

        names = [line.get("name") for line in lines if isinstance(line, dict)]
        if len(names) != len(set(names)):
            duplicates = {name for name in names if names.count(name) > 1}
            raise ValueError(f"Line names must be unique. Duplicate names found: {duplicates}")

        return lines
