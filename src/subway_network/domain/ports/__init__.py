"""Ports (interfaces) for the ports-and-adapters architecture."""

from subway_network.domain.ports.line_repository import LineRepository
from subway_network.domain.ports.section_repository import SectionRepository
from subway_network.domain.ports.station_repository import StationRepository

__all__ = [
    "LineRepository",
    "SectionRepository",
    "StationRepository",
]
