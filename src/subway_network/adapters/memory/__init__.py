"""In-memory persistence adapters."""

from subway_network.adapters.memory.in_memory_line_repository import InMemoryLineRepository
from subway_network.adapters.memory.in_memory_section_repository import (
    InMemorySectionRepository,
    SectionRow,
)
from subway_network.adapters.memory.in_memory_station_repository import (
    InMemoryStationRepository,
)

__all__ = [
    "InMemoryLineRepository",
    "InMemorySectionRepository",
    "InMemoryStationRepository",
    "SectionRow",
]
