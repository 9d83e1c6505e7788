"""Domain layer - core business logic and models."""

from subway_network.domain.errors import ErrorKind, SubwayError
from subway_network.domain.models import (
    Distance,
    Fare,
    Line,
    Section,
    Sections,
    Station,
)
from subway_network.domain.ports import (
    LineRepository,
    SectionRepository,
    StationRepository,
)

__all__ = [
    "Distance",
    "ErrorKind",
    "Fare",
    "Line",
    "LineRepository",
    "Section",
    "SectionRepository",
    "Sections",
    "Station",
    "StationRepository",
    "SubwayError",
]
