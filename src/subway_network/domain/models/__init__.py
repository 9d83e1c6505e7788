"""Domain models for the subway network."""

from subway_network.domain.models import distance_fare
from subway_network.domain.models.distance import Distance
from subway_network.domain.models.error_details import ErrorDetails
from subway_network.domain.models.fare import Fare
from subway_network.domain.models.line import Line
from subway_network.domain.models.network_configuration import (
    LineConfiguration,
    NetworkConfiguration,
    SectionConfiguration,
)
from subway_network.domain.models.section import Section
from subway_network.domain.models.sections import Sections
from subway_network.domain.models.station import Station

__all__ = [
    "Distance",
    "ErrorDetails",
    "Fare",
    "Line",
    "LineConfiguration",
    "NetworkConfiguration",
    "Section",
    "SectionConfiguration",
    "Sections",
    "Station",
    "distance_fare",
]
