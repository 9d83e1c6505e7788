"""Section domain model."""

from dataclasses import dataclass, field

from subway_network.domain.errors import SameStationSectionError
from subway_network.domain.models.distance import Distance
from subway_network.domain.models.station import Station


@dataclass(frozen=True)
class Section:
    """A directed track segment between two adjacent stations.

    Equality is domain equality: same station pair and distance, regardless of
    ``id``. Use ``has_same_id`` for identity equality.
    """

    up: Station
    down: Station
    distance: Distance
    id: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.up == self.down:
            raise SameStationSectionError(
                f"Section cannot start and end at the same station: {self.up.name}"
            )

    def contains_station(self, station: Station) -> bool:
        return station == self.up or station == self.down

    def shares_up_with(self, other: "Section") -> bool:
        return self.up == other.up

    def shares_down_with(self, other: "Section") -> bool:
        return self.down == other.down

    def connects(self, up: Station, down: Station) -> bool:
        """Return True if this section runs from ``up`` to ``down``."""
        return self.up == up and self.down == down

    def has_same_id(self, other: "Section") -> bool:
        return self.id is not None and self.id == other.id

    def with_id(self, section_id: int | None) -> "Section":
        return Section(up=self.up, down=self.down, distance=self.distance, id=section_id)

    def __str__(self) -> str:
        return f"{self.up.name} -> {self.down.name} ({self.distance})"
