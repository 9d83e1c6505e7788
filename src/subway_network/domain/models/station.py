"""Station domain model."""

from dataclasses import dataclass

from subway_network.domain.errors import BlankValueError, StationNotFoundError


@dataclass(frozen=True, eq=False)
class Station:
    """A subway station.

    Two stations are the same when their names match and, if both are
    persisted, their ids match too.
    """

    name: str
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise BlankValueError("Station name is required")

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def saved_id(self) -> int:
        """The id of a persisted station; raises StationNotFoundError before it is saved."""
        if self.id is None:
            raise StationNotFoundError(f"Station {self.name} has not been saved")
        return self.id

    def with_id(self, station_id: int) -> "Station":
        return Station(name=self.name, id=station_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        if self.id is not None and other.id is not None:
            return self.id == other.id and self.name == other.name
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name
