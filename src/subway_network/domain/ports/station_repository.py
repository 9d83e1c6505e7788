"""Station repository port."""

from typing import Protocol

from subway_network.domain.models.station import Station


class StationRepository(Protocol):
    """Port for storing and resolving stations."""

    async def save(self, station: Station) -> Station:
        """Persist a new station and return it with its id.

        Raises DuplicateStationNameError if the name is taken.
        """
        ...

    async def find_all(self) -> list[Station]:
        """Return all stations."""
        ...

    async def find_by_id(self, station_id: int) -> Station:
        """Resolve a station by id, raising StationNotFoundError if unknown."""
        ...

    async def delete_by_id(self, station_id: int) -> None:
        """Delete a station, raising StationNotFoundError if unknown."""
        ...
