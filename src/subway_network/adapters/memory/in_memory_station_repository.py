"""In-memory station repository."""

import itertools
import logging

from subway_network.domain.errors import DuplicateStationNameError, StationNotFoundError
from subway_network.domain.models.station import Station
from subway_network.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class InMemoryStationRepository(StationRepository):
    """Stores stations in a dict keyed by id."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._stations: dict[int, Station] = {}
        self._ids = itertools.count(1)

    async def save(self, station: Station) -> Station:
        if any(stored.name == station.name for stored in self._stations.values()):
            raise DuplicateStationNameError(f"Station name already exists: {station.name}")
        station_id = next(self._ids)
        saved = station.with_id(station_id)
        self._stations[station_id] = saved
        logger.debug(f"Stored station {saved.name} as {saved.id}")
        return saved

    async def find_all(self) -> list[Station]:
        return list(self._stations.values())

    async def find_by_id(self, station_id: int) -> Station:
        try:
            return self._stations[station_id]
        except KeyError:
            raise StationNotFoundError(f"Station {station_id} does not exist") from None

    async def delete_by_id(self, station_id: int) -> None:
        if self._stations.pop(station_id, None) is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
