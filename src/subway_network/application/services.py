"""Application services (use cases) for stations, lines, sections and fares."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from subway_network.domain.models import (
    Distance,
    Fare,
    Line,
    Section,
    Station,
    distance_fare,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from subway_network.domain.ports import (
        LineRepository,
        SectionRepository,
        StationRepository,
    )


class StationService:
    """Service for registering and removing stations."""

    def __init__(self, station_repository: "StationRepository") -> None:
        """Initialize with a station repository."""
        self._station_repository = station_repository

    async def create(self, name: str) -> Station:
        station = await self._station_repository.save(Station(name=name))
        logger.info(f"Created station {station.name} (id={station.id})")
        return station

    async def find_all(self) -> list[Station]:
        return await self._station_repository.find_all()

    async def delete(self, station_id: int) -> None:
        await self._station_repository.delete_by_id(station_id)
        logger.info(f"Deleted station {station_id}")


class LineService:
    """Service for creating, reading, modifying and deleting lines."""

    def __init__(
        self,
        line_repository: "LineRepository",
        section_repository: "SectionRepository",
        station_repository: "StationRepository",
    ) -> None:
        """Initialize with the repositories a line spans."""
        self._line_repository = line_repository
        self._section_repository = section_repository
        self._station_repository = station_repository

    async def create(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance_meters: int,
        extra_fare: int = 0,
    ) -> Line:
        """Create a line with its first section.

        Station ids are resolved before anything is stored, so an unknown
        station leaves no partially created line behind.
        """
        up_station = await self._station_repository.find_by_id(up_station_id)
        down_station = await self._station_repository.find_by_id(down_station_id)
        section = Section(
            up=up_station, down=down_station, distance=Distance.from_meters(distance_meters)
        )
        line = Line.create(name, color, section, extra_fare=Fare(extra_fare))

        saved = await self._line_repository.save(line)
        line_id = saved.saved_id
        await self._section_repository.replace_all(line_id, line.sections)
        logger.info(f"Created line {saved.name} (id={line_id}): {section}")
        return await self._line_repository.find_by_id(line_id)

    async def find_all(self) -> list[Line]:
        return await self._line_repository.find_all()

    async def find_by_id(self, line_id: int) -> Line:
        return await self._line_repository.find_by_id(line_id)

    async def modify(self, line_id: int, name: str, color: str, extra_fare: int) -> Line:
        """Change a line's name, color and extra fare; its sections are untouched."""
        async with self._line_repository.line_lock(line_id):
            line = await self._line_repository.find_by_id(line_id)
            line.update_details(name=name, color=color, extra_fare=Fare(extra_fare))
            await self._line_repository.update(line)
        logger.info(f"Modified line {line_id}: name={name}, color={color}, extra_fare={extra_fare}")
        return line

    async def delete(self, line_id: int) -> None:
        async with self._line_repository.line_lock(line_id):
            await self._line_repository.delete(line_id)
            await self._section_repository.delete_by_line(line_id)
        logger.info(f"Deleted line {line_id}")


class SectionService:
    """Service for inserting and removing sections of a line.

    Each operation loads the line, applies exactly one topology change and
    rewrites the line's sections, all under the line's lock.
    """

    def __init__(
        self,
        line_repository: "LineRepository",
        section_repository: "SectionRepository",
        station_repository: "StationRepository",
    ) -> None:
        """Initialize with the repositories a section change spans."""
        self._line_repository = line_repository
        self._section_repository = section_repository
        self._station_repository = station_repository

    async def add(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance_meters: int,
    ) -> list[Section]:
        """Add a section to a line and return the line's stored sections in order."""
        up_station = await self._station_repository.find_by_id(up_station_id)
        down_station = await self._station_repository.find_by_id(down_station_id)
        section = Section(
            up=up_station, down=down_station, distance=Distance.from_meters(distance_meters)
        )

        async with self._line_repository.line_lock(line_id):
            line = await self._line_repository.find_by_id(line_id)
            line.add_section(section)
            stored = await self._section_repository.replace_all(line_id, line.sections)

        logger.info(f"Added section {section} to line {line.name} ({len(stored)} sections)")
        return stored

    async def delete(self, line_id: int, station_id: int) -> Section:
        """Remove a station from a line and return the section that was dropped."""
        station = await self._station_repository.find_by_id(station_id)

        async with self._line_repository.line_lock(line_id):
            line = await self._line_repository.find_by_id(line_id)
            removed = line.delete(station)
            stored = await self._section_repository.replace_all(line_id, line.sections)

        logger.info(
            f"Removed {station.name} from line {line.name}, dropped section {removed} "
            f"({len(stored)} sections left)"
        )
        return removed


class FareService:
    """Service for trip fares."""

    def calculate(self, distance: Distance, lines: Iterable[Line] = ()) -> Fare:
        """Return the distance fare plus the highest extra fare among the lines used."""
        base = distance_fare.for_distance(distance)
        extra = max((line.extra_fare for line in lines), default=Fare(0))
        logger.debug(f"Fare for {distance}: base {base.value} + extra {extra.value}")
        return base.plus(extra)

    def end_to_end(self, line: Line) -> Fare | None:
        """Return the fare for riding a whole line, or None if it has no sections."""
        distance = line.total_distance()
        if distance is None:
            return None
        return self.calculate(distance, [line])
