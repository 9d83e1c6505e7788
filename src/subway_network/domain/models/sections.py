"""Sections domain model: the ordered track of a single line."""

from collections.abc import Iterable

from subway_network.domain.errors import (
    CannotDeleteLastSectionError,
    CorruptSectionsError,
    DistanceExceedsSectionError,
    DuplicateSectionError,
    InvalidSectionError,
    SectionNotConnectableError,
    StationNotOnLineError,
)
from subway_network.domain.models.distance import Distance
from subway_network.domain.models.section import Section
from subway_network.domain.models.station import Station


class Sections:
    """Owns the sections of one line and keeps them a single simple path.

    The edge set may be handed in unordered (as loaded from storage). Path order
    is always derived from topology: the head is the only station without an
    incoming section, and every station has at most one outgoing section.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self._sections: list[Section] = list(sections)

    def __len__(self) -> int:
        return len(self._sections)

    @property
    def is_empty(self) -> bool:
        return not self._sections

    def add(self, section: Section) -> None:
        """Insert a section, extending the line or splitting an existing section.

        Raises:
            SectionNotConnectableError: Neither station is on the line.
            DuplicateSectionError: The line already runs between the same stations.
            DistanceExceedsSectionError: The section is not shorter than the one it splits.
            InvalidSectionError: The section cannot be placed on the path.
        """
        path = self._path()
        if not path:
            self._sections = [section]
            return

        stations = self._stations_of(path)
        has_up = section.up in stations
        has_down = section.down in stations

        if not has_up and not has_down:
            raise SectionNotConnectableError(
                f"Neither {section.up.name} nor {section.down.name} is on the line"
            )
        if any(edge.connects(section.up, section.down) for edge in path):
            raise DuplicateSectionError(
                f"A section from {section.up.name} to {section.down.name} already exists"
            )
        if has_up and has_down:
            raise InvalidSectionError(
                f"Both {section.up.name} and {section.down.name} are already on the line"
            )

        if section.up == path[-1].down:
            path.append(section)
        elif section.down == path[0].up:
            path.insert(0, section)
        else:
            path = self._split(path, section)
        self._sections = path

    def delete(self, station: Station) -> Section:
        """Remove a station from the line and return the section that disappeared.

        A terminus drops its only section. An interior station merges its two
        adjacent sections into one; the merged section takes the successor's
        slot and id, and the predecessor is returned as removed.

        Raises:
            StationNotOnLineError: The station is not on the line.
            CannotDeleteLastSectionError: The line has a single section.
        """
        path = self._path()
        if not any(edge.contains_station(station) for edge in path):
            raise StationNotOnLineError(f"Station {station.name} is not on the line")
        if len(path) == 1:
            raise CannotDeleteLastSectionError(
                f"Cannot remove {station.name}: the line has only one section"
            )

        if path[0].up == station:
            removed = path.pop(0)
        elif path[-1].down == station:
            removed = path.pop()
        else:
            index = next(i for i, edge in enumerate(path) if edge.down == station)
            predecessor, successor = path[index], path[index + 1]
            merged = Section(
                up=predecessor.up,
                down=successor.down,
                distance=predecessor.distance.plus(successor.distance),
                id=successor.id,
            )
            path[index : index + 2] = [merged]
            removed = predecessor

        self._sections = path
        return removed

    def get_sections(self) -> list[Section]:
        """Return the sections in path order, head to tail."""
        return self._path()

    def get_all_stations(self) -> list[Station]:
        """Return the stations in path order, head to tail.

        Raises:
            CorruptSectionsError: The sections do not form a single path.
        """
        return self._stations_of(self._path())

    def contains_station(self, station: Station) -> bool:
        return any(edge.contains_station(station) for edge in self._sections)

    def total_distance(self) -> Distance | None:
        """Return the summed distance of all sections, or None when empty."""
        if not self._sections:
            return None
        return Distance(sum(edge.distance.meters for edge in self._sections))

    @staticmethod
    def _stations_of(path: list[Section]) -> list[Station]:
        if not path:
            return []
        return [path[0].up] + [edge.down for edge in path]

    @staticmethod
    def _split(path: list[Section], section: Section) -> list[Section]:
        for index, edge in enumerate(path):
            if edge.shares_up_with(section):
                remainder = Sections._remaining(edge, section)
                replacement = [
                    Section(up=edge.up, down=section.down, distance=section.distance, id=edge.id),
                    Section(up=section.down, down=edge.down, distance=remainder),
                ]
            elif edge.shares_down_with(section):
                remainder = Sections._remaining(edge, section)
                replacement = [
                    Section(up=edge.up, down=section.up, distance=remainder, id=edge.id),
                    Section(up=section.up, down=edge.down, distance=section.distance),
                ]
            else:
                continue
            return path[:index] + replacement + path[index + 1 :]

        raise InvalidSectionError(
            f"No section shares an endpoint with {section.up.name} -> {section.down.name}"
        )

    @staticmethod
    def _remaining(edge: Section, section: Section) -> Distance:
        if section.distance >= edge.distance:
            raise DistanceExceedsSectionError(
                f"New section ({section.distance}) must be shorter than "
                f"{edge.up.name} -> {edge.down.name} ({edge.distance})"
            )
        return edge.distance.minus(section.distance)

    def _path(self) -> list[Section]:
        edges = self._sections
        if not edges:
            return []

        heads = [edge for edge in edges if not any(other.down == edge.up for other in edges)]
        tails = [edge for edge in edges if not any(other.up == edge.down for other in edges)]
        if len(heads) != 1 or len(tails) != 1:
            raise CorruptSectionsError(
                f"Expected one head and one tail, found {len(heads)} head(s) "
                f"and {len(tails)} tail(s)"
            )

        path = [heads[0]]
        while len(path) < len(edges):
            current = path[-1].down
            successors = [edge for edge in edges if edge.up == current]
            if len(successors) != 1:
                raise CorruptSectionsError(
                    f"Station {current.name} has {len(successors)} outgoing sections"
                )
            successor = successors[0]
            if any(visited is successor for visited in path):
                raise CorruptSectionsError(f"Sections loop back through {successor.up.name}")
            path.append(successor)
        return path
