"""Line domain model."""

from collections.abc import Iterable

from subway_network.domain.errors import BlankValueError, LineNotFoundError
from subway_network.domain.models.distance import Distance
from subway_network.domain.models.fare import Fare
from subway_network.domain.models.section import Section
from subway_network.domain.models.sections import Sections
from subway_network.domain.models.station import Station


def _require_text(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BlankValueError(f"Line {field_name} is required")
    return value


class Line:
    """A named, colored subway line owning its sections.

    Sections are only changed through ``add_section`` and ``delete`` so the
    path stays consistent.
    """

    def __init__(
        self,
        name: str,
        color: str,
        sections: Sections | Iterable[Section] = (),
        extra_fare: Fare | None = None,
        line_id: int | None = None,
    ) -> None:
        self._name = _require_text(name, "name")
        self._color = _require_text(color, "color")
        self._extra_fare = extra_fare or Fare(0)
        self._sections = sections if isinstance(sections, Sections) else Sections(sections)
        self._id = line_id

    @classmethod
    def create(
        cls, name: str, color: str, section: Section, extra_fare: Fare | None = None
    ) -> "Line":
        """Create a new, not yet persisted line with its first section."""
        return cls(name=name, color=color, sections=[section], extra_fare=extra_fare)

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def saved_id(self) -> int:
        """The id of a persisted line; raises LineNotFoundError before it is saved."""
        if self._id is None:
            raise LineNotFoundError(f"Line {self._name} has not been saved")
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> str:
        return self._color

    @property
    def extra_fare(self) -> Fare:
        return self._extra_fare

    @property
    def sections(self) -> list[Section]:
        return self._sections.get_sections()

    @property
    def stations(self) -> list[Station]:
        return self._sections.get_all_stations()

    def add_section(self, section: Section) -> None:
        self._sections.add(section)

    def delete(self, station: Station) -> Section:
        """Remove a station from the line, returning the section that disappeared."""
        return self._sections.delete(station)

    def total_distance(self) -> Distance | None:
        return self._sections.total_distance()

    def has_same_name_with(self, other: "Line") -> bool:
        return self._name == other.name

    def update_details(self, name: str, color: str, extra_fare: Fare) -> None:
        name = _require_text(name, "name")
        color = _require_text(color, "color")
        self._name, self._color, self._extra_fare = name, color, extra_fare

    def with_id(self, line_id: int) -> "Line":
        return Line(
            name=self._name,
            color=self._color,
            sections=Sections(self._sections.get_sections()),
            extra_fare=self._extra_fare,
            line_id=line_id,
        )

    def __repr__(self) -> str:
        return f"Line(id={self._id!r}, name={self._name!r}, color={self._color!r})"
