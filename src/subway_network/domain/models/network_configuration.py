"""Network configuration domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SectionConfiguration:
    """A configured section between two stations, referenced by name."""

    up: str
    down: str
    distance: int  # meters


@dataclass(frozen=True)
class LineConfiguration:
    """A configured line and its sections, in any connectable order."""

    name: str
    color: str
    sections: list[SectionConfiguration]
    extra_fare: int = 0


@dataclass(frozen=True)
class NetworkConfiguration:
    """All configured lines."""

    lines: list[LineConfiguration] = field(default_factory=list)

    @property
    def station_names(self) -> list[str]:
        """Distinct station names in first-seen order."""
        names: dict[str, None] = {}
        for line in self.lines:
            for section in line.sections:
                names.setdefault(section.up)
                names.setdefault(section.down)
        return list(names)
