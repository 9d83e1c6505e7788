"""In-memory line repository."""

import asyncio
import itertools
import logging
from dataclasses import dataclass

from subway_network.domain.errors import DuplicateLineNameError, LineNotFoundError
from subway_network.domain.models.fare import Fare
from subway_network.domain.models.line import Line
from subway_network.domain.models.sections import Sections
from subway_network.domain.ports.line_repository import LineRepository
from subway_network.domain.ports.section_repository import SectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineRow:
    """A stored line without its sections."""

    id: int
    name: str
    color: str
    extra_fare: int


class InMemoryLineRepository(LineRepository):
    """Stores line rows and loads sections through a section repository."""

    def __init__(self, section_repository: SectionRepository) -> None:
        """Initialize with the repository holding the lines' sections."""
        self._section_repository = section_repository
        self._rows: dict[int, LineRow] = {}
        self._ids = itertools.count(1)
        self._locks: dict[int, asyncio.Lock] = {}

    async def save(self, line: Line) -> Line:
        self._check_unique_name(line.name)
        row = LineRow(
            id=next(self._ids),
            name=line.name,
            color=line.color,
            extra_fare=line.extra_fare.value,
        )
        self._rows[row.id] = row
        logger.debug(f"Stored line {row.name} as {row.id}")
        return line.with_id(row.id)

    async def find_all(self) -> list[Line]:
        return [await self._load(row) for row in list(self._rows.values())]

    async def find_by_id(self, line_id: int) -> Line:
        return await self._load(self._get_row(line_id))

    async def update(self, line: Line) -> None:
        if line.id is None:
            raise LineNotFoundError("Cannot update a line that was never saved")
        self._get_row(line.id)
        self._check_unique_name(line.name, ignore_id=line.id)
        self._rows[line.id] = LineRow(
            id=line.id,
            name=line.name,
            color=line.color,
            extra_fare=line.extra_fare.value,
        )

    async def delete(self, line_id: int) -> None:
        self._get_row(line_id)
        del self._rows[line_id]
        self._locks.pop(line_id, None)

    def line_lock(self, line_id: int) -> asyncio.Lock:
        self._get_row(line_id)
        if line_id not in self._locks:
            self._locks[line_id] = asyncio.Lock()
        return self._locks[line_id]

    def _get_row(self, line_id: int) -> LineRow:
        try:
            return self._rows[line_id]
        except KeyError:
            raise LineNotFoundError(f"Line {line_id} does not exist") from None

    def _check_unique_name(self, name: str, ignore_id: int | None = None) -> None:
        for row in self._rows.values():
            if row.name == name and row.id != ignore_id:
                raise DuplicateLineNameError(f"Line name already exists: {name}")

    async def _load(self, row: LineRow) -> Line:
        sections = await self._section_repository.find_by_line(row.id)
        return Line(
            name=row.name,
            color=row.color,
            sections=Sections(sections),
            extra_fare=Fare(row.extra_fare),
            line_id=row.id,
        )
