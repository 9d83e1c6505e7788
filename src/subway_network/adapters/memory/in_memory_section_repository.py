"""In-memory section repository."""

import itertools
import logging
from dataclasses import dataclass

from subway_network.domain.models.section import Section
from subway_network.domain.ports.section_repository import SectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionRow:
    """A stored section with its owning line and position on that line."""

    line_id: int
    index: int
    section: Section


class InMemorySectionRepository(SectionRepository):
    """Stores each line's section rows as one list that is swapped on rewrite."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._rows: dict[int, list[SectionRow]] = {}
        self._ids = itertools.count(1)

    async def find_by_line(self, line_id: int) -> list[Section]:
        # Rows come back by id, not by position, like an unordered table scan.
        rows = sorted(self._rows.get(line_id, []), key=lambda row: row.section.id or 0)
        return [row.section for row in rows]

    async def find_rows(self, line_id: int) -> list[SectionRow]:
        """Return a line's rows ordered by their stored index."""
        return sorted(self._rows.get(line_id, []), key=lambda row: row.index)

    async def replace_all(self, line_id: int, sections: list[Section]) -> list[Section]:
        previous_ids = {row.section.id for row in self._rows.get(line_id, [])}

        rows: list[SectionRow] = []
        for index, section in enumerate(sections):
            section_id = section.id if section.id is not None else next(self._ids)
            rows.append(
                SectionRow(line_id=line_id, index=index, section=section.with_id(section_id))
            )

        kept_ids = {row.section.id for row in rows}
        self._rows[line_id] = rows
        logger.debug(
            f"Rewrote line {line_id}: {len(rows)} sections, "
            f"{len(kept_ids - previous_ids)} inserted, {len(previous_ids - kept_ids)} deleted"
        )
        return [row.section for row in rows]

    async def delete_by_line(self, line_id: int) -> None:
        self._rows.pop(line_id, None)
