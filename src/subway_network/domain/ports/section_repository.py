"""Section repository port."""

from typing import Protocol

from subway_network.domain.models.section import Section


class SectionRepository(Protocol):
    """Port for the edge rows of each line."""

    async def find_by_line(self, line_id: int) -> list[Section]:
        """Return the sections of a line in no particular order."""
        ...

    async def replace_all(self, line_id: int, sections: list[Section]) -> list[Section]:
        """Atomically rewrite a line's sections.

        The given order becomes the stored order (index 0..n-1). Sections
        without an id are inserted, known ids are updated and rows missing from
        ``sections`` are deleted.

        Returns:
            The stored sections, in order, with ids assigned.
        """
        ...

    async def delete_by_line(self, line_id: int) -> None:
        """Delete all sections of a line."""
        ...
