"""Line repository port."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from subway_network.domain.models.line import Line


class LineRepository(Protocol):
    """Port for storing lines and loading them with their sections."""

    async def save(self, line: Line) -> Line:
        """Persist a new line (without its sections) and return it with its id.

        Raises DuplicateLineNameError if the name is taken.
        """
        ...

    async def find_all(self) -> list[Line]:
        """Return all lines with their sections."""
        ...

    async def find_by_id(self, line_id: int) -> Line:
        """Load a line with its sections, raising LineNotFoundError if unknown."""
        ...

    async def update(self, line: Line) -> None:
        """Store a line's name, color and extra fare."""
        ...

    async def delete(self, line_id: int) -> None:
        """Delete a line, raising LineNotFoundError if unknown."""
        ...

    def line_lock(self, line_id: int) -> AbstractAsyncContextManager[None]:
        """Serialize read-modify-write cycles on one line.

        Raises:
            LineNotFoundError: If the line does not exist.
        """
        ...
