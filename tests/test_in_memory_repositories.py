"""Tests for the in-memory persistence adapters."""

import pytest

from subway_network.adapters.memory import (
    InMemoryLineRepository,
    InMemorySectionRepository,
    InMemoryStationRepository,
)
from subway_network.domain.errors import (
    DuplicateLineNameError,
    DuplicateStationNameError,
    LineNotFoundError,
    StationNotFoundError,
)
from subway_network.domain.models import Distance, Fare, Line, Section, Station

A = Station("A", 1)
B = Station("B", 2)
C = Station("C", 3)


class TestStationRepository:
    """Tests for InMemoryStationRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_ids(self) -> None:
        """Given new stations, when saving, then each gets a distinct id."""
        repository = InMemoryStationRepository()

        first = await repository.save(Station("Gangnam"))
        second = await repository.save(Station("Yeoksam"))

        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id
        assert await repository.find_all() == [first, second]

    @pytest.mark.asyncio
    async def test_save_rejects_duplicate_name(self) -> None:
        """Given a stored name, when saving it again, then DuplicateStationNameError is raised."""
        repository = InMemoryStationRepository()
        await repository.save(Station("Gangnam"))

        with pytest.raises(DuplicateStationNameError):
            await repository.save(Station("Gangnam"))

    @pytest.mark.asyncio
    async def test_find_by_id(self) -> None:
        """Given a stored station, when finding by id, then it is returned."""
        repository = InMemoryStationRepository()
        saved = await repository.save(Station("Gangnam"))
        assert saved.id is not None

        assert (await repository.find_by_id(saved.id)).name == "Gangnam"

    @pytest.mark.asyncio
    async def test_unknown_ids_raise_not_found(self) -> None:
        """Given an unknown id, when finding or deleting, then StationNotFoundError is raised."""
        repository = InMemoryStationRepository()

        with pytest.raises(StationNotFoundError):
            await repository.find_by_id(99)
        with pytest.raises(StationNotFoundError):
            await repository.delete_by_id(99)

    @pytest.mark.asyncio
    async def test_delete_by_id(self) -> None:
        """Given a stored station, when deleting, then it can no longer be found."""
        repository = InMemoryStationRepository()
        saved = await repository.save(Station("Gangnam"))
        assert saved.id is not None

        await repository.delete_by_id(saved.id)

        assert await repository.find_all() == []


class TestSectionRepository:
    """Tests for InMemorySectionRepository."""

    @pytest.mark.asyncio
    async def test_replace_all_assigns_ids_and_indexes(self) -> None:
        """Given new sections, when rewriting, then ids are assigned and order becomes the index."""
        repository = InMemorySectionRepository()

        stored = await repository.replace_all(
            1, [Section(A, B, Distance(10)), Section(B, C, Distance(5))]
        )

        assert all(section.id is not None for section in stored)
        rows = await repository.find_rows(1)
        assert [row.index for row in rows] == [0, 1]
        assert [row.section for row in rows] == stored

    @pytest.mark.asyncio
    async def test_replace_all_keeps_ids_and_drops_missing_rows(self) -> None:
        """Given stored sections, when rewriting a subset, then kept ids survive and others vanish."""
        repository = InMemorySectionRepository()
        first, second = await repository.replace_all(
            1, [Section(A, B, Distance(10)), Section(B, C, Distance(5))]
        )

        stored = await repository.replace_all(1, [Section(A, C, Distance(15), id=second.id)])

        assert [section.id for section in stored] == [second.id]
        assert first.id not in {section.id for section in await repository.find_by_line(1)}

    @pytest.mark.asyncio
    async def test_find_by_line_does_not_follow_path_order(self) -> None:
        """Given sections stored out of id order, when loading, then they come back by id."""
        repository = InMemorySectionRepository()
        await repository.replace_all(
            1, [Section(B, C, Distance(5), id=7), Section(A, B, Distance(10), id=3)]
        )

        assert [section.id for section in await repository.find_by_line(1)] == [3, 7]

    @pytest.mark.asyncio
    async def test_lines_are_isolated(self) -> None:
        """Given two lines, when deleting one line's sections, then the other is untouched."""
        repository = InMemorySectionRepository()
        await repository.replace_all(1, [Section(A, B, Distance(10))])
        await repository.replace_all(2, [Section(B, C, Distance(5))])

        await repository.delete_by_line(1)

        assert await repository.find_by_line(1) == []
        assert await repository.find_by_line(2) == [Section(B, C, Distance(5))]


class TestLineRepository:
    """Tests for InMemoryLineRepository."""

    @pytest.fixture
    def sections(self) -> InMemorySectionRepository:
        return InMemorySectionRepository()

    @pytest.fixture
    def repository(self, sections: InMemorySectionRepository) -> InMemoryLineRepository:
        return InMemoryLineRepository(sections)

    @pytest.mark.asyncio
    async def test_find_by_id_rebuilds_path_order(
        self, repository: InMemoryLineRepository, sections: InMemorySectionRepository
    ) -> None:
        """Given sections stored by id, when loading the line, then stations are in path order."""
        saved = await repository.save(Line("Line 2", "green", extra_fare=Fare(100)))
        assert saved.id is not None
        await sections.replace_all(
            saved.id, [Section(B, C, Distance(5), id=1), Section(A, B, Distance(10), id=2)]
        )

        line = await repository.find_by_id(saved.id)

        assert line.stations == [A, B, C]
        assert line.extra_fare == Fare(100)

    @pytest.mark.asyncio
    async def test_save_rejects_duplicate_name(self, repository: InMemoryLineRepository) -> None:
        """Given a stored line name, when saving it again, then DuplicateLineNameError is raised."""
        await repository.save(Line("Line 2", "green"))

        with pytest.raises(DuplicateLineNameError):
            await repository.save(Line("Line 2", "blue"))

    @pytest.mark.asyncio
    async def test_update_rejects_name_of_another_line(
        self, repository: InMemoryLineRepository
    ) -> None:
        """Given two lines, when renaming one to the other's name, then it is rejected."""
        await repository.save(Line("Line 2", "green"))
        line_3 = await repository.save(Line("Line 3", "orange"))
        line_3.update_details("Line 2", "orange", Fare(0))

        with pytest.raises(DuplicateLineNameError):
            await repository.update(line_3)

    @pytest.mark.asyncio
    async def test_update_keeps_own_name(self, repository: InMemoryLineRepository) -> None:
        """Given a line, when updating only its color, then its own name is not a conflict."""
        line = await repository.save(Line("Line 2", "green"))
        assert line.id is not None
        line.update_details("Line 2", "lime", Fare(200))

        await repository.update(line)

        reloaded = await repository.find_by_id(line.id)
        assert (reloaded.color, reloaded.extra_fare) == ("lime", Fare(200))

    @pytest.mark.asyncio
    async def test_unknown_line_raises_not_found(self, repository: InMemoryLineRepository) -> None:
        """Given an unknown id, when loading, updating or deleting, then LineNotFoundError is raised."""
        with pytest.raises(LineNotFoundError):
            await repository.find_by_id(5)
        with pytest.raises(LineNotFoundError):
            await repository.delete(5)
        with pytest.raises(LineNotFoundError):
            await repository.update(Line("Line 2", "green", line_id=5))

    @pytest.mark.asyncio
    async def test_line_lock_is_shared_per_line(self, repository: InMemoryLineRepository) -> None:
        """Given the same line id, when asking for its lock twice, then the same lock is returned."""
        line_2 = await repository.save(Line("Line 2", "green"))
        line_3 = await repository.save(Line("Line 3", "orange"))
        assert line_2.id is not None
        assert line_3.id is not None

        assert repository.line_lock(line_2.id) is repository.line_lock(line_2.id)
        assert repository.line_lock(line_2.id) is not repository.line_lock(line_3.id)

    @pytest.mark.asyncio
    async def test_line_lock_rejects_unknown_line(self, repository: InMemoryLineRepository) -> None:
        """Given unknown line ids, when asking for their locks, then none is kept."""
        for line_id in range(1000, 1100):
            with pytest.raises(LineNotFoundError):
                repository.line_lock(line_id)

        assert repository._locks == {}

    @pytest.mark.asyncio
    async def test_deleting_line_drops_its_lock(self, repository: InMemoryLineRepository) -> None:
        """Given a locked line, when deleting it, then its lock is released from the registry."""
        line = await repository.save(Line("Line 2", "green"))
        assert line.id is not None
        repository.line_lock(line.id)

        await repository.delete(line.id)

        assert repository._locks == {}
