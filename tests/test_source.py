"""SelectSource against a real (SQLite) database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from incident_tracking.db.source import SelectSource
from incident_tracking.repositories.incident import incidents_newest_first
from incident_tracking.schemas.pagination import from_source
from tests.seeds import seed_title


@pytest.mark.asyncio
async def test_count_all_incidents(seeded_db: AsyncSession) -> None:
    source = SelectSource(seeded_db, incidents_newest_first())
    assert await source.count() == 25


@pytest.mark.asyncio
async def test_count_respects_filter(seeded_db: AsyncSession) -> None:
    source = SelectSource(seeded_db, incidents_newest_first(status="resolved"))
    assert await source.count() == 5


@pytest.mark.asyncio
async def test_count_empty_table(db: AsyncSession) -> None:
    assert await SelectSource(db, incidents_newest_first()).count() == 0


@pytest.mark.asyncio
async def test_slice_keeps_statement_order(seeded_db: AsyncSession) -> None:
    source = SelectSource(seeded_db, incidents_newest_first())
    rows = await source.slice(0, 3)
    assert [row.title for row in rows] == [seed_title(24), seed_title(23), seed_title(22)]


@pytest.mark.asyncio
async def test_slice_past_end_is_empty(seeded_db: AsyncSession) -> None:
    source = SelectSource(seeded_db, incidents_newest_first())
    assert await source.slice(30, 10) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("offset, limit", [(-10, 10), (0, 0)])
async def test_slice_outside_range_is_empty(
    seeded_db: AsyncSession, offset: int, limit: int
) -> None:
    source = SelectSource(seeded_db, incidents_newest_first())
    assert await source.slice(offset, limit) == []


@pytest.mark.asyncio
async def test_from_source_over_database(seeded_db: AsyncSession) -> None:
    source = SelectSource(seeded_db, incidents_newest_first())

    first = await from_source(source, page_index=2, page_size=10)
    second = await from_source(source, page_index=2, page_size=10)

    assert first.total_pages == 3
    assert [row.title for row in first] == [seed_title(n) for n in range(14, 4, -1)]
    assert first == second
