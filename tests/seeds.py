"""Reusable seed data fixtures for integration tests."""

from datetime import UTC, datetime, timedelta

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import make_incident

SEED_COUNT = 25
SEED_START = datetime(2025, 3, 1, 8, 0, tzinfo=UTC)


def seed_title(n: int) -> str:
    return f"Incident {n:02d}"


@pytest_asyncio.fixture
async def seeded_db(db: AsyncSession) -> AsyncSession:
    """Seed 25 incidents, one hour apart, oldest first.

    Incident n occurs n hours after SEED_START. Every fifth one
    (0, 5, 10, 15, 20) is resolved, the rest are open.
    """
    severities = ["low", "medium", "high", "critical"]
    db.add_all(
        [
            make_incident(
                title=seed_title(n),
                severity=severities[n % len(severities)],
                status="resolved" if n % 5 == 0 else "open",
                occurred_at=SEED_START + timedelta(hours=n),
            )
            for n in range(SEED_COUNT)
        ]
    )
    await db.commit()
    return db
