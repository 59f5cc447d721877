"""Incident data-access layer.

Pure query functions — no business logic, no HTTP concerns.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from incident_tracking.models import Incident


def incidents_newest_first(status: str | None = None) -> Select[tuple[Incident]]:
    """Build the statement behind the incident list, most recent first."""
    stmt = select(Incident).order_by(Incident.occurred_at.desc(), Incident.id.desc())
    if status is not None:
        stmt = stmt.where(Incident.status == status)
    return stmt


async def get_incident_by_id(db: AsyncSession, incident_id: int) -> Incident | None:
    return await db.get(Incident, incident_id)
