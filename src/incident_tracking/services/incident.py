"""Incident business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from incident_tracking.db.source import SelectSource
from incident_tracking.exceptions import NotFoundError
from incident_tracking.models import Incident
from incident_tracking.repositories.incident import get_incident_by_id, incidents_newest_first
from incident_tracking.schemas.pagination import PagedView, from_source


async def list_incidents(
    db: AsyncSession,
    page_index: int,
    page_size: int,
    status: str | None = None,
) -> PagedView[Incident]:
    """Return one page of incidents, newest first, optionally filtered by status.

    Two queries per call: the total count, then the page itself.
    """
    source = SelectSource(db, incidents_newest_first(status))
    return await from_source(source, page_index, page_size)


async def get_incident(db: AsyncSession, incident_id: int) -> Incident:
    incident = await get_incident_by_id(db, incident_id)
    if incident is None:
        raise NotFoundError("Incident", incident_id)
    return incident
