"""Incident endpoints."""

from fastapi import APIRouter

from incident_tracking.config import settings
from incident_tracking.dependencies import DB, PageIndex, PageSize
from incident_tracking.schemas.incident import IncidentListResponse, IncidentResponse, Status
from incident_tracking.services.incident import get_incident, list_incidents

router = APIRouter()


@router.get("/incidents", response_model=IncidentListResponse, status_code=200)
async def list_incidents_endpoint(
    db: DB,
    page_index: PageIndex = 1,
    page_size: PageSize = settings.default_page_size,
    status: Status | None = None,
) -> IncidentListResponse:
    """List incidents one page at a time, newest first.

    Pages past the last one come back with an empty ``items`` list.
    """
    view = await list_incidents(db, page_index, page_size, status)
    return IncidentListResponse.model_validate(view)


@router.get("/incidents/{incident_id}", response_model=IncidentResponse, status_code=200)
async def get_incident_endpoint(db: DB, incident_id: int) -> IncidentResponse:
    incident = await get_incident(db, incident_id)
    return IncidentResponse.model_validate(incident)
