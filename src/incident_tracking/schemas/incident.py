"""Incident response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from incident_tracking.schemas.pagination import PagedResponse

Severity = Literal["low", "medium", "high", "critical"]
Status = Literal["open", "investigating", "resolved", "closed"]


class IncidentResponse(BaseModel):
    """A single incident as returned by the API."""

    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str
    severity: Severity
    status: Status
    reported_by: str
    occurred_at: datetime
    created_at: datetime
    updated_at: datetime


IncidentListResponse = PagedResponse[IncidentResponse]
