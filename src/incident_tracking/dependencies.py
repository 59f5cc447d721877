"""Shared FastAPI dependencies and query parameter types.

Kept out of main.py so routers can import them without a circular import.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from incident_tracking.config import settings
from incident_tracking.db.session import get_db

DB = Annotated[AsyncSession, Depends(get_db)]

# Paged list views: 1-based page number and a size capped by settings.
PageIndex = Annotated[int, Query(alias="page", ge=1)]
PageSize = Annotated[int, Query(ge=1, le=settings.max_page_size)]
