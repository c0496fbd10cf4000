"""
Event endpoints for API v1.

Read‑only browsing of the seeded campus events.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from campus_events_api.app.core.errors import CampusEventsError, to_http_exception
from campus_events_api.app.schemas.event import EventRead
from campus_events_api.app.services.event_service import EventService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(
    category: Optional[str] = Query(None, description="Only events in this category"),
    free: Optional[bool] = Query(None, description="Only free (true) or paid (false) events"),
) -> List[EventRead]:
    """List events ordered by date, earliest first."""
    return await EventService.list_events(category=category, free=free)


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: int) -> EventRead:
    """Retrieve a single event by its ID.  Raises 404 if not found."""
    try:
        return await EventService.get_event(event_id)
    except CampusEventsError as e:
        raise to_http_exception(e) from e
