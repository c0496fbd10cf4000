"""
Business logic for events.

Events are seeded into the in‑memory store at startup and are only
read here; seat counts change through ``RegistrationService``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..core.errors import NotFoundError
from ..core.store import EventRecord, get_store
from ..schemas.event import EventRead


logger = logging.getLogger(__name__)


def _event_sort_key(event: EventRecord) -> datetime:
    return datetime.fromisoformat(event.date)


class EventService:
    """Service for browsing campus events."""

    @classmethod
    async def list_events(
        cls,
        category: Optional[str] = None,
        free: Optional[bool] = None,
    ) -> List[EventRead]:
        """Return events ordered by date, earliest first.

        - ``category`` keeps only events in that category (case insensitive).
        - ``free`` keeps only free (``True``) or paid (``False``) events.
        """
        events = list(get_store().events.values())
        if category:
            wanted = category.lower()
            events = [e for e in events if e.category.lower() == wanted]
        if free is not None:
            events = [e for e in events if e.free == free]
        events.sort(key=_event_sort_key)
        return [EventRead.model_validate(e) for e in events]

    @classmethod
    async def get_event(cls, event_id: int) -> EventRead:
        """Retrieve a single event, raising ``NotFoundError`` if missing."""
        return EventRead.model_validate(cls.require_event(event_id))

    @staticmethod
    def require_event(event_id: int) -> EventRecord:
        """Return the stored record itself so callers can mutate it."""
        event = get_store().find_event(event_id)
        if event is None:
            logger.debug("Event %s not found", event_id)
            raise NotFoundError("Event not found")
        return event
