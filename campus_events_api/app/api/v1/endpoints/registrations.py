"""
Registration endpoints for API v1.

``/preview`` tells the client which steps (verification, payment) are
still missing; ``/register`` re‑checks them and reserves the seat;
``/me`` lists the current user's registrations.
"""

from typing import List

from fastapi import APIRouter, Depends

from campus_events_api.app.core.errors import CampusEventsError, to_http_exception
from campus_events_api.app.core.security import get_current_user
from campus_events_api.app.schemas.registration import (
    RegisterRequest,
    RegisterResult,
    RegistrationPreview,
    RegistrationRead,
    RegistrationTarget,
)
from campus_events_api.app.services.registration_service import RegistrationService


router = APIRouter()


@router.get("/me", response_model=List[RegistrationRead])
async def my_registrations(current_user: dict = Depends(get_current_user)) -> List[RegistrationRead]:
    """List the current user's registrations with their events embedded."""
    return await RegistrationService.list_for_user(current_user["user_id"])


@router.post("/preview", response_model=RegistrationPreview)
async def preview_registration(
    body: RegistrationTarget,
    current_user: dict = Depends(get_current_user),
) -> RegistrationPreview:
    """Report whether verification and/or payment are needed for the event."""
    try:
        return await RegistrationService.preview(current_user["user_id"], body.event_id)
    except CampusEventsError as e:
        raise to_http_exception(e) from e


@router.post("/register", response_model=RegisterResult, response_model_exclude_none=True)
async def register(
    body: RegisterRequest,
    current_user: dict = Depends(get_current_user),
) -> RegisterResult:
    """Register the current user for an event.

    Returns 404 for an unknown event and 400 when the event is full or
    verification or payment is missing.  Registering again for the same
    event returns ``{"ok": true, "message": "Already registered"}``.
    """
    try:
        return await RegistrationService.register(
            current_user["user_id"], body.event_id, body.payment_id
        )
    except CampusEventsError as e:
        raise to_http_exception(e) from e
