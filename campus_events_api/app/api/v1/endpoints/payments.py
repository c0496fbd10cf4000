"""
Payment endpoints for API v1.

These routes simulate a card processor: an intent is created for an
event's price and confirming it always succeeds.  No external
provider is contacted.
"""

from fastapi import APIRouter, Depends, Path

from campus_events_api.app.core.errors import CampusEventsError, to_http_exception
from campus_events_api.app.core.security import get_current_user
from campus_events_api.app.schemas.payment import (
    PaymentConfirm,
    PaymentConfirmed,
    PaymentIntentCreate,
    PaymentIntentCreated,
    PaymentRead,
)
from campus_events_api.app.services.payment_service import PaymentService


router = APIRouter()


@router.post("/intent", response_model=PaymentIntentCreated)
async def create_intent(
    body: PaymentIntentCreate,
    current_user: dict = Depends(get_current_user),
) -> PaymentIntentCreated:
    """Create a payment intent for the given event.  404 if the event is unknown."""
    try:
        return await PaymentService.create_intent(current_user["user_id"], body.event_id)
    except CampusEventsError as e:
        raise to_http_exception(e) from e


@router.post("/confirm", response_model=PaymentConfirmed)
async def confirm_payment(
    body: PaymentConfirm,
    current_user: dict = Depends(get_current_user),
) -> PaymentConfirmed:
    """Mark the current user's intent as succeeded."""
    try:
        return await PaymentService.confirm(current_user["user_id"], body.payment_id)
    except CampusEventsError as e:
        raise to_http_exception(e) from e


@router.get("/{payment_id}", response_model=PaymentRead)
async def get_payment(
    payment_id: str = Path(..., description="ID of the payment intent, e.g. pay_1"),
    current_user: dict = Depends(get_current_user),
) -> PaymentRead:
    try:
        return await PaymentService.get_payment(current_user["user_id"], payment_id)
    except CampusEventsError as e:
        raise to_http_exception(e) from e
