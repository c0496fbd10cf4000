"""
Pydantic models for registration preview, registration and listing.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel
from .event import EventRead, EventSummary


class RegistrationTarget(CamelModel):
    event_id: int = Field(..., examples=[101])


class RegisterRequest(RegistrationTarget):
    # Required only when the event charges a fee.
    payment_id: Optional[str] = Field(None, examples=["pay_1"])


class RegistrationPreview(CamelModel):
    ok: bool = True
    event: EventSummary
    needs_payment: bool
    needs_verification: bool


class RegisterResult(CamelModel):
    """Outcome of a successful register call.

    ``registered`` is set when a seat was reserved by this call;
    ``message`` is set when the user already held a seat.
    """

    ok: bool = True
    registered: Optional[bool] = None
    message: Optional[str] = None


class RegistrationRead(CamelModel):
    user_id: int
    event_id: int
    at: str
    event: Optional[EventRead] = None
