"""
Business logic for the registration workflow.

A client previews an event to learn what is required, optionally
verifies and pays, and then calls ``register``.  ``register``
re‑evaluates every precondition itself: nothing from the preview is
trusted, so a seat that disappeared in between is reported as a
normal failure.

Eligibility rules
-----------------
* Verification is required iff the event asks for it and the user has
  no verification timestamp.
* Payment is required iff the event is not free and its price is
  positive.  A succeeded, unconsumed intent for the same user and
  event must then be supplied.

All checks run before any mutation.  When they pass, the registration
is appended, the seat count drops by one and the intent (if any) is
marked consumed, with no ``await`` in between.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import RegistrationError
from ..core.store import RegistrationRecord, get_store
from ..schemas.event import EventRead, EventSummary
from ..schemas.registration import RegisterResult, RegistrationPreview, RegistrationRead
from .event_service import EventService
from .payment_service import PaymentService
from .verification_service import VerificationService


logger = logging.getLogger(__name__)


class RegistrationService:
    """Preview, perform and list event registrations."""

    @classmethod
    async def preview(cls, user_id: int, event_id: int) -> RegistrationPreview:
        """Report which steps the user must complete before registering."""
        event = EventService.require_event(event_id)
        return RegistrationPreview(
            event=EventSummary(id=event.id, title=event.title, price=event.price or 0, free=event.free),
            needs_payment=event.needs_payment,
            needs_verification=event.requires_verification and not VerificationService.is_verified(user_id),
        )

    @classmethod
    async def register(cls, user_id: int, event_id: int, payment_id: Optional[str] = None) -> RegisterResult:
        """Reserve a seat for ``user_id`` on ``event_id``.

        Registering twice is not an error: the second call reports
        ``"Already registered"`` and changes nothing.

        Raises
        ------
        NotFoundError
            The event does not exist.
        RegistrationError
            The event is full, or verification or payment is missing.
        """
        store = get_store()
        event = EventService.require_event(event_id)

        if store.find_registration(user_id, event.id) is not None:
            logger.info("User %s already registered for event %s", user_id, event.id)
            return RegisterResult(message="Already registered")

        if event.spots_left <= 0:
            cls._reject(user_id, event.id, "Event is full")

        if event.requires_verification and not VerificationService.is_verified(user_id):
            cls._reject(user_id, event.id, "Verification required")

        intent = None
        if event.needs_payment:
            try:
                intent = PaymentService.check_usable(user_id, event.id, payment_id)
            except RegistrationError as exc:
                cls._reject(user_id, event.id, exc.message)

        store.registrations.append(
            RegistrationRecord(
                user_id=user_id,
                event_id=event.id,
                at=datetime.now(timezone.utc).isoformat(),
            )
        )
        event.spots_left = max(0, event.spots_left - 1)
        if intent is not None:
            intent.consumed = True
        logger.info(
            "User %s registered for event %s (%d spots left)", user_id, event.id, event.spots_left
        )
        return RegisterResult(registered=True)

    @classmethod
    async def list_for_user(cls, user_id: int) -> List[RegistrationRead]:
        """Return the user's registrations in booking order, each with its event."""
        store = get_store()
        result: List[RegistrationRead] = []
        for reg in store.registrations:
            if reg.user_id != user_id:
                continue
            event = store.find_event(reg.event_id)
            result.append(
                RegistrationRead(
                    user_id=reg.user_id,
                    event_id=reg.event_id,
                    at=reg.at,
                    event=EventRead.model_validate(event) if event is not None else None,
                )
            )
        return result

    @staticmethod
    def _reject(user_id: int, event_id: int, reason: str) -> None:
        logger.warning("Registration of user %s for event %s rejected: %s", user_id, event_id, reason)
        raise RegistrationError(reason)
