"""
Business logic for payments.

Payment intents live in the in‑memory store.  No processor is
contacted: confirming an intent simply marks it ``succeeded``, the
way a provider callback would.  An intent is tied to one user and one
event and can pay for exactly one registration.
"""

import logging

from ..core.errors import NotFoundError, RegistrationError
from ..core.store import (
    PAYMENT_REQUIRES_CONFIRMATION,
    PAYMENT_SUCCEEDED,
    PaymentIntentRecord,
    get_store,
)
from ..schemas.payment import PaymentConfirmed, PaymentIntentCreated, PaymentRead
from .event_service import EventService


logger = logging.getLogger(__name__)


class PaymentService:
    """Create, confirm and inspect simulated payment intents."""

    @classmethod
    async def create_intent(cls, user_id: int, event_id: int) -> PaymentIntentCreated:
        """Open a payment intent for the event's price.

        Raises ``NotFoundError`` if the event does not exist.
        """
        event = EventService.require_event(event_id)
        store = get_store()
        intent = PaymentIntentRecord(
            id=store.new_payment_id(),
            user_id=user_id,
            event_id=event.id,
            amount=event.price or 0,
        )
        store.payments[intent.id] = intent
        logger.info(
            "Created payment intent %s for user %s, event %s, amount %s",
            intent.id, user_id, event.id, intent.amount,
        )
        return PaymentIntentCreated(
            payment_id=intent.id,
            client_secret=f"demo_secret_{intent.id}",
            amount=intent.amount,
            status=intent.status,
        )

    @classmethod
    async def confirm(cls, user_id: int, payment_id: str) -> PaymentConfirmed:
        """Simulate the processor approving the charge.

        Only ``requires_confirmation`` intents change; confirming an
        intent that already succeeded returns its status unchanged.
        """
        intent = cls.require_owned(user_id, payment_id)
        if intent.status == PAYMENT_REQUIRES_CONFIRMATION:
            intent.status = PAYMENT_SUCCEEDED
            logger.info("Payment %s succeeded", payment_id)
        return PaymentConfirmed(status=intent.status)

    @classmethod
    async def get_payment(cls, user_id: int, payment_id: str) -> PaymentRead:
        return PaymentRead.model_validate(cls.require_owned(user_id, payment_id))

    @staticmethod
    def require_owned(user_id: int, payment_id: str) -> PaymentIntentRecord:
        intent = get_store().payments.get(payment_id)
        # Someone else's intent is reported exactly like a missing one.
        if intent is None or intent.user_id != user_id:
            raise NotFoundError("Payment not found")
        return intent

    @staticmethod
    def check_usable(user_id: int, event_id: int, payment_id: str | None) -> PaymentIntentRecord:
        """Validate that ``payment_id`` can pay for this registration.

        Does not mutate the intent; ``RegistrationService`` consumes it
        once every other check has passed.
        """
        intent = get_store().payments.get(payment_id) if payment_id else None
        if intent is None or intent.user_id != user_id or intent.event_id != event_id:
            raise RegistrationError("Missing or invalid payment")
        if intent.status != PAYMENT_SUCCEEDED:
            raise RegistrationError("Payment not completed")
        if intent.consumed:
            raise RegistrationError("Payment already used")
        return intent
