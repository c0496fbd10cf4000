"""
Pydantic models for simulated payment intents.

A payment intent is created for one user and one event, confirmed by
the (fake) processor and finally consumed by a registration.
"""

from pydantic import Field

from .base import CamelModel


class PaymentIntentCreate(CamelModel):
    event_id: int = Field(..., examples=[102])


class PaymentIntentCreated(CamelModel):
    ok: bool = True
    payment_id: str = Field(..., examples=["pay_1"])
    client_secret: str
    amount: float
    status: str


class PaymentConfirm(CamelModel):
    payment_id: str = Field(..., examples=["pay_1"])


class PaymentConfirmed(CamelModel):
    ok: bool = True
    status: str


class PaymentRead(CamelModel):
    """Schema for reading a payment intent."""

    id: str
    user_id: int
    event_id: int
    amount: float
    status: str = Field(..., examples=["requires_confirmation"])
    consumed: bool = False
