"""
Pydantic models for event data.

``EventRead`` is the full public representation of an event;
``EventSummary`` is the reduced form embedded in registration
previews.
"""

from pydantic import Field

from .base import CamelModel


class EventSummary(CamelModel):
    id: int
    title: str
    price: float = 0
    free: bool


class EventRead(CamelModel):
    """Schema for reading an event from the API."""

    id: int = Field(..., examples=[101])
    title: str = Field(..., examples=["Club Fair"])
    category: str = Field(..., examples=["Social"])
    date: str = Field(..., examples=["2025-11-10T10:00:00"])
    location: str = Field(..., examples=["Student Center"])
    club_id: int
    free: bool
    price: float = 0
    requires_verification: bool = False
    spots_left: int = Field(..., ge=0)
    popularity: int = 0
