"""
In‑memory tables shared by all services.

The demo keeps every record in process memory: events, registrations,
verification flags, one‑time codes and payment intents.  Nothing
survives a restart.  ``init_store`` seeds the demo events at
application start and ``reset_store`` discards everything, which the
test suite uses between cases.

There is no locking.  Request handlers run on the event loop and the
services never await between reading and mutating a table, so each
operation runs to completion before the next request touches the
store.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)


PAYMENT_REQUIRES_CONFIRMATION = "requires_confirmation"
PAYMENT_SUCCEEDED = "succeeded"


@dataclass
class EventRecord:
    id: int
    title: str
    category: str
    date: str
    location: str
    club_id: int
    free: bool
    price: float
    requires_verification: bool
    spots_left: int
    popularity: int

    @property
    def needs_payment(self) -> bool:
        """Payment is due when the event is not free and has a positive price."""
        return not self.free and (self.price or 0) > 0


@dataclass
class RegistrationRecord:
    user_id: int
    event_id: int
    at: str


@dataclass
class OneTimeCode:
    code: str
    expires_at: float


@dataclass
class PaymentIntentRecord:
    id: str
    user_id: int
    event_id: int
    amount: float
    status: str = PAYMENT_REQUIRES_CONFIRMATION
    consumed: bool = False


@dataclass
class Store:
    """Container for every table of the demo."""

    events: Dict[int, EventRecord] = field(default_factory=dict)
    registrations: List[RegistrationRecord] = field(default_factory=list)
    # user_id -> ISO timestamp of successful verification
    verified_at: Dict[int, str] = field(default_factory=dict)
    otp_codes: Dict[int, OneTimeCode] = field(default_factory=dict)
    payments: Dict[str, PaymentIntentRecord] = field(default_factory=dict)
    next_payment_id: int = 1

    def find_event(self, event_id: int) -> Optional[EventRecord]:
        return self.events.get(event_id)

    def find_registration(self, user_id: int, event_id: int) -> Optional[RegistrationRecord]:
        for reg in self.registrations:
            if reg.user_id == user_id and reg.event_id == event_id:
                return reg
        return None

    def new_payment_id(self) -> str:
        payment_id = f"pay_{self.next_payment_id}"
        self.next_payment_id += 1
        return payment_id


DEMO_EVENTS: List[EventRecord] = [
    EventRecord(
        id=101,
        title="Club Fair",
        category="Social",
        date="2025-11-10T10:00:00",
        location="Student Center",
        club_id=1,
        free=True,
        price=0,
        requires_verification=False,
        spots_left=20,
        popularity=88,
    ),
    EventRecord(
        id=102,
        title="ML Workshop: Intro to LLMs",
        category="Workshop",
        date="2025-11-12T13:00:00",
        location="Brickyard 210",
        club_id=1,
        free=False,
        price=10,
        requires_verification=True,
        spots_left=8,
        popularity=76,
    ),
    EventRecord(
        id=103,
        title="Tech Talk: Building Scalable APIs",
        category="Tech Talk",
        date="2025-11-15T16:00:00",
        location="Engineering Hall",
        club_id=2,
        free=True,
        price=0,
        requires_verification=False,
        spots_left=15,
        popularity=70,
    ),
    EventRecord(
        id=104,
        title="Hack Night",
        category="Social",
        date="2025-11-20T18:30:00",
        location="Polytechnic Lab 2",
        club_id=3,
        free=False,
        price=5,
        requires_verification=False,
        spots_left=12,
        popularity=82,
    ),
]


_store = Store()


def get_store() -> Store:
    """Return the process‑wide store."""
    return _store


def reset_store() -> Store:
    """Drop all state and start with an empty store."""
    global _store
    _store = Store()
    return _store


def init_store(events: Optional[List[EventRecord]] = None) -> Store:
    """Reset the store and seed it with events.

    Seed records are deep‑copied so mutations (``spots_left``) never
    leak back into ``DEMO_EVENTS``.
    """
    store = reset_store()
    for event in copy.deepcopy(events if events is not None else DEMO_EVENTS):
        store.events[event.id] = event
    logger.info("Seeded store with %d events", len(store.events))
    return store
