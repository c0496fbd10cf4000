"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under their resource
prefixes.  When a new domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import events, payments, registrations, verification

# Create a router for version 1 and include sub‑routers for each domain.
router = APIRouter()

router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(verification.router, prefix="/verify", tags=["verification"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(registrations.router, prefix="/registrations", tags=["registrations"])
