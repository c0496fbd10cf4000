"""
Application package initializer.

The service is split by domain: events, identity verification,
payments and registrations.  Each domain has a Pydantic schema module,
a service class holding the business logic and a router defined in
``api/v1/endpoints``.  All domains share the in‑memory tables from
``core.store``.
"""

from .main import app  # noqa: F401
