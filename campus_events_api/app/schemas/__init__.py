"""
Pydantic schema definitions for API payloads.

Each domain defines its own request and response models.  JSON keys
are camelCase on the wire (``eventId``, ``spotsLeft``) while Python
attributes stay snake_case; see ``schemas.base.CamelModel``.
"""
