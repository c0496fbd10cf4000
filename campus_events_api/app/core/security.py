"""
Request identity for the demo.

There is no authentication.  The acting user is taken from a trusted
request header (``X-User-Id`` by default, see ``Settings.user_header``)
and falls back to ``Settings.default_user_id`` when the header is
absent.  The returned dictionary mirrors the shape route handlers
expect from a real auth dependency: ``user_id`` and a display
``name``.
"""

from typing import Dict, Optional, Union

from fastapi import HTTPException, Request, status

from .config import settings


def user_display_name(user_id: int) -> str:
    return "Alice Student" if user_id == 1 else "Demo User"


def resolve_user_id(raw: Optional[str]) -> int:
    """Parse the header value into a user ID.

    Raises ``ValueError`` for anything that is not an integer.
    """
    if raw is None or not raw.strip():
        return settings.default_user_id
    return int(raw.strip())


def get_current_user(request: Request) -> Dict[str, Union[int, str]]:
    """Dependency that resolves the acting user from the trusted header."""
    raw = request.headers.get(settings.user_header)
    try:
        user_id = resolve_user_id(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {settings.user_header} header",
        )
    return {"user_id": user_id, "name": user_display_name(user_id)}
