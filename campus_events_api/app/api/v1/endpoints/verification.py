"""
Verification endpoints for API v1.

Simulated one‑time code flow: request a code, confirm it, check the
current status.  The code is returned in the response because no SMS
or e‑mail gateway exists in the demo.
"""

from fastapi import APIRouter, Depends

from campus_events_api.app.core.errors import CampusEventsError, to_http_exception
from campus_events_api.app.core.security import get_current_user
from campus_events_api.app.schemas.verification import (
    CodeConfirm,
    CodeConfirmed,
    CodeRequested,
    VerificationStatus,
)
from campus_events_api.app.services.verification_service import VerificationService


router = APIRouter()


@router.post("/request", response_model=CodeRequested)
async def request_code(current_user: dict = Depends(get_current_user)) -> CodeRequested:
    """Issue a new verification code for the current user."""
    return await VerificationService.request_code(current_user["user_id"])


@router.post("/confirm", response_model=CodeConfirmed)
async def confirm_code(
    body: CodeConfirm,
    current_user: dict = Depends(get_current_user),
) -> CodeConfirmed:
    """Confirm the pending code.

    Returns 400 when no code was requested, the code expired or it does
    not match.
    """
    try:
        return await VerificationService.confirm_code(current_user["user_id"], body.code)
    except CampusEventsError as e:
        raise to_http_exception(e) from e


@router.get("/status", response_model=VerificationStatus)
async def verification_status(current_user: dict = Depends(get_current_user)) -> VerificationStatus:
    return await VerificationService.get_status(current_user["user_id"])
