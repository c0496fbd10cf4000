"""
Simulated identity verification with one‑time codes.

A user requests a six digit code, which the demo hands straight back
instead of sending it anywhere, and then confirms it.  A confirmed
code marks the user as verified for the lifetime of the process.
"""

import logging
import secrets
import time
from datetime import datetime, timezone

from ..core.config import settings
from ..core.errors import VerificationError
from ..core.store import OneTimeCode, get_store
from ..schemas.verification import CodeConfirmed, CodeRequested, VerificationStatus


logger = logging.getLogger(__name__)


def generate_code() -> str:
    """Return a random six digit code (100000–999999)."""
    return str(100000 + secrets.randbelow(900000))


class VerificationService:
    """Issue and confirm one‑time codes."""

    @classmethod
    async def request_code(cls, user_id: int) -> CodeRequested:
        """Issue a fresh code for ``user_id``, replacing any earlier one."""
        ttl = settings.otp_ttl_seconds
        code = generate_code()
        get_store().otp_codes[user_id] = OneTimeCode(code=code, expires_at=time.time() + ttl)
        logger.info("Issued verification code for user %s (valid %ss)", user_id, ttl)
        return CodeRequested(
            message="Verification code generated (simulated)",
            demo_code=code,
            expires_in_seconds=ttl,
        )

    @classmethod
    async def confirm_code(cls, user_id: int, code: str) -> CodeConfirmed:
        """Check ``code`` against the user's pending code.

        Raises ``VerificationError`` when no code is pending, when the
        pending code has expired (it is discarded) or when the code does
        not match (the pending code is kept so the user can retry).
        """
        store = get_store()
        entry = store.otp_codes.get(user_id)
        if entry is None:
            raise VerificationError("No code requested")
        if time.time() > entry.expires_at:
            del store.otp_codes[user_id]
            logger.warning("Expired verification code submitted by user %s", user_id)
            raise VerificationError("Code expired")
        if not secrets.compare_digest(str(code).strip().encode("utf-8"), entry.code.encode("utf-8")):
            logger.warning("Invalid verification code submitted by user %s", user_id)
            raise VerificationError("Invalid code")

        del store.otp_codes[user_id]
        verified_at = datetime.now(timezone.utc).isoformat()
        store.verified_at[user_id] = verified_at
        logger.info("User %s verified", user_id)
        return CodeConfirmed(verified_at=verified_at)

    @classmethod
    async def get_status(cls, user_id: int) -> VerificationStatus:
        verified_at = get_store().verified_at.get(user_id)
        return VerificationStatus(verified=verified_at is not None, verified_at=verified_at)

    @staticmethod
    def is_verified(user_id: int) -> bool:
        return user_id in get_store().verified_at
