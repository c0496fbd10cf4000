"""
Pydantic models for the simulated one‑time code verification flow.
"""

from typing import Optional, Union

from pydantic import Field, field_validator

from .base import CamelModel


class CodeRequested(CamelModel):
    ok: bool = True
    message: str
    # Returned only because this is a demo; a real system would send it
    # by SMS or e‑mail.
    demo_code: str
    expires_in_seconds: int


class CodeConfirm(CamelModel):
    code: str = Field(..., examples=["123456"])

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Union[str, int]) -> str:
        # Browser clients send the code as either a number or a string.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CodeConfirmed(CamelModel):
    ok: bool = True
    verified: bool = True
    verified_at: str


class VerificationStatus(CamelModel):
    verified: bool
    verified_at: Optional[str] = None
