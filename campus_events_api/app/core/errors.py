"""
Domain errors and the JSON error envelope.

Services raise ``CampusEventsError`` subclasses.  They derive from
``ValueError`` so endpoint handlers can keep the ``except ValueError``
translation to ``HTTPException``.  Every HTTP error leaving the app is
rendered as ``{"ok": false, "error": "<message>"}`` by the handlers
registered in ``install_error_handlers``.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class CampusEventsError(ValueError):
    """Base class for failures raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CampusEventsError):
    """A referenced event or payment does not exist for this user."""

    status_code = status.HTTP_404_NOT_FOUND


class RegistrationError(CampusEventsError):
    """A workflow precondition (verification, payment, capacity) failed."""


class VerificationError(CampusEventsError):
    """A one‑time code could not be confirmed."""


def to_http_exception(exc: CampusEventsError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


def error_body(message: str) -> dict:
    return {"ok": False, "error": message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Report the first problem only; the client shows a single message.
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(
        status_code=422,
        content=error_body(message),
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the JSON envelope handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
