"""Campus events API client.

This module defines a small client wrapper around the Campus Events
HTTP API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`list_events` / :meth:`get_event` – browse events.
* :meth:`request_code` / :meth:`confirm_code` / :meth:`verification_status`
  – the simulated one‑time code verification.
* :meth:`create_payment_intent` / :meth:`confirm_payment` /
  :meth:`get_payment` – the simulated payment flow.
* :meth:`preview_registration` / :meth:`register` /
  :meth:`my_registrations` – registration.

:meth:`register_with_requirements` chains them the way the browser
client does: preview, verify if needed, pay if needed, register.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message``.  The acting user is
sent in the ``X-User-Id`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class CampusEventsClient:
    """Client for interacting with the Campus Events API."""

    def __init__(
        self,
        *,
        base_url: str,
        user_id: Optional[int] = None,
        api_prefix: str = "/api",
        user_header: str = "X-User-Id",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            user_id: Acting user.  If omitted the header is not sent and
                the server's default user is used.
            api_prefix: Path prefix the API is mounted under.
            user_header: Name of the trusted identity header.
            session: Optional requests session.  Anything with a
                compatible ``request`` method works, which the tests use
                to plug in FastAPI's ``TestClient``.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.user_id = user_id
        self.user_header = user_header
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, params: Dict[str, Any] | None = None,
                 json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/events``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.user_id is not None:
            headers[self.user_header] = str(self.user_id)
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        data: Any = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                data = None
        if response.status_code >= 400:
            message = ""
            if isinstance(data, dict):
                message = data.get("error") or data.get("detail") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return data, None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self, *, category: Optional[str] = None,
                    free: Optional[bool] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve events ordered by date.

        Returns ``(events, error)``; ``events`` is empty on failure.
        """
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        if free is not None:
            params["free"] = "true" if free else "false"
        data, error = self._request("GET", "/events", params=params or None)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_event(self, event_id: Any) -> Result:
        return self._request("GET", f"/events/{event_id}")

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------
    def request_code(self) -> Result:
        """Ask for a one‑time code.  The demo server returns it as ``demoCode``."""
        return self._request("POST", "/verify/request")

    def confirm_code(self, code: str) -> Result:
        return self._request("POST", "/verify/confirm", json_body={"code": code})

    def verification_status(self) -> Result:
        return self._request("GET", "/verify/status")

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------
    def create_payment_intent(self, event_id: Any) -> Result:
        return self._request("POST", "/payments/intent", json_body={"eventId": event_id})

    def confirm_payment(self, payment_id: str) -> Result:
        return self._request("POST", "/payments/confirm", json_body={"paymentId": payment_id})

    def get_payment(self, payment_id: str) -> Result:
        return self._request("GET", f"/payments/{payment_id}")

    # ------------------------------------------------------------------
    # Registrations
    # ------------------------------------------------------------------
    def preview_registration(self, event_id: Any) -> Result:
        return self._request("POST", "/registrations/preview", json_body={"eventId": event_id})

    def register(self, event_id: Any, payment_id: Optional[str] = None) -> Result:
        body: Dict[str, Any] = {"eventId": event_id}
        if payment_id:
            body["paymentId"] = payment_id
        return self._request("POST", "/registrations/register", json_body=body)

    def my_registrations(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/registrations/me")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Guided flow
    # ------------------------------------------------------------------
    def register_with_requirements(
        self,
        event_id: Any,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> Result:
        """Run the full registration flow for ``event_id``.

        Steps: preview; if verification is needed, request a code and
        submit the returned demo code; if payment is needed, create and
        confirm an intent; finally register with that intent.  The first
        failing step ends the flow and its error is returned.

        Args:
            event_id: Event to register for.
            on_status: Optional callback receiving progress messages.
        """
        def status(message: str) -> None:
            logger.info("Event %s: %s", event_id, message)
            if on_status:
                on_status(message)

        status("Checking requirements")
        preview, error = self.preview_registration(event_id)
        if error:
            return None, error

        if preview.get("needsVerification"):
            status("Needs verification, requesting code")
            issued, error = self.request_code()
            if error:
                return None, error
            _, error = self.confirm_code(issued["demoCode"])
            if error:
                return None, error

        payment_id = None
        if preview.get("needsPayment"):
            status("Creating payment intent")
            intent, error = self.create_payment_intent(event_id)
            if error:
                return None, error
            status("Confirming payment")
            _, error = self.confirm_payment(intent["paymentId"])
            if error:
                return None, error
            payment_id = intent["paymentId"]

        status("Registering")
        result, error = self.register(event_id, payment_id)
        if error:
            return None, error
        status("Done")
        return result, None
