import logging

import pytest

from campus_events_api.app.core import logging_config
from campus_events_api.app.core.config import Settings
from campus_events_api.app.core.errors import (
	CampusEventsError,
	NotFoundError,
	RegistrationError,
	error_body,
	to_http_exception,
)
from campus_events_api.app.core.security import resolve_user_id, user_display_name
from campus_events_api.app.services.verification_service import generate_code


def test_resolve_user_id_defaults_and_parses():
	assert resolve_user_id(None) == 1
	assert resolve_user_id("  ") == 1
	assert resolve_user_id(" 42 ") == 42
	with pytest.raises(ValueError):
		resolve_user_id("abc")


def test_user_display_name():
	assert user_display_name(1) == "Alice Student"
	assert user_display_name(2) == "Demo User"


def test_errors_map_to_http_status():
	assert to_http_exception(NotFoundError("Event not found")).status_code == 404
	exc = to_http_exception(RegistrationError("Event is full"))
	assert exc.status_code == 400
	assert exc.detail == "Event is full"
	assert isinstance(RegistrationError("x"), (CampusEventsError, ValueError))
	assert error_body("boom") == {"ok": False, "error": "boom"}


def test_generate_code_is_six_digits():
	for _ in range(50):
		code = generate_code()
		assert len(code) == 6 and code.isdigit() and code[0] != "0"


def test_settings_cors_origin_list():
	settings = Settings(cors_origins="http://a.test, http://b.test,")
	assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
	assert Settings().otp_ttl_seconds > 0


def test_setup_logging_is_idempotent(monkeypatch):
	root = logging.getLogger()
	monkeypatch.setattr(root, "handlers", [])
	monkeypatch.setattr(root, "level", root.level)
	logging_config.setup_logging("debug")
	assert len(root.handlers) == 1
	assert root.level == logging.DEBUG
	logging_config.setup_logging("info")
	assert len(root.handlers) == 1
