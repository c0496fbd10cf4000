"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo runs without any setup.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Campus Events API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the v1 router is mounted.  The browser client
    # expects ``/api``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Trusted header carrying the acting user's numeric ID.  There is no
    # real authentication: whatever the client sends is believed.
    user_header: str = os.getenv("USER_HEADER", "X-User-Id")
    default_user_id: int = int(os.getenv("DEFAULT_USER_ID", "1"))

    # Lifetime of a one‑time verification code in seconds.
    otp_ttl_seconds: int = int(os.getenv("OTP_TTL_SECONDS", str(5 * 60)))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
