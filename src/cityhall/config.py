# src/cityhall/config.py

"""Process-wide settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv(override=False)

# Value shipped in example .env files; treated the same as an unset key.
MAPS_KEY_PLACEHOLDER = "YOUR_API_KEY_PLACEHOLDER"

DEFAULT_NOTIFY_EMAIL_TO = "cfabian@resourcex.net"
DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Configuration values for a running server.

    Attributes:
        google_maps_api_key: Third-party map key handed to the front end
        email_user: SMTP login and sender address; None disables notifications
        email_pass: SMTP password
        notify_email_to: Recipient of new-player notifications
        smtp_host: SMTP server host (SSL)
        smtp_port: SMTP server port
        host: Interface uvicorn binds to
        port: Port uvicorn listens on
        environment: Deployment mode label, only logged at startup
        static_dir: Directory holding the front-end assets
        max_body_bytes: Largest request body accepted
        log_level: Root log level for the CLI entry point
    """

    google_maps_api_key: str | None = None
    email_user: str | None = None
    email_pass: str | None = None
    notify_email_to: str = DEFAULT_NOTIFY_EMAIL_TO
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    static_dir: str = "public"
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    log_level: str = "INFO"

    @property
    def maps_key_configured(self) -> bool:
        key = self.google_maps_api_key
        return bool(key) and key != MAPS_KEY_PLACEHOLDER

    @property
    def email_enabled(self) -> bool:
        return bool(self.email_user)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables."""
        return cls(
            google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY"),
            email_user=os.getenv("EMAIL_USER") or None,
            email_pass=os.getenv("EMAIL_PASS") or None,
            notify_email_to=os.getenv("NOTIFY_EMAIL_TO", DEFAULT_NOTIFY_EMAIL_TO),
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=_env_int("SMTP_PORT", 465),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            environment=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development",
            static_dir=os.getenv("STATIC_DIR", "public"),
            max_body_bytes=_env_int("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency returning the settings loaded at first use."""
    return Settings.from_env()
