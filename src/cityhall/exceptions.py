# src/cityhall/exceptions.py

"""Custom exception hierarchy for the City Hall game backend.

This module provides a structured exception hierarchy that enables:
1. Proper HTTP status code mapping in API endpoints
2. Detailed error context for logging
"""

from __future__ import annotations


class CityHallError(Exception):
    """Base exception for all City Hall errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Configuration Errors (HTTP 500)
# =============================================================================


class ConfigurationError(CityHallError):
    """Base class for missing or invalid process configuration."""

    pass


class MapsKeyNotConfiguredError(ConfigurationError):
    """Raised when the map API key is unset, empty or still the placeholder."""

    def __init__(self) -> None:
        super().__init__(
            message="Google Maps API key not configured",
            details={"setting": "GOOGLE_MAPS_API_KEY"},
        )


# =============================================================================
# Notification Errors (logged, never returned to clients)
# =============================================================================


class NotificationError(CityHallError):
    """Raised when a notification email could not be delivered."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(
            message=reason,
            details={"recipient": recipient},
        )
