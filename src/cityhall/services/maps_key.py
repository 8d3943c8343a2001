# src/cityhall/services/maps_key.py

"""Hands the configured map API key to the front end."""

import logging

from cityhall.config import Settings
from cityhall.exceptions import MapsKeyNotConfiguredError

logger = logging.getLogger(__name__)


def get_maps_key(settings: Settings) -> str:
    """Return the map API key, or raise if it is unset or a placeholder."""
    if not settings.maps_key_configured:
        logger.warning("Map API key requested but GOOGLE_MAPS_API_KEY is not set")
        raise MapsKeyNotConfiguredError()
    return settings.google_maps_api_key  # type: ignore[return-value]
