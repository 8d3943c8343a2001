# tests/test_api_maps.py

"""Tests for the map API key endpoint."""

import pytest
from cityhall.config import MAPS_KEY_PLACEHOLDER, Settings, get_settings
from cityhall.main import app
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_maps_key_configured(async_client: AsyncClient, settings: Settings):
    response = await async_client.get("/api/google-maps-key")

    assert response.status_code == 200
    assert response.json() == {"key": settings.google_maps_api_key}


@pytest.mark.asyncio
@pytest.mark.parametrize("key", [None, "", MAPS_KEY_PLACEHOLDER])
async def test_maps_key_not_configured(async_client: AsyncClient, key):
    """Unset, empty and placeholder keys give a 500 with a null key."""
    app.dependency_overrides[get_settings] = lambda: Settings(google_maps_api_key=key)

    response = await async_client.get("/api/google-maps-key")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Google Maps API key not configured",
        "key": None,
    }
