# tests/conftest.py

"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
from cityhall.config import Settings, get_settings
from cityhall.main import app
from cityhall.services.game_state import GameStateStore, Player, get_store
from cityhall.services.notifier import get_notifier
from httpx import ASGITransport, AsyncClient

TEST_MAPS_KEY = "test-maps-key"


class RecordingNotifier:
    """Stands in for EmailNotifier and remembers who it was asked to announce."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.notified: list[Player] = []

    def notify_registration(self, player: Player) -> bool:
        self.notified.append(player)
        return True


@pytest.fixture
def store() -> GameStateStore:
    """A fresh, empty store for each test."""
    return GameStateStore()


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def settings(static_dir: Path) -> Settings:
    return Settings(google_maps_api_key=TEST_MAPS_KEY, static_dir=str(static_dir))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
async def async_client(
    store: GameStateStore, settings: Settings, notifier: RecordingNotifier
) -> AsyncGenerator[AsyncClient, None]:
    """Fixture to provide an async test client for the API."""

    # Override dependencies so each test sees its own state and config
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Clean up the overrides after the test
    app.dependency_overrides.clear()
