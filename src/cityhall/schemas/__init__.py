# src/cityhall/schemas/__init__.py

"""Pydantic schemas for API validation and serialization."""

from .city import CityRead, CityRequest, PositionRead
from .common import CamelModel
from .leaderboard import LeaderboardEntryRead
from .maps import MapsKeyError, MapsKeyRead
from .player import PlayerRead, PlayerRegister, RegisterResponse
from .score import ScoreResponse, ScoreUpdate

__all__ = [
    # Common
    "CamelModel",
    # City
    "CityRead",
    "CityRequest",
    "PositionRead",
    # Leaderboard
    "LeaderboardEntryRead",
    # Maps
    "MapsKeyError",
    "MapsKeyRead",
    # Player
    "PlayerRead",
    "PlayerRegister",
    "RegisterResponse",
    # Score
    "ScoreResponse",
    "ScoreUpdate",
]
