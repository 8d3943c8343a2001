# src/cityhall/schemas/score.py

"""Schemas for awarding points to a player."""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel
from .leaderboard import LeaderboardEntryRead


class ScoreUpdate(CamelModel):
    """Properties to receive via API on a score update.

    Attributes:
        player_id: Id returned at registration; numeric ids are accepted as strings
        points: Points to add; integer strings are coerced, other values rejected
        location: Where the points were earned; recorded by clients, unused here
    """

    player_id: str = Field(..., description="Id of the player to award")
    points: int = Field(..., description="Points to add (may be negative)")
    location: Any = None

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("points", mode="before")
    @classmethod
    def reject_bool_and_float(cls, value: Any) -> Any:
        """Only integers and integer strings count as points."""
        if isinstance(value, (bool, float)):
            raise ValueError("points must be an integer")
        return value


class ScoreResponse(CamelModel):
    success: bool = True
    new_score: int
    leaderboard: list[LeaderboardEntryRead]
