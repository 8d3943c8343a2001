# src/cityhall/schemas/leaderboard.py

"""Leaderboard schemas."""

from .common import CamelModel


class LeaderboardEntryRead(CamelModel):
    """Single leaderboard row, ordered by score (highest first) in lists."""

    name: str | None
    score: int
    id: str
