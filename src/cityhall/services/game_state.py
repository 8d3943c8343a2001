# src/cityhall/services/game_state.py

"""In-memory player and leaderboard storage."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger(__name__)

# Number of entries returned by leaderboard reads and score updates.
LEADERBOARD_SIZE = 20


@dataclass
class Player:
    """A registered player. Name, email and photo are stored verbatim."""

    id: str
    name: str | None
    email: str | None
    photo: str | None
    score: int = 0
    joined_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class LeaderboardEntry:
    """Leaderboard row; `name` is a snapshot taken at registration."""

    id: str
    name: str | None
    score: int = 0


@dataclass
class AwardResult:
    """Outcome of a score update: the player's score and the current top entries."""

    new_score: int
    leaderboard: list[LeaderboardEntry]


class GameStateStore:
    """Owns the player and leaderboard collections for one server process.

    The leaderboard is kept sorted by score (highest first) after every
    award, so reads never need to sort. Ties keep their previous relative
    order. Nothing is ever removed, and nothing survives a restart.
    """

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._leaderboard: list[LeaderboardEntry] = []
        self._lock = threading.Lock()
        self._last_id = 0

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped when two registrations share a tick
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    @property
    def player_count(self) -> int:
        return len(self._players)

    def register_player(
        self, name: str | None, email: str | None, photo: str | None
    ) -> Player:
        """Create a player with a zero score and a matching leaderboard entry."""
        with self._lock:
            player = Player(id=self._next_id(), name=name, email=email, photo=photo)
            self._players.append(player)
            self._leaderboard.append(
                LeaderboardEntry(id=player.id, name=player.name, score=0)
            )
            logger.info("Registered player %s (%s)", player.id, player.name)
            return replace(player)

    def get_player(self, player_id: str) -> Player | None:
        with self._lock:
            player = self._find_player(player_id)
            return replace(player) if player else None

    def award_points(self, player_id: str, points: int) -> AwardResult:
        """
        Add `points` to a player's score and re-sort the leaderboard.

        An unknown `player_id` changes nothing and reports a score of 0.
        """
        with self._lock:
            player = self._find_player(player_id)
            if player is None:
                logger.info("Score update for unknown player %s ignored", player_id)
                return AwardResult(new_score=0, leaderboard=self._top(LEADERBOARD_SIZE))

            player.score += points

            for entry in self._leaderboard:
                if entry.id == player_id:
                    entry.score = player.score
                    break

            # list.sort is stable, so equal scores keep their prior order
            self._leaderboard.sort(key=lambda entry: entry.score, reverse=True)

            return AwardResult(
                new_score=player.score, leaderboard=self._top(LEADERBOARD_SIZE)
            )

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
        """Return the first `limit` entries of the already sorted leaderboard."""
        with self._lock:
            return self._top(limit)

    def _find_player(self, player_id: str) -> Player | None:
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    def _top(self, limit: int) -> list[LeaderboardEntry]:
        return [replace(entry) for entry in self._leaderboard[:limit]]


def get_store(request: Request) -> GameStateStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store  # type: ignore[no-any-return]
