# src/cityhall/api/leaderboard.py

"""API endpoint for reading the leaderboard."""

from fastapi import APIRouter, Depends

from cityhall.schemas.leaderboard import LeaderboardEntryRead
from cityhall.services.game_state import GameStateStore, get_store

router = APIRouter(prefix="/api", tags=["Leaderboard"])


@router.get("/leaderboard", response_model=list[LeaderboardEntryRead])
async def get_leaderboard(
    store: GameStateStore = Depends(get_store),
) -> list[LeaderboardEntryRead]:
    """Return the top 20 players, highest score first."""
    return [
        LeaderboardEntryRead.model_validate(entry) for entry in store.get_leaderboard()
    ]
