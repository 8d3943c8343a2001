# src/cityhall/api/player.py

"""API endpoints for registering players and awarding points."""

from fastapi import APIRouter, BackgroundTasks, Depends

from cityhall.schemas import player as player_schema
from cityhall.schemas import score as score_schema
from cityhall.schemas.leaderboard import LeaderboardEntryRead
from cityhall.services.game_state import GameStateStore, get_store
from cityhall.services.notifier import EmailNotifier, get_notifier

# Create an APIRouter instance for players
# - prefix="/api": Routes keep the paths the front end already calls
# - tags=["Players"]: Groups these endpoints under "Players" in the API docs
router = APIRouter(prefix="/api", tags=["Players"])


@router.post("/register", response_model=player_schema.RegisterResponse)
async def register_player(
    background_tasks: BackgroundTasks,
    player_in: player_schema.PlayerRegister | None = None,
    store: GameStateStore = Depends(get_store),
    notifier: EmailNotifier = Depends(get_notifier),
) -> player_schema.RegisterResponse:
    """
    Register a new player with a score of 0.

    - **name**, **email**, **photo**: Stored as given; all optional.

    When email is configured a notification is sent after the response,
    and its outcome never changes this response.
    """
    player_in = player_in or player_schema.PlayerRegister()

    player = store.register_player(
        name=player_in.name, email=player_in.email, photo=player_in.photo
    )

    if notifier.enabled:
        background_tasks.add_task(notifier.notify_registration, player)

    return player_schema.RegisterResponse(
        player=player_schema.PlayerRead.model_validate(player)
    )


@router.post("/score", response_model=score_schema.ScoreResponse)
async def update_score(
    score_in: score_schema.ScoreUpdate,
    store: GameStateStore = Depends(get_store),
) -> score_schema.ScoreResponse:
    """
    Add points to a player's score and return the refreshed leaderboard.

    - **playerId**: The id returned at registration
    - **points**: Integer points to add (may be negative)
    - **location**: Accepted but not used

    An unknown player id is not an error: nothing changes and
    `newScore` is 0.
    """
    result = store.award_points(score_in.player_id, score_in.points)

    return score_schema.ScoreResponse(
        new_score=result.new_score,
        leaderboard=[
            LeaderboardEntryRead.model_validate(entry) for entry in result.leaderboard
        ],
    )
