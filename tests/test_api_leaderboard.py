# tests/test_api_leaderboard.py

"""Tests for the leaderboard endpoint and end-to-end scoring flows."""

import pytest
from httpx import AsyncClient

# =============================================================================
# Helper Functions
# =============================================================================


async def register(client: AsyncClient, name: str) -> str:
    res = await client.post("/api/register", json={"name": name})
    assert res.status_code == 200
    return str(res.json()["player"]["id"])


async def award(client: AsyncClient, player_id: str, points: int) -> dict:
    res = await client.post(
        "/api/score", json={"playerId": player_id, "points": points}
    )
    assert res.status_code == 200
    return dict(res.json())


# =============================================================================
# Leaderboard reads
# =============================================================================


@pytest.mark.asyncio
async def test_empty_leaderboard(async_client: AsyncClient):
    response = await async_client.get("/api/leaderboard")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_leaderboard_entry_shape(async_client: AsyncClient):
    """Entries carry exactly name, score and id."""
    player_id = await register(async_client, "Alice")

    response = await async_client.get("/api/leaderboard")

    assert response.json() == [{"name": "Alice", "score": 0, "id": player_id}]


@pytest.mark.asyncio
async def test_leaderboard_truncated_to_twenty(async_client: AsyncClient):
    """Never more than 20 entries, however many players register."""
    for i in range(25):
        await register(async_client, f"Player{i}")

    response = await async_client.get("/api/leaderboard")

    assert response.status_code == 200
    assert len(response.json()) == 20


@pytest.mark.asyncio
async def test_leaderboard_sorted_after_awards(async_client: AsyncClient):
    ids = [await register(async_client, name) for name in ("A", "B", "C", "D")]

    for player_id, points in zip(ids, (5, 40, 15, 40)):
        data = await award(async_client, player_id, points)
        returned = [entry["score"] for entry in data["leaderboard"]]
        assert returned == sorted(returned, reverse=True)

    response = await async_client.get("/api/leaderboard")
    assert [entry["score"] for entry in response.json()] == [40, 40, 15, 5]


# =============================================================================
# Scenario: city points drive the leaderboard
# =============================================================================


@pytest.mark.asyncio
async def test_city_scoring_scenario(async_client: AsyncClient):
    """Alice scores a Plano selfie, Bob a regular city; order follows points."""
    alice_id = await register(async_client, "Alice")
    plano = (await async_client.post("/api/city", json={"cityName": "plano"})).json()

    data = await award(async_client, alice_id, plano["points"])
    assert data["newScore"] == 50
    assert [(e["name"], e["score"]) for e in data["leaderboard"]] == [("Alice", 50)]

    bob_id = await register(async_client, "Bob")
    elsewhere = (
        await async_client.post("/api/city", json={"cityName": "Springfield"})
    ).json()

    data = await award(async_client, bob_id, elsewhere["points"])
    assert data["newScore"] == 5

    response = await async_client.get("/api/leaderboard")
    assert response.json() == [
        {"name": "Alice", "score": 50, "id": alice_id},
        {"name": "Bob", "score": 5, "id": bob_id},
    ]
