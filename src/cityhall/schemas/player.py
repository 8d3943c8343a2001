# src/cityhall/schemas/player.py

"""Pydantic schemas for player registration."""

from datetime import datetime

from .common import CamelModel


# ===============================================
# Create Schema: every field may be omitted
# ===============================================
class PlayerRegister(CamelModel):
    """Properties to receive via API on registration.

    Values are stored verbatim; no format or uniqueness checks are made.
    """

    name: str | None = None
    email: str | None = None
    photo: str | None = None


# ===============================================
# Read Schema: Defines attributes for returning data
# ===============================================
class PlayerRead(CamelModel):
    """Properties to return to the client."""

    id: str
    name: str | None
    email: str | None
    photo: str | None
    score: int
    joined_at: datetime


class RegisterResponse(CamelModel):
    success: bool = True
    player: PlayerRead
