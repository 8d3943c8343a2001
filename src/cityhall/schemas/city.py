# src/cityhall/schemas/city.py

"""Schemas for the mock city lookup."""

from pydantic import Field

from .common import CamelModel


class CityRequest(CamelModel):
    city_name: str = Field(..., description="City name, matched case-insensitively")


class PositionRead(CamelModel):
    """Map position in percent of width/height, each within [10, 90]."""

    x: float
    y: float


class CityRead(CamelModel):
    type: str
    points: int
    has_building: bool
    position: PositionRead
