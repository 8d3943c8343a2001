# src/cityhall/services/city_lookup.py

"""Mock city metadata for the scavenger map."""

from __future__ import annotations

import random
from dataclasses import dataclass

# Bounds (percent of map width/height) for the randomized display position.
POSITION_MIN = 10.0
POSITION_MAX = 90.0


@dataclass(frozen=True)
class CityType:
    type: str
    points: int
    has_building: bool


@dataclass
class Position:
    x: float
    y: float


@dataclass
class CityInfo:
    """City metadata plus a display position drawn fresh for each lookup."""

    type: str
    points: int
    has_building: bool
    position: Position


# Keys are lower-case; lookups are case-insensitive.
SPECIAL_CITIES: dict[str, CityType] = {
    "plano": CityType(type="tyler-major", points=50, has_building=True),
    "yarmouth": CityType(type="tyler-major", points=50, has_building=True),
    "denver": CityType(type="pbb", points=25, has_building=True),
    "washington": CityType(type="capital", points=5, has_building=True),
}

DEFAULT_CITY = CityType(type="regular", points=5, has_building=True)


def lookup_city(city_name: str, rng: random.Random | None = None) -> CityInfo:
    """
    Look up a city by name and attach a random map position.

    Names outside the special-city table get the regular city record.
    Each coordinate is drawn independently and uniformly from [10, 90].
    """
    source = rng if rng is not None else random
    city = SPECIAL_CITIES.get(city_name.lower(), DEFAULT_CITY)

    return CityInfo(
        type=city.type,
        points=city.points,
        has_building=city.has_building,
        position=Position(
            x=source.uniform(POSITION_MIN, POSITION_MAX),
            y=source.uniform(POSITION_MIN, POSITION_MAX),
        ),
    )
