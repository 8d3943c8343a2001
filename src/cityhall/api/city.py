# src/cityhall/api/city.py

"""API endpoint for the mock city lookup."""

from fastapi import APIRouter

from cityhall.schemas import city as city_schema
from cityhall.services.city_lookup import lookup_city

router = APIRouter(prefix="/api", tags=["Cities"])


@router.post("/city", response_model=city_schema.CityRead)
async def get_city(city_in: city_schema.CityRequest) -> city_schema.CityRead:
    """
    Look up mock metadata for a city.

    - **cityName**: Matched case-insensitively against the special cities;
      anything else is a regular city worth 5 points.

    The returned `position` is random on every call.
    """
    return city_schema.CityRead.model_validate(lookup_city(city_in.city_name))
