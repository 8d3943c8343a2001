# src/cityhall/api/maps.py

"""API endpoint exposing the map API key to the front end."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from cityhall.config import Settings, get_settings
from cityhall.exceptions import MapsKeyNotConfiguredError
from cityhall.schemas import maps as maps_schema
from cityhall.services.maps_key import get_maps_key

router = APIRouter(prefix="/api", tags=["Maps"])


@router.get(
    "/google-maps-key",
    response_model=maps_schema.MapsKeyRead,
    responses={500: {"model": maps_schema.MapsKeyError}},
)
async def read_maps_key(
    settings: Settings = Depends(get_settings),
) -> maps_schema.MapsKeyRead | JSONResponse:
    """
    Return the configured Google Maps API key.

    Raises:
        500: If the key is unset, empty, or still the placeholder value.
    """
    try:
        key = get_maps_key(settings)
    except MapsKeyNotConfiguredError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=maps_schema.MapsKeyError(error=e.message).model_dump(),
        )

    return maps_schema.MapsKeyRead(key=key)
