# src/cityhall/schemas/maps.py

"""Schemas for the map API key endpoint."""

from .common import CamelModel


class MapsKeyRead(CamelModel):
    key: str


class MapsKeyError(CamelModel):
    error: str
    key: None = None
