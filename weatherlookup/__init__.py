"""Structured weather lookup client: geocoding, forecast parsing, search history."""

from weatherlookup.errors import (
    MalformedDataError,
    NotFoundError,
    StorageError,
    TransportError,
    WeatherLookupError,
)
from weatherlookup.models.common import TemperatureUnit
from weatherlookup.service import WeatherService

__all__ = [
    "MalformedDataError",
    "NotFoundError",
    "StorageError",
    "TemperatureUnit",
    "TransportError",
    "WeatherLookupError",
    "WeatherService",
]
