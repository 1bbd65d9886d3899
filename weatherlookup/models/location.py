"""Geocoding result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PlaceSuggestion:
    display_name: str
    country: str | None = None
    region: str | None = None  # admin1 in provider terms

    @property
    def label(self) -> str:
        parts = [self.display_name, self.region, self.country]
        return ", ".join(p for p in parts if p)
