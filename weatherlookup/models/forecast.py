"""Forecast data models. Temperatures are always stored in Celsius."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: float
    wind_speed_kmh: float
    observed_at: str  # provider local time, passed through as-is


@dataclass(frozen=True)
class DailyForecast:
    date: str  # YYYY-MM-DD
    max_temp_c: float
    min_temp_c: float
    condition_code: int | None
    condition_summary: str


@dataclass(frozen=True)
class WeatherSnapshot:
    location: str
    current: CurrentConditions
    days: tuple[DailyForecast, ...] = ()
