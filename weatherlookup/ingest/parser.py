"""Forecast payload parser: raw provider JSON into a WeatherSnapshot.

The payload shape is declared as pydantic models so that structural problems
(missing blocks, non-numeric current readings, parallel daily arrays of
different lengths) are rejected outright. Bad values *inside* a daily array
are tolerated and surface as NaN temperatures or a None condition code.
"""

import json
import logging
import math

from pydantic import (
    BaseModel,
    Field,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from weatherlookup.errors import MalformedDataError
from weatherlookup.ingest.weather_codes import describe_condition
from weatherlookup.models.forecast import CurrentConditions, DailyForecast, WeatherSnapshot

logger = logging.getLogger(__name__)

DEFAULT_MAX_DAYS = 5


class CurrentWeatherPayload(BaseModel):
    temperature: float = Field(strict=True, allow_inf_nan=False)
    windspeed: float = Field(strict=True, allow_inf_nan=False)
    time: str = Field(strict=True, min_length=1)

    @field_validator("time")
    @classmethod
    def _time_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("timestamp is blank")
        return v


class DailyPayload(BaseModel):
    time: list[StrictStr]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    weathercode: list[int | None]

    @field_validator("temperature_2m_max", "temperature_2m_min", mode="before")
    @classmethod
    def _coerce_temperatures(cls, v: object) -> object:
        if not isinstance(v, list):
            return v
        return [_to_float(x) for x in v]

    @field_validator("weathercode", mode="before")
    @classmethod
    def _coerce_codes(cls, v: object) -> object:
        if not isinstance(v, list):
            return v
        return [_to_code(x) for x in v]

    @model_validator(mode="after")
    def _check_parallel_lengths(self) -> "DailyPayload":
        lengths = {
            "time": len(self.time),
            "temperature_2m_max": len(self.temperature_2m_max),
            "temperature_2m_min": len(self.temperature_2m_min),
            "weathercode": len(self.weathercode),
        }
        if len(set(lengths.values())) > 1:
            detail = ", ".join(f"{k}={n}" for k, n in lengths.items())
            raise ValueError(f"daily arrays differ in length ({detail})")
        return self


class ForecastPayload(BaseModel):
    current_weather: CurrentWeatherPayload
    daily: DailyPayload


class WeatherDataParser:
    def __init__(self, max_days: int = DEFAULT_MAX_DAYS):
        self.max_days = max_days

    def parse(self, payload: str | bytes, location: str = "") -> WeatherSnapshot:
        """Parse a forecast response body into a snapshot.

        Raises MalformedDataError naming the first offending field; never
        returns a partial snapshot.
        """
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise MalformedDataError("payload", "body is not valid JSON") from e
        if not isinstance(data, dict):
            raise MalformedDataError("payload", "expected a JSON object")

        try:
            parsed = ForecastPayload.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            field = _dotted(first["loc"]) or "payload"
            logger.warning("Rejected forecast payload at %s: %s", field, first["msg"])
            raise MalformedDataError(field, first["msg"]) from e

        current = CurrentConditions(
            temperature_c=parsed.current_weather.temperature,
            wind_speed_kmh=parsed.current_weather.windspeed,
            observed_at=parsed.current_weather.time,
        )

        daily = parsed.daily
        days = []
        for date, high, low, code in zip(
            daily.time[: self.max_days],
            daily.temperature_2m_max,
            daily.temperature_2m_min,
            daily.weathercode,
        ):
            days.append(
                DailyForecast(
                    date=date,
                    max_temp_c=high,
                    min_temp_c=low,
                    condition_code=code,
                    condition_summary=describe_condition(code),
                )
            )

        return WeatherSnapshot(location=location, current=current, days=tuple(days))


def _to_float(value: object) -> float:
    if isinstance(value, bool) or value is None:
        return math.nan
    if not isinstance(value, (int, float, str)):
        return math.nan
    try:
        result = float(value)
    except (ValueError, OverflowError):
        return math.nan
    return result if math.isfinite(result) else math.nan


def _to_code(value: object) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _dotted(loc: tuple) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out = f"{out}.{part}" if out else str(part)
    return out
