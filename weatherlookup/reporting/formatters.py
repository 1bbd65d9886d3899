"""Output formatters for weather snapshots and search history."""

import json
import math

from weatherlookup.models.common import TemperatureUnit
from weatherlookup.models.forecast import WeatherSnapshot
from weatherlookup.models.history import HistoryRecord
from weatherlookup.reporting.units import to_display


def format_current_text(
    s: WeatherSnapshot, unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> str:
    """Plain text current conditions."""
    lines = [
        "=== CURRENT WEATHER ===",
        "",
        f"Location: {s.location}",
        f"Time: {s.current.observed_at}",
        f"Temperature: {_temp(s.current.temperature_c, unit)}",
        f"Wind Speed: {_num(s.current.wind_speed_kmh)} km/h",
    ]
    return "\n".join(lines)


def format_forecast_text(
    s: WeatherSnapshot, unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> str:
    """Plain text daily forecast table."""
    lines = [
        f"=== {len(s.days)}-DAY FORECAST ===",
        "",
        f"{'Date':<12} {'High':<10} {'Low':<10} Condition",
        "-" * 48,
    ]
    for day in s.days:
        lines.append(
            f"{day.date:<12} {_temp(day.max_temp_c, unit):<10} "
            f"{_temp(day.min_temp_c, unit):<10} {day.condition_summary}"
        )
    return "\n".join(lines)


def format_history_text(records: list[HistoryRecord]) -> str:
    """Plain text search history table. Stored values are Celsius."""
    lines = ["=== SEARCH HISTORY ===", ""]
    if not records:
        lines.append("No searches yet")
        return "\n".join(lines)
    lines.append(f"{'City':<20} {'Recorded':<34} Temperature")
    lines.append("-" * 66)
    for r in records:
        lines.append(
            f"{r.city:<20} {r.recorded_at or '':<34} "
            f"{_temp(r.temperature_c, TemperatureUnit.CELSIUS)}"
        )
    return "\n".join(lines)


def format_snapshot_json(
    s: WeatherSnapshot, unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> str:
    """JSON snapshot for programmatic consumption."""
    _, symbol = to_display(0.0, unit)
    data = {
        "location": s.location,
        "unit": symbol,
        "current": {
            "temperature": _json_temp(s.current.temperature_c, unit),
            "wind_speed_kmh": _json_num(s.current.wind_speed_kmh),
            "observed_at": s.current.observed_at,
        },
        "days": [
            {
                "date": d.date,
                "max_temp": _json_temp(d.max_temp_c, unit),
                "min_temp": _json_temp(d.min_temp_c, unit),
                "condition_code": d.condition_code,
                "condition": d.condition_summary,
            }
            for d in s.days
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def _temp(celsius: float, unit: TemperatureUnit) -> str:
    value, symbol = to_display(celsius, unit)
    if math.isnan(value):
        return "n/a"
    return f"{value:.1f}{symbol}"


def _num(value: float) -> str:
    return "n/a" if math.isnan(value) else f"{value:.1f}"


def _json_temp(celsius: float, unit: TemperatureUnit) -> float | None:
    value, _ = to_display(celsius, unit)
    return _json_num(value)


def _json_num(value: float) -> float | None:
    return None if math.isnan(value) else round(value, 1)
