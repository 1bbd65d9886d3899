"""Search history models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryRecord:
    city: str
    temperature_c: float
    observed_at: str
    recorded_at: str | None = None  # set by the store on insert
