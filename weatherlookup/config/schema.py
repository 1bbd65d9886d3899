"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherlookup.models.common import TemperatureUnit

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_USER_AGENT = "weatherlookup/0.1.0"


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = GEOCODING_BASE_URL
    language: str = "en"
    connect_timeout: float = Field(default=10.0, gt=0.0)
    read_timeout: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = FORECAST_BASE_URL
    forecast_days: int = Field(default=7, ge=1, le=16)
    max_days: int = Field(default=5, ge=1, le=7)
    connect_timeout: float = Field(default=10.0, gt=0.0)
    read_timeout: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class HistoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    db_path: str = "data/weather.db"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    unit: TemperatureUnit = TemperatureUnit.CELSIUS


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    forecast: ForecastConfig = ForecastConfig()
    history: HistoryConfig = HistoryConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
