"""Open-Meteo forecast client."""

import logging

from weatherlookup.config.schema import ForecastConfig
from weatherlookup.ingest.http import http_get
from weatherlookup.models.location import Coordinate

logger = logging.getLogger(__name__)

DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weathercode")


class ForecastClient:
    def __init__(self, config: ForecastConfig | None = None):
        self.config = config or ForecastConfig()

    def fetch(self, coord: Coordinate) -> str:
        """Fetch current conditions and the daily block for a coordinate.

        Returns the raw response body; parsing is left to WeatherDataParser.
        """
        params = {
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "current_weather": "true",
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
            "forecast_days": self.config.forecast_days,
        }
        resp = http_get(
            self.config.base_url,
            params,
            user_agent=self.config.user_agent,
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )
        logger.debug(
            "Fetched forecast for %.4f,%.4f (%d bytes)",
            coord.latitude, coord.longitude, len(resp.content),
        )
        return resp.text
