"""Weather service: geocode, fetch, parse, and optionally record a search."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from weatherlookup.config.schema import AppConfig
from weatherlookup.ingest.forecast_client import ForecastClient
from weatherlookup.ingest.geocoding_client import GeocodingClient
from weatherlookup.ingest.parser import WeatherDataParser
from weatherlookup.models.forecast import WeatherSnapshot
from weatherlookup.models.history import HistoryRecord
from weatherlookup.storage.history_store import SearchHistoryStore

logger = logging.getLogger(__name__)


class WeatherService:
    """Runs one lookup at a time: Geocoding -> Forecast -> Parser -> History.

    Snapshots always carry Celsius; unit conversion belongs to the display
    step (see weatherlookup.reporting).
    """

    def __init__(
        self,
        geocoder: GeocodingClient,
        forecast: ForecastClient,
        parser: WeatherDataParser | None = None,
        history: SearchHistoryStore | None = None,
    ):
        self.geocoder = geocoder
        self.forecast = forecast
        self.parser = parser or WeatherDataParser()
        self.history = history
        self._executor: ThreadPoolExecutor | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "WeatherService":
        history = None
        if config.history.enabled:
            history = SearchHistoryStore(config.history.db_path)
        return cls(
            geocoder=GeocodingClient(config.geocoding),
            forecast=ForecastClient(config.forecast),
            parser=WeatherDataParser(max_days=config.forecast.max_days),
            history=history,
        )

    def get_weather(self, place_name: str) -> WeatherSnapshot:
        """Look up current and daily weather for a place.

        NotFoundError, TransportError and MalformedDataError propagate as-is.
        """
        location = place_name.strip()
        coord = self.geocoder.resolve(location)
        logger.info(
            "Resolved %r to %.4f,%.4f", location, coord.latitude, coord.longitude
        )
        payload = self.forecast.fetch(coord)
        return self.parser.parse(payload, location=location)

    def record_search(
        self, snapshot: WeatherSnapshot, store: SearchHistoryStore | None = None
    ) -> HistoryRecord | None:
        """Append the snapshot to history. Best-effort: never raises."""
        store = store or self.history
        if store is None:
            return None
        record = HistoryRecord(
            city=snapshot.location,
            temperature_c=snapshot.current.temperature_c,
            observed_at=snapshot.current.observed_at,
        )
        try:
            return store.append(record)
        except Exception:
            logger.exception("Could not record search for %r", snapshot.location)
            return None

    def lookup(self, place_name: str) -> WeatherSnapshot:
        snapshot = self.get_weather(place_name)
        self.record_search(snapshot)
        return snapshot

    def submit(self, place_name: str) -> Future[WeatherSnapshot]:
        """Run lookup() on the background worker and return its future."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="weatherlookup"
            )
        return self._executor.submit(self.lookup, place_name)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        if self.history is not None:
            self.history.close()
