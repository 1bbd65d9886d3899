"""Tests for WeatherService orchestration."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weatherlookup.config.schema import AppConfig
from weatherlookup.errors import MalformedDataError, NotFoundError, StorageError, TransportError
from weatherlookup.ingest.forecast_client import ForecastClient
from weatherlookup.ingest.geocoding_client import GeocodingClient
from weatherlookup.models.location import Coordinate
from weatherlookup.service import WeatherService
from weatherlookup.storage.history_store import SearchHistoryStore

BERLIN = Coordinate(latitude=52.52, longitude=13.41)

SCENARIO_PAYLOAD = json.dumps({
    "current_weather": {"temperature": 21.3, "windspeed": 13.0, "time": "2025-04-04T14:00"},
    "daily": {
        "time": ["2025-04-04", "2025-04-05"],
        "temperature_2m_max": [25.0, 24.0],
        "temperature_2m_min": [15.0, 14.0],
        "weathercode": [0, 61],
    },
})


def _service(payload: str = SCENARIO_PAYLOAD, history=None) -> WeatherService:
    geocoder = MagicMock(spec=GeocodingClient)
    geocoder.resolve.return_value = BERLIN
    forecast = MagicMock(spec=ForecastClient)
    forecast.fetch.return_value = payload
    return WeatherService(geocoder, forecast, history=history)


class TestGetWeather:
    def test_end_to_end_scenario(self):
        service = _service()
        snap = service.get_weather("Berlin")

        assert snap.location == "Berlin"
        assert snap.current.temperature_c == 21.3
        assert snap.current.wind_speed_kmh == 13.0
        assert snap.current.observed_at == "2025-04-04T14:00"
        assert snap.days[0].condition_summary == "Clear sky"
        assert snap.days[1].condition_summary == "Slight rain"
        service.geocoder.resolve.assert_called_once_with("Berlin")
        service.forecast.fetch.assert_called_once_with(BERLIN)

    def test_strips_place_name(self):
        service = _service()
        snap = service.get_weather("  Berlin ")
        assert snap.location == "Berlin"

    def test_not_found_propagates(self):
        service = _service()
        service.geocoder.resolve.side_effect = NotFoundError("Atlantis")

        with pytest.raises(NotFoundError):
            service.get_weather("Atlantis")
        service.forecast.fetch.assert_not_called()

    def test_transport_error_propagates(self):
        service = _service()
        service.forecast.fetch.side_effect = TransportError("HTTP 503", 503)

        with pytest.raises(TransportError) as exc_info:
            service.get_weather("Berlin")
        assert exc_info.value.status_code == 503
        assert service.forecast.fetch.call_count == 1

    def test_malformed_propagates(self):
        service = _service(payload='{"daily": {}}')

        with pytest.raises(MalformedDataError):
            service.get_weather("Berlin")

    def test_does_not_record(self, history_store: SearchHistoryStore):
        service = _service(history=history_store)
        service.get_weather("Berlin")
        assert history_store.recent() == []


class TestRecordSearch:
    def test_records_celsius_and_observed_at(self, history_store: SearchHistoryStore):
        service = _service()
        snap = service.get_weather("Berlin")

        record = service.record_search(snap, history_store)
        assert record is not None
        assert record.city == "Berlin"
        assert record.temperature_c == 21.3
        assert record.observed_at == "2025-04-04T14:00"
        assert history_store.recent()[0].temperature_c == 21.3

    def test_uses_configured_store(self, history_store: SearchHistoryStore):
        service = _service(history=history_store)
        snap = service.get_weather("Berlin")
        service.record_search(snap)
        assert len(history_store.recent()) == 1

    def test_no_store_is_noop(self):
        service = _service()
        snap = service.get_weather("Berlin")
        assert service.record_search(snap) is None

    def test_storage_failure_swallowed(self):
        store = MagicMock(spec=SearchHistoryStore)
        store.append.side_effect = StorageError("disk full")
        service = _service()
        snap = service.get_weather("Berlin")

        assert service.record_search(snap, store) is None
        assert snap.current.temperature_c == 21.3

    def test_unexpected_store_error_swallowed(self):
        store = MagicMock(spec=SearchHistoryStore)
        store.append.side_effect = OSError("disk gone")
        service = _service()
        snap = service.get_weather("Berlin")

        assert service.record_search(snap, store) is None
        store.append.assert_called_once()


class TestLookup:
    def test_lookup_records(self, history_store: SearchHistoryStore):
        service = _service(history=history_store)
        snap = service.lookup("Berlin")
        assert snap.current.temperature_c == 21.3
        assert [r.city for r in history_store.recent()] == ["Berlin"]

    def test_lookup_survives_storage_failure(self):
        store = MagicMock(spec=SearchHistoryStore)
        store.append.side_effect = StorageError("locked")
        service = _service(history=store)
        snap = service.lookup("Berlin")
        assert snap.days[0].condition_summary == "Clear sky"

    def test_failed_lookup_records_nothing(self, history_store: SearchHistoryStore):
        service = _service(history=history_store)
        service.geocoder.resolve.side_effect = NotFoundError("Atlantis")
        with pytest.raises(NotFoundError):
            service.lookup("Atlantis")
        assert history_store.recent() == []


class TestSubmit:
    def test_future_result(self, history_store: SearchHistoryStore):
        service = _service(history=history_store)
        future = service.submit("Berlin")
        snap = future.result(timeout=5)
        assert snap.current.temperature_c == 21.3
        service.close()
        with SearchHistoryStore(history_store.db_path) as reopened:
            assert len(reopened.recent()) == 1

    def test_future_carries_error(self):
        service = _service()
        service.geocoder.resolve.side_effect = NotFoundError("Atlantis")
        future = service.submit("Atlantis")
        with pytest.raises(NotFoundError):
            future.result(timeout=5)
        service.close()

    def test_independent_requests(self):
        service = _service()
        futures = [service.submit(name) for name in ("Berlin", "Oslo", "Lima")]
        locations = sorted(f.result(timeout=5).location for f in futures)
        assert locations == ["Berlin", "Lima", "Oslo"]
        service.close()


class TestFromConfig:
    @respx.mock
    def test_wires_http_clients(self, tmp_path: Path, geocoding_payload: dict):
        config = AppConfig(
            geocoding={"base_url": "https://geo.test/v1/search"},
            forecast={"base_url": "https://wx.test/v1/forecast", "max_days": 1},
            history={"db_path": str(tmp_path / "weather.db")},
        )
        respx.get("https://geo.test/v1/search").mock(
            return_value=httpx.Response(200, json=geocoding_payload)
        )
        respx.get("https://wx.test/v1/forecast").mock(
            return_value=httpx.Response(200, text=SCENARIO_PAYLOAD)
        )

        service = WeatherService.from_config(config)
        try:
            snap = service.lookup("Berlin")
            assert len(snap.days) == 1
            assert service.history is not None
            assert service.history.recent()[0].city == "Berlin"
        finally:
            service.close()

    def test_history_disabled(self, tmp_path: Path):
        config = AppConfig(history={"enabled": False, "db_path": str(tmp_path / "x.db")})
        service = WeatherService.from_config(config)
        assert service.history is None
        assert not (tmp_path / "x.db").exists()
        service.close()
