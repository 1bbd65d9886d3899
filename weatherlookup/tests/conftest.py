"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherlookup.storage.history_store import SearchHistoryStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_geocoding_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def history_store(tmp_path: Path):
    store = SearchHistoryStore(tmp_path / "history.db")
    yield store
    store.close()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoding": {"language": "de"},
        "forecast": {"forecast_days": 7, "max_days": 3},
        "history": {"db_path": str(tmp_path / "weather.db")},
        "display": {"unit": "F"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
