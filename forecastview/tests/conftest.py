"""Shared test fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from forecastview.config.defaults import DEFAULT_CITIES
from forecastview.config.schema import AppConfig
from forecastview.core.controller import ViewStateController
from forecastview.core.forecast_loader import ForecastLoader
from forecastview.core.location_directory import LocationDirectory
from forecastview.ingest.noaa_client import NoaaClient
from forecastview.tests.helpers import FIXTURE_DIR, load_fixture


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default cities."""
    return AppConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout": 10.0},
        "display": {"max_days": 7},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def seattle_payload() -> dict:
    return load_fixture("nws_forecast_seattle.json")


@pytest.fixture
def chicago_payload() -> dict:
    return load_fixture("nws_forecast_chicago.json")


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock(spec=NoaaClient)


@pytest.fixture
def controller(mock_client: MagicMock) -> ViewStateController:
    return ViewStateController(
        directory=LocationDirectory.default(),
        loader=ForecastLoader(mock_client),
    )
