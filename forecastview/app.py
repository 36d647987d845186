"""Wiring of config, client, loader, directory and controller."""

from forecastview.config.schema import AppConfig
from forecastview.core.controller import ViewStateController
from forecastview.core.forecast_loader import ForecastLoader
from forecastview.core.location_directory import LocationDirectory
from forecastview.ingest.noaa_client import NoaaClient


def build_controller(config: AppConfig, client: NoaaClient | None = None) -> ViewStateController:
    if client is None:
        client = NoaaClient.from_config(config.api)
    return ViewStateController(
        directory=LocationDirectory(config.cities),
        loader=ForecastLoader(client),
        default_city=config.display.default_city,
        max_days=config.display.max_days,
    )
