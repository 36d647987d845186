"""Conversion of raw NWS period records into ForecastPeriod models."""

from typing import Any

from forecastview.errors import MalformedForecastError
from forecastview.models.forecast import ForecastPeriod

_REQUIRED = ("name", "isDaytime", "temperature", "shortForecast")


def parse_period(raw: Any, index: int = 0) -> ForecastPeriod:
    """Parse one period record.

    `index` is used as the ordinal when the record carries no `number`.
    Raises MalformedForecastError when a required field is missing or has
    the wrong type.
    """
    if not isinstance(raw, dict):
        raise MalformedForecastError(f"Period {index} is not an object")
    missing = [k for k in _REQUIRED if raw.get(k) is None]
    if missing:
        raise MalformedForecastError(
            f"Period {index} missing required fields: {', '.join(missing)}"
        )
    if not isinstance(raw["isDaytime"], bool):
        raise MalformedForecastError(f"Period {index} isDaytime is not a boolean")

    try:
        temperature = int(raw["temperature"])
        number = int(raw.get("number", index + 1))
    except (TypeError, ValueError) as e:
        raise MalformedForecastError(f"Period {index} has a non-numeric field") from e

    return ForecastPeriod(
        number=number,
        name=str(raw["name"]),
        is_daytime=raw["isDaytime"],
        temperature=temperature,
        temperature_unit=str(raw.get("temperatureUnit") or "F"),
        short_forecast=str(raw["shortForecast"]),
        detailed_forecast=str(raw.get("detailedForecast") or ""),
        wind_speed=str(raw.get("windSpeed") or ""),
        wind_direction=str(raw.get("windDirection") or ""),
        precipitation_probability=_precipitation(raw.get("probabilityOfPrecipitation")),
        start_time=str(raw.get("startTime") or ""),
        end_time=str(raw.get("endTime") or ""),
    )


def parse_periods(records: list[Any]) -> list[ForecastPeriod]:
    return [parse_period(r, i) for i, r in enumerate(records)]


def _precipitation(value: Any) -> int | None:
    """NWS reports {"unitCode": "wmoUnit:percent", "value": 20}; value may be null."""
    if isinstance(value, dict):
        value = value.get("value")
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
