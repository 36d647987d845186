"""Builders for forecast periods and NWS payloads used across tests."""

import json
from pathlib import Path

from forecastview.models.forecast import ForecastPeriod

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_period(
    number: int = 1,
    name: str = "Today",
    is_daytime: bool = True,
    temperature: int = 70,
    short_forecast: str = "Sunny",
    **kwargs,
) -> ForecastPeriod:
    fields = {
        "temperature_unit": "F",
        "detailed_forecast": f"{short_forecast}, with a temperature near {temperature}.",
        "wind_speed": "5 mph",
        "wind_direction": "N",
        "precipitation_probability": None,
    }
    fields.update(kwargs)
    return ForecastPeriod(
        number=number,
        name=name,
        is_daytime=is_daytime,
        temperature=temperature,
        short_forecast=short_forecast,
        **fields,
    )


def raw_period(number: int, name: str, is_daytime: bool, temperature: int, short: str) -> dict:
    return {
        "number": number,
        "name": name,
        "isDaytime": is_daytime,
        "temperature": temperature,
        "temperatureUnit": "F",
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": None},
        "windSpeed": "5 mph",
        "windDirection": "N",
        "shortForecast": short,
        "detailedForecast": f"{short}.",
    }


def week_periods(start_daytime: bool = True, count: int = 14) -> list[ForecastPeriod]:
    """Alternating day/night periods, as the NWS returns them."""
    days = ["Today", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    periods = []
    is_day = start_daytime
    d = 0
    for i in range(count):
        if is_day:
            name = days[d % len(days)]
        else:
            name = "Tonight" if d == 0 else f"{days[d % len(days)]} Night"
        periods.append(make_period(i + 1, name, is_day, 60 + i, "Sunny"))
        if not is_day:
            d += 1
        is_day = not is_day
    return periods
