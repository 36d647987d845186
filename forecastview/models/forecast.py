"""NWS forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastPeriod:
    number: int
    name: str
    is_daytime: bool
    temperature: int
    temperature_unit: str
    short_forecast: str
    detailed_forecast: str
    wind_speed: str
    wind_direction: str
    precipitation_probability: int | None = None  # None: not reported
    start_time: str = ""
    end_time: str = ""

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature}°{self.temperature_unit}"


@dataclass(frozen=True)
class DayCard:
    """One calendar day: a daytime period, its following night, or one of them."""

    label: str
    day: ForecastPeriod | None = None
    night: ForecastPeriod | None = None

    def __post_init__(self) -> None:
        if self.day is None and self.night is None:
            raise ValueError("DayCard needs a day or a night period")
