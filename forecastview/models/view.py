"""View state and render-ready view models."""

from dataclasses import dataclass, field
from enum import StrEnum

from forecastview.config.schema import City
from forecastview.models.condition import ConditionCategory
from forecastview.models.forecast import ForecastPeriod
from forecastview.models.result import FailureReason


class Screen(StrEnum):
    WELCOME = "welcome"
    CITY_SELECTION = "city_selection"
    TODAY = "today"
    FORECAST = "forecast"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot of everything the renderer reads."""

    screen: Screen
    city: City
    forecast: tuple[ForecastPeriod, ...] | None = None
    error_message: str | None = None
    failure_reason: FailureReason | None = None  # diagnostics only


@dataclass(frozen=True)
class PeriodView:
    name: str
    slot: str  # "Day", "Tonight" or "Night"
    temperature: str
    description: str
    condition: ConditionCategory
    precipitation: int
    wind: str


@dataclass(frozen=True)
class DayCardView:
    label: str
    day: PeriodView | None
    night: PeriodView | None


@dataclass(frozen=True)
class TodayScreen:
    city: str
    headline: str
    detailed_forecast: str
    day: PeriodView
    night: PeriodView
    wind: str
    precipitation: int


@dataclass(frozen=True)
class ForecastScreen:
    city: str
    cards: list[DayCardView] = field(default_factory=list)
