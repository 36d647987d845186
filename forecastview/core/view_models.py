"""Builders for the Today and 7-Day screen view models."""

from collections.abc import Sequence

from forecastview.core.classifier import classify
from forecastview.core.grouper import group_periods
from forecastview.models.forecast import DayCard, ForecastPeriod
from forecastview.models.view import DayCardView, ForecastScreen, PeriodView, TodayScreen


def precipitation_percent(period: ForecastPeriod) -> int:
    """Unknown or non-positive chances display as 0."""
    p = period.precipitation_probability
    return p if p is not None and p > 0 else 0


def night_description(text: str) -> str:
    """Reword "sunny" for night periods, e.g. "Mostly Sunny" -> "Mostly clear skies"."""
    lowered = text.lower()
    if "sunny" not in lowered:
        return text
    reworded = lowered.replace("sunny", "clear skies")
    return reworded[:1].upper() + reworded[1:]


def period_view(period: ForecastPeriod, slot: str) -> PeriodView:
    is_night = not period.is_daytime
    description = night_description(period.short_forecast) if is_night else period.short_forecast
    return PeriodView(
        name=period.name,
        slot=slot,
        temperature=period.temperature_text,
        description=description,
        condition=classify(period.short_forecast, is_night),
        precipitation=precipitation_percent(period),
        wind=period.wind_speed,
    )


def build_today(city_name: str, periods: Sequence[ForecastPeriod]) -> TodayScreen:
    """Today screen from the first two periods; callers guarantee len >= 2."""
    first, second = periods[0], periods[1]
    return TodayScreen(
        city=city_name,
        headline=f"What to Expect Today in {city_name}",
        detailed_forecast=first.detailed_forecast,
        day=period_view(first, "Day" if first.is_daytime else "Tonight"),
        night=period_view(second, "Night" if first.is_daytime else "Day"),
        wind=f"{first.wind_speed} {first.wind_direction}".strip(),
        precipitation=precipitation_percent(first),
    )


def card_view(card: DayCard, first: bool) -> DayCardView:
    return DayCardView(
        label=card.label,
        day=period_view(card.day, "Day") if card.day else None,
        night=period_view(card.night, "Tonight" if first else "Night") if card.night else None,
    )


def build_forecast(
    city_name: str, periods: Sequence[ForecastPeriod], max_days: int
) -> ForecastScreen:
    cards = group_periods(periods, max_days)
    return ForecastScreen(
        city=city_name,
        cards=[card_view(c, i == 0) for i, c in enumerate(cards)],
    )
