"""Plain-text renderers for each screen."""

from forecastview.core.controller import ViewStateController
from forecastview.models.view import (
    DayCardView,
    ForecastScreen,
    PeriodView,
    Screen,
    TodayScreen,
)

APP_TITLE = "Weather Forecast App"


def format_welcome() -> str:
    return "\n".join([
        f"=== {APP_TITLE} ===",
        "Get accurate weather forecasts for cities across the United States",
    ])


def format_city_selection(cities: list[str]) -> str:
    lines = ["=== Select a City ==="]
    for i, name in enumerate(cities, 1):
        lines.append(f"  {i}. {name}")
    return "\n".join(lines)


def format_period(p: PeriodView) -> list[str]:
    return [
        f"{p.slot} ({p.name}): {p.temperature} {p.description} [{p.condition}]",
        f"  Precip: {p.precipitation}% | Wind: {p.wind}",
    ]


def format_today(t: TodayScreen) -> str:
    lines = [
        "=== Weather Today ===",
        t.headline,
        t.detailed_forecast,
        "",
        *format_period(t.day),
        *format_period(t.night),
        "",
        f"Wind: {t.wind} | Precipitation: {t.precipitation}%",
    ]
    return "\n".join(lines)


def format_card(card: DayCardView) -> str:
    lines = [f"--- {card.label} ---"]
    if card.day:
        lines.extend(format_period(card.day))
    if card.night:
        lines.extend(format_period(card.night))
    return "\n".join(lines)


def format_forecast(f: ForecastScreen) -> str:
    lines = ["=== 7-Day Forecast ===", f"For {f.city}"]
    lines.extend(format_card(c) for c in f.cards)
    return "\n".join(lines)


def format_error(message: str | None) -> str:
    return "\n".join([
        "=== Error ===",
        message or "",
        "Use 'back' to return to city selection or 'retry' to try again.",
    ])


def format_screen(controller: ViewStateController) -> str:
    """Render whatever screen the controller is currently on."""
    screen = controller.screen
    if screen == Screen.WELCOME:
        return format_welcome()
    if screen == Screen.CITY_SELECTION:
        return format_city_selection(controller.cities())
    if screen == Screen.TODAY:
        today = controller.today_view()
        return format_today(today) if today else format_error(controller.current_error)
    if screen == Screen.FORECAST:
        forecast = controller.forecast_view()
        return format_forecast(forecast) if forecast else format_error(controller.current_error)
    return format_error(controller.current_error)
