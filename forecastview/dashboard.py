"""Forecast dashboard: FastAPI renderer over a single ViewStateController."""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from forecastview.core.controller import ViewStateController
from forecastview.errors import FetchInProgressError, InvalidTransitionError
from forecastview.models.view import PeriodView
from forecastview.render.formatters import format_screen
from forecastview.render.icons import icon_path


class CitySelection(BaseModel):
    city: str


def create_app(controller: ViewStateController) -> FastAPI:
    app = FastAPI(title="Weather Forecast App", version="0.1.0")

    def _run(action, *args) -> dict:
        try:
            action(*args)
        except (InvalidTransitionError, FetchInProgressError) as e:
            raise HTTPException(409, str(e)) from e
        return _state(controller)

    # ── Read endpoints ──────────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        return _state(controller)

    @app.get("/api/cities")
    def get_cities():
        return [c.model_dump() for c in controller.directory]

    @app.get("/api/today")
    def get_today():
        today = controller.today_view()
        if today is None:
            raise HTTPException(404, "No forecast loaded")
        data = asdict(today)
        data["day"] = _period(today.day)
        data["night"] = _period(today.night)
        return data

    @app.get("/api/forecast")
    def get_forecast():
        forecast = controller.forecast_view()
        if forecast is None:
            raise HTTPException(404, "No forecast loaded")
        return {
            "city": forecast.city,
            "cards": [
                {
                    "label": c.label,
                    "day": _period(c.day) if c.day else None,
                    "night": _period(c.night) if c.night else None,
                }
                for c in forecast.cards
            ],
        }

    # ── Action endpoints ────────────────────────────────────────────

    @app.post("/api/actions/start")
    def start():
        return _run(controller.start)

    @app.post("/api/actions/select-city")
    def select_city(body: CitySelection):
        if body.city not in controller.directory:
            raise HTTPException(404, f"Unknown city: {body.city}")
        return _run(controller.select_city, body.city)

    @app.post("/api/actions/view-forecast")
    def view_forecast():
        return _run(controller.view_forecast)

    @app.post("/api/actions/view-today")
    def view_today():
        return _run(controller.view_today)

    @app.post("/api/actions/change-city")
    def change_city():
        return _run(controller.change_city)

    @app.post("/api/actions/back")
    def back():
        return _run(controller.back)

    @app.post("/api/actions/retry")
    def retry():
        return _run(controller.retry)

    @app.post("/api/actions/home")
    def home():
        return _run(controller.home)

    # ── Text screen ─────────────────────────────────────────────────

    @app.get("/", response_class=PlainTextResponse)
    def serve_screen():
        return format_screen(controller)

    return app


def _state(controller: ViewStateController) -> dict:
    state = controller.state
    return {
        "screen": state.screen.value,
        "city": state.city.name,
        "has_forecast": state.forecast is not None,
        "error_message": state.error_message,
        "loading": controller.is_loading,
    }


def _period(p: PeriodView) -> dict:
    data = asdict(p)
    data["condition"] = p.condition.value
    data["icon"] = icon_path(p.condition)
    return data


if __name__ == "__main__":
    import uvicorn

    from forecastview.app import build_controller
    from forecastview.config.loader import load_config

    uvicorn.run(create_app(build_controller(load_config())), host="127.0.0.1", port=8777)
