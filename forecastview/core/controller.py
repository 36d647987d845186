"""Screen navigation state machine.

Screens and the actions that leave them:

    welcome         start -> city_selection
    city_selection  select_city -> today | error, home -> welcome
    today           view_forecast -> forecast
    forecast        view_today -> today
    error           retry -> today | error
    (any)           change_city, back -> city_selection

Only select_city, retry and prewarm fetch. A fetch holds a single in-flight
slot: any action dispatched while it is outstanding is rejected with
FetchInProgressError and the state is left as it was. The network call runs
outside the state lock; the resulting screen and data are published as one
new ViewState snapshot.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from forecastview.config.schema import City
from forecastview.core.forecast_loader import MIN_PERIODS, ForecastLoader
from forecastview.core.location_directory import LocationDirectory
from forecastview.core.view_models import build_forecast, build_today
from forecastview.errors import FetchInProgressError, InvalidTransitionError
from forecastview.models.forecast import ForecastPeriod
from forecastview.models.result import ForecastResult, Loaded
from forecastview.models.view import ForecastScreen, Screen, TodayScreen, ViewState

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Unable to load forecast data. Please try again."
DEFAULT_MAX_DAYS = 12


class ViewStateController:
    def __init__(
        self,
        directory: LocationDirectory,
        loader: ForecastLoader,
        default_city: str = "Chicago, IL",
        max_days: int = DEFAULT_MAX_DAYS,
    ):
        self.directory = directory
        self.loader = loader
        self.max_days = max_days
        self._lock = threading.Lock()
        self._fetching = False
        self.default_city = directory.resolve(default_city)
        self._state = ViewState(screen=Screen.WELCOME, city=self.default_city)

    # -- read-only accessors -------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def screen(self) -> Screen:
        return self._state.screen

    @property
    def current_city(self) -> City:
        return self._state.city

    @property
    def current_forecast(self) -> tuple[ForecastPeriod, ...] | None:
        return self._state.forecast

    @property
    def current_error(self) -> str | None:
        return self._state.error_message

    @property
    def is_loading(self) -> bool:
        return self._fetching

    def cities(self) -> list[str]:
        return self.directory.names()

    def today_view(self) -> TodayScreen | None:
        state = self._state
        if state.forecast is None or len(state.forecast) < MIN_PERIODS:
            return None
        return build_today(state.city.name, state.forecast)

    def forecast_view(self) -> ForecastScreen | None:
        state = self._state
        if state.forecast is None:
            return None
        return build_forecast(state.city.name, state.forecast, self.max_days)

    # -- navigation ----------------------------------------------------------

    def start(self) -> ViewState:
        return self._navigate("start", (Screen.WELCOME,), Screen.CITY_SELECTION)

    def home(self) -> ViewState:
        return self._navigate("home", (Screen.CITY_SELECTION,), Screen.WELCOME)

    def view_forecast(self) -> ViewState:
        return self._navigate("view_forecast", (Screen.TODAY,), Screen.FORECAST)

    def view_today(self) -> ViewState:
        return self._navigate("view_today", (Screen.FORECAST,), Screen.TODAY)

    def change_city(self) -> ViewState:
        return self._navigate("change_city", tuple(Screen), Screen.CITY_SELECTION)

    def back(self) -> ViewState:
        return self._navigate("back", tuple(Screen), Screen.CITY_SELECTION)

    def _navigate(self, action: str, allowed: tuple[Screen, ...], target: Screen) -> ViewState:
        with self._lock:
            self._check(action, allowed)
            self._state = replace(
                self._state, screen=target, error_message=None, failure_reason=None
            )
            logger.info("%s -> %s", action, target)
            return self._state

    # -- loading -------------------------------------------------------------

    def select_city(self, name: str) -> ViewState:
        """Load the forecast for `name` and show it, or show the error screen.

        Raises LocationNotFoundError for names outside the directory.
        """
        city = self.directory.resolve(name)
        return self._load("select_city", (Screen.CITY_SELECTION,), city, self._show_result)

    def retry(self) -> ViewState:
        """Fetch again for the city whose load failed."""
        return self._load("retry", (Screen.ERROR,), self._state.city, self._show_result)

    def prewarm(self) -> ViewState:
        """Load the configured default city while the welcome screen is up."""
        return self._load("prewarm", (Screen.WELCOME,), self.default_city, self._keep_screen)

    def _load(
        self,
        action: str,
        allowed: tuple[Screen, ...],
        city: City,
        publish: Callable[[City, ForecastResult], ViewState],
    ) -> ViewState:
        with self._lock:
            self._check(action, allowed)
            self._fetching = True

        logger.info("%s: loading forecast for %s", action, city.name)
        try:
            result = self.loader.load(city)
        except BaseException:
            with self._lock:
                self._fetching = False
            raise

        with self._lock:
            self._state = publish(city, result)
            self._fetching = False
            logger.info("%s -> %s", action, self._state.screen)
            return self._state

    def _show_result(self, city: City, result: ForecastResult) -> ViewState:
        if isinstance(result, Loaded):
            return ViewState(screen=Screen.TODAY, city=city, forecast=result.periods)
        logger.warning("Showing error screen for %s: %s", city.name, result.reason)
        return ViewState(
            screen=Screen.ERROR,
            city=city,
            error_message=LOAD_ERROR_MESSAGE,
            failure_reason=result.reason,
        )

    def _keep_screen(self, city: City, result: ForecastResult) -> ViewState:
        if isinstance(result, Loaded):
            return replace(self._state, city=city, forecast=result.periods)
        logger.warning("Pre-warm for %s failed: %s", city.name, result.reason)
        return self._state

    def _check(self, action: str, allowed: tuple[Screen, ...]) -> None:
        """Caller holds the lock."""
        if self._fetching:
            logger.warning("Rejected %s: a forecast fetch is in progress", action)
            raise FetchInProgressError(f"Cannot {action} while a forecast fetch is in progress")
        if self._state.screen not in allowed:
            logger.warning("Rejected %s on %s", action, self._state.screen)
            raise InvalidTransitionError(action, self._state.screen.value)
