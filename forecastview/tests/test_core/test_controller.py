"""Tests for the screen navigation state machine."""

import threading
from unittest.mock import MagicMock

import httpx
import pytest

from forecastview.core.controller import LOAD_ERROR_MESSAGE, ViewStateController
from forecastview.core.forecast_loader import ForecastLoader
from forecastview.core.location_directory import LocationDirectory
from forecastview.errors import FetchInProgressError, InvalidTransitionError, LocationNotFoundError
from forecastview.models.condition import ConditionCategory as C
from forecastview.models.result import FailureReason
from forecastview.models.view import Screen
from forecastview.tests.helpers import raw_period

TWO_PERIODS = [
    raw_period(0, "Today", True, 72, "Sunny"),
    raw_period(1, "Tonight", False, 55, "Clear"),
]


def _to_today(controller: ViewStateController, mock_client: MagicMock, city="Seattle, WA"):
    mock_client.fetch_periods.return_value = TWO_PERIODS
    controller.start()
    controller.select_city(city)


def _to_error(controller: ViewStateController, mock_client: MagicMock, city="Miami, FL"):
    mock_client.fetch_periods.side_effect = httpx.ConnectError("refused")
    controller.start()
    controller.select_city(city)
    mock_client.fetch_periods.side_effect = None


class TestInitialState:
    def test_welcome_with_default_city(self, controller: ViewStateController):
        assert controller.screen == Screen.WELCOME
        assert controller.current_city.name == "Chicago, IL"
        assert controller.current_forecast is None
        assert controller.current_error is None
        assert controller.is_loading is False

    def test_unknown_default_city(self, mock_client: MagicMock):
        with pytest.raises(LocationNotFoundError):
            ViewStateController(
                LocationDirectory.default(), ForecastLoader(mock_client), default_city="Nowhere"
            )

    def test_no_view_models_before_load(self, controller: ViewStateController):
        assert controller.today_view() is None
        assert controller.forecast_view() is None


class TestPrewarm:
    def test_loads_default_city_on_welcome(
        self, controller: ViewStateController, mock_client: MagicMock, chicago_payload: dict
    ):
        mock_client.fetch_periods.return_value = chicago_payload["properties"]["periods"]

        state = controller.prewarm()

        assert state.screen == Screen.WELCOME
        assert len(state.forecast) == 5
        mock_client.fetch_periods.assert_called_once_with("LOT", 77, 70)

    def test_failure_stays_on_welcome(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        mock_client.fetch_periods.side_effect = httpx.ConnectError("refused")

        state = controller.prewarm()

        assert state.screen == Screen.WELCOME
        assert state.forecast is None
        assert state.error_message is None

    def test_only_from_welcome(self, controller: ViewStateController):
        controller.start()
        with pytest.raises(InvalidTransitionError):
            controller.prewarm()

    def test_loads_configured_default_after_other_city(
        self, controller: ViewStateController, mock_client: MagicMock, chicago_payload: dict
    ):
        _to_today(controller, mock_client, city="Seattle, WA")
        controller.change_city()
        controller.home()
        mock_client.fetch_periods.reset_mock()
        mock_client.fetch_periods.return_value = chicago_payload["properties"]["periods"]

        state = controller.prewarm()

        mock_client.fetch_periods.assert_called_once_with("LOT", 77, 70)
        assert state.screen == Screen.WELCOME
        assert state.city.name == "Chicago, IL"
        assert len(state.forecast) == 5


class TestSelectCity:
    def test_success_reaches_today(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        _to_today(controller, mock_client)

        assert controller.screen == Screen.TODAY
        assert controller.current_city.name == "Seattle, WA"
        assert controller.current_forecast is not None
        assert controller.current_error is None
        mock_client.fetch_periods.assert_called_once_with("SEW", 130, 67)

    def test_seattle_scenario(self, controller: ViewStateController, mock_client: MagicMock):
        _to_today(controller, mock_client)

        today = controller.today_view()
        assert today.day.temperature == "72°F"
        assert today.day.condition == C.CLEAR_DAY
        assert today.night.temperature == "55°F"
        assert today.night.condition == C.CLEAR_NIGHT

    @pytest.mark.parametrize(
        "setup,reason",
        [
            ({"side_effect": httpx.ConnectError("refused")}, FailureReason.NETWORK_FAILURE),
            ({"return_value": []}, FailureReason.EMPTY_RESPONSE),
            ({"return_value": TWO_PERIODS[:1]}, FailureReason.MALFORMED_RESPONSE),
        ],
    )
    def test_failure_reaches_error(
        self, controller: ViewStateController, mock_client: MagicMock, setup, reason
    ):
        mock_client.fetch_periods.configure_mock(**setup)
        controller.start()

        state = controller.select_city("Miami, FL")

        assert state.screen == Screen.ERROR
        assert state.city.name == "Miami, FL"
        assert state.forecast is None
        assert state.error_message == LOAD_ERROR_MESSAGE
        assert state.failure_reason == reason

    def test_failure_message_identical_for_all_reasons(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        messages = set()
        for setup in ({"side_effect": RuntimeError("x")}, {"return_value": []}):
            mock_client.fetch_periods.reset_mock(side_effect=True, return_value=True)
            mock_client.fetch_periods.configure_mock(**setup)
            controller.change_city()
            messages.add(controller.select_city("Miami, FL").error_message)
        assert messages == {LOAD_ERROR_MESSAGE}

    def test_unknown_city_is_internal_error(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        controller.start()
        with pytest.raises(LocationNotFoundError):
            controller.select_city("Atlantis")
        assert controller.screen == Screen.CITY_SELECTION
        assert controller.is_loading is False
        mock_client.fetch_periods.assert_not_called()

    def test_only_from_city_selection(self, controller: ViewStateController):
        with pytest.raises(InvalidTransitionError):
            controller.select_city("Seattle, WA")
        assert controller.screen == Screen.WELCOME

    def test_new_city_replaces_forecast(
        self, controller: ViewStateController, mock_client: MagicMock, chicago_payload: dict
    ):
        _to_today(controller, mock_client)
        first = controller.current_forecast
        controller.change_city()
        mock_client.fetch_periods.return_value = chicago_payload["properties"]["periods"]

        controller.select_city("Chicago, IL")

        assert controller.current_forecast is not first
        assert controller.current_forecast[0].name == "Tonight"


class TestNavigation:
    def test_start(self, controller: ViewStateController):
        assert controller.start().screen == Screen.CITY_SELECTION

    def test_start_only_from_welcome(self, controller: ViewStateController):
        controller.start()
        with pytest.raises(InvalidTransitionError):
            controller.start()

    def test_today_forecast_round_trip_without_reload(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        _to_today(controller, mock_client)
        forecast = controller.current_forecast

        assert controller.view_forecast().screen == Screen.FORECAST
        assert controller.view_today().screen == Screen.TODAY
        assert controller.current_forecast is forecast
        assert mock_client.fetch_periods.call_count == 1

    def test_forecast_view_model(self, controller: ViewStateController, mock_client: MagicMock):
        _to_today(controller, mock_client)
        controller.view_forecast()

        forecast = controller.forecast_view()
        assert forecast.city == "Seattle, WA"
        assert len(forecast.cards) == 1
        assert forecast.cards[0].label == "Today"

    def test_view_forecast_needs_today(self, controller: ViewStateController):
        controller.start()
        with pytest.raises(InvalidTransitionError):
            controller.view_forecast()
        with pytest.raises(InvalidTransitionError):
            controller.view_today()

    def test_home(self, controller: ViewStateController):
        controller.start()
        assert controller.home().screen == Screen.WELCOME
        with pytest.raises(InvalidTransitionError):
            controller.home()

    @pytest.mark.parametrize("action", ["change_city", "back"])
    def test_always_reaches_city_selection(
        self, controller: ViewStateController, mock_client: MagicMock, action: str
    ):
        # welcome
        assert getattr(controller, action)().screen == Screen.CITY_SELECTION
        # city selection
        assert getattr(controller, action)().screen == Screen.CITY_SELECTION
        # today
        mock_client.fetch_periods.return_value = TWO_PERIODS
        controller.select_city("Seattle, WA")
        assert getattr(controller, action)().screen == Screen.CITY_SELECTION
        # forecast
        controller.select_city("Seattle, WA")
        controller.view_forecast()
        assert getattr(controller, action)().screen == Screen.CITY_SELECTION
        # error
        mock_client.fetch_periods.side_effect = httpx.ConnectError("refused")
        controller.select_city("Seattle, WA")
        assert controller.screen == Screen.ERROR
        assert getattr(controller, action)().screen == Screen.CITY_SELECTION

    def test_back_from_error_clears_message(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        _to_error(controller, mock_client)
        state = controller.back()
        assert state.error_message is None
        assert state.failure_reason is None

    def test_change_city_keeps_forecast(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        _to_today(controller, mock_client)
        assert controller.change_city().forecast is not None

    def test_invalid_transition_leaves_state(self, controller: ViewStateController):
        before = controller.state
        with pytest.raises(InvalidTransitionError):
            controller.view_today()
        assert controller.state is before


class TestRetry:
    def test_retry_success(self, controller: ViewStateController, mock_client: MagicMock):
        _to_error(controller, mock_client)
        mock_client.fetch_periods.return_value = TWO_PERIODS

        state = controller.retry()

        assert state.screen == Screen.TODAY
        assert state.city.name == "Miami, FL"
        assert mock_client.fetch_periods.call_count == 2

    def test_retry_failure_stays_on_error(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        _to_error(controller, mock_client)
        mock_client.fetch_periods.return_value = []

        state = controller.retry()

        assert state.screen == Screen.ERROR
        assert state.failure_reason == FailureReason.EMPTY_RESPONSE

    def test_retry_only_from_error(self, controller: ViewStateController):
        with pytest.raises(InvalidTransitionError):
            controller.retry()


class TestFetchGuard:
    def test_rejects_actions_while_fetching(
        self, controller: ViewStateController, mock_client: MagicMock
    ):
        started = threading.Event()
        release = threading.Event()

        def slow_fetch(*args):
            started.set()
            release.wait(5)
            return TWO_PERIODS

        mock_client.fetch_periods.side_effect = slow_fetch
        controller.start()
        before = controller.state

        worker = threading.Thread(target=controller.select_city, args=("Seattle, WA",))
        worker.start()
        assert started.wait(5)
        try:
            assert controller.is_loading is True
            assert controller.state is before
            assert not hasattr(controller.state, "loading")
            assert controller.screen == Screen.CITY_SELECTION
            with pytest.raises(FetchInProgressError):
                controller.select_city("Miami, FL")
            with pytest.raises(FetchInProgressError):
                controller.change_city()
        finally:
            release.set()
            worker.join(5)

        assert controller.is_loading is False
        assert controller.screen == Screen.TODAY
        assert controller.current_city.name == "Seattle, WA"
        assert mock_client.fetch_periods.call_count == 1

    def test_guard_released_after_loader_crash(self, mock_client: MagicMock):
        loader = MagicMock(spec=ForecastLoader)
        loader.load.side_effect = RuntimeError("loader bug")
        controller = ViewStateController(LocationDirectory.default(), loader)
        controller.start()

        with pytest.raises(RuntimeError):
            controller.select_city("Seattle, WA")

        assert controller.is_loading is False
        assert controller.screen == Screen.CITY_SELECTION
