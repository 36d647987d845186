"""Single-attempt forecast loading with typed failures."""

import logging

import httpx

from forecastview.config.schema import City
from forecastview.errors import MalformedForecastError
from forecastview.ingest.noaa_client import NoaaClient
from forecastview.ingest.period_parser import parse_periods
from forecastview.models.forecast import ForecastPeriod
from forecastview.models.result import Failed, FailureReason, ForecastResult, Loaded

logger = logging.getLogger(__name__)

MIN_PERIODS = 2


class ForecastLoader:
    def __init__(self, client: NoaaClient):
        self.client = client

    def load(self, city: City) -> ForecastResult:
        """Fetch and validate the forecast for a city.

        Never raises for fetch problems: every client error, empty payload
        or malformed record comes back as Failed.
        """
        try:
            records = self.client.fetch_periods(city.region_code, city.grid_x, city.grid_y)
        except MalformedForecastError as e:
            return self._fail(city, FailureReason.MALFORMED_RESPONSE, str(e))
        except httpx.HTTPError as e:
            return self._fail(city, FailureReason.NETWORK_FAILURE, str(e))
        except Exception as e:
            logger.exception("Unexpected error fetching forecast for %s", city.name)
            return self._fail(city, FailureReason.NETWORK_FAILURE, repr(e))

        if not records:
            return self._fail(city, FailureReason.EMPTY_RESPONSE, "no periods returned")

        try:
            periods = parse_periods(records)
        except MalformedForecastError as e:
            return self._fail(city, FailureReason.MALFORMED_RESPONSE, str(e))

        problem = _validate(periods)
        if problem:
            return self._fail(city, FailureReason.MALFORMED_RESPONSE, problem)

        logger.info("Loaded %d forecast periods for %s", len(periods), city.name)
        return Loaded(periods=tuple(periods))

    def _fail(self, city: City, reason: FailureReason, detail: str) -> Failed:
        logger.warning("Forecast load failed for %s: %s (%s)", city.name, reason, detail)
        return Failed(reason=reason, detail=detail)


def _validate(periods: list[ForecastPeriod]) -> str | None:
    """Return a description of the first problem, or None if usable."""
    if len(periods) < MIN_PERIODS:
        return f"expected at least {MIN_PERIODS} periods, got {len(periods)}"
    for prev, cur in zip(periods, periods[1:]):
        if prev.is_daytime == cur.is_daytime:
            return f"periods {prev.number} and {cur.number} do not alternate day/night"
    return None
