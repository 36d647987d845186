"""NWS (api.weather.gov) forecast API client. One request per call, no retries."""

import logging

import httpx

from forecastview.config.schema import DEFAULT_USER_AGENT, NOAA_BASE_URL, ApiConfig
from forecastview.errors import MalformedForecastError

logger = logging.getLogger(__name__)


class NoaaClient:
    def __init__(
        self,
        base_url: str = NOAA_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    @classmethod
    def from_config(cls, api: ApiConfig) -> "NoaaClient":
        return cls(base_url=api.base_url, user_agent=api.user_agent, timeout=api.timeout)

    def get_forecast(self, region_code: str, grid_x: int, grid_y: int) -> dict:
        """Fetch the multi-day forecast document for one grid cell.

        Raises httpx errors on transport failures and non-2xx statuses.
        """
        url = f"{self.base_url}/gridpoints/{region_code}/{grid_x},{grid_y}/forecast"
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

        logger.debug("GET %s", url)
        resp = httpx.get(url, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedForecastError(f"Response from {url} is not JSON") from e

    def fetch_periods(self, region_code: str, grid_x: int, grid_y: int) -> list[dict]:
        """Return the raw period records of a grid cell's forecast."""
        raw = self.get_forecast(region_code, grid_x, grid_y)
        if not isinstance(raw, dict):
            raise MalformedForecastError("Forecast document is not an object")
        properties = raw.get("properties")
        if not isinstance(properties, dict) or "periods" not in properties:
            raise MalformedForecastError("Forecast document has no properties.periods")
        periods = properties["periods"]
        if periods is None:
            return []
        if not isinstance(periods, list):
            raise MalformedForecastError("properties.periods is not a list")
        return periods
