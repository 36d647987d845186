"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

NOAA_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "forecastview/0.1.0"


class City(BaseModel):
    """One entry of the location directory: a city and its NWS forecast grid."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1)
    region_code: str = Field(pattern=r"^[A-Z]{3}$")
    grid_x: int = Field(ge=0)
    grid_y: int = Field(ge=0)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NOAA_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=12, ge=1, le=14)
    default_city: str = "Chicago, IL"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    cities: list[City] = []

    @model_validator(mode="after")
    def _check_cities(self) -> "AppConfig":
        if not self.cities:
            raise ValueError("at least one city must be configured")
        names = [c.name for c in self.cities]
        if len(names) != len(set(names)):
            raise ValueError("city names must be unique")
        if self.display.default_city not in names:
            raise ValueError(
                f"default_city {self.display.default_city!r} is not a configured city"
            )
        return self
