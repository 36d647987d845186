"""Default city table with pre-resolved NWS grid coordinates."""

from forecastview.config.schema import City

DEFAULT_CITIES: list[City] = [
    City(name="Chicago, IL", region_code="LOT", grid_x=77, grid_y=70),
    City(name="New York, NY", region_code="OKX", grid_x=40, grid_y=50),
    City(name="Los Angeles, CA", region_code="LOX", grid_x=155, grid_y=44),
    City(name="Miami, FL", region_code="MFL", grid_x=110, grid_y=50),
    City(name="Seattle, WA", region_code="SEW", grid_x=130, grid_y=67),
]
