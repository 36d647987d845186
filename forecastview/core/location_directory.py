"""City name -> NWS forecast grid lookup."""

from collections.abc import Iterable, Iterator

from forecastview.config.defaults import DEFAULT_CITIES
from forecastview.config.schema import City
from forecastview.errors import LocationNotFoundError


class LocationDirectory:
    """Fixed, read-only table of the cities the application offers."""

    def __init__(self, cities: Iterable[City]):
        self._cities: dict[str, City] = {}
        for city in cities:
            if city.name in self._cities:
                raise ValueError(f"Duplicate city: {city.name!r}")
            self._cities[city.name] = city

    @classmethod
    def default(cls) -> "LocationDirectory":
        return cls(DEFAULT_CITIES)

    def resolve(self, name: str) -> City:
        try:
            return self._cities[name]
        except KeyError:
            raise LocationNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._cities)

    def __contains__(self, name: object) -> bool:
        return name in self._cities

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities.values())

    def __len__(self) -> int:
        return len(self._cities)
