"""Exception hierarchy for the forecast viewer."""


class ForecastViewError(Exception):
    """Base class for all forecastview errors."""


class LocationNotFoundError(ForecastViewError, LookupError):
    """A city name is not in the location directory.

    The UI only offers directory cities, so this is a programming error and
    is never shown to the user as a retryable failure.
    """

    def __init__(self, name: str):
        super().__init__(f"Unknown city: {name!r}")
        self.name = name


class InvalidTransitionError(ForecastViewError, ValueError):
    """An action was dispatched on a screen that does not offer it."""

    def __init__(self, action: str, screen: str):
        super().__init__(f"Action {action!r} not allowed on screen {screen!r}")
        self.action = action
        self.screen = screen


class FetchInProgressError(ForecastViewError, RuntimeError):
    """A forecast fetch is already outstanding."""


class MalformedForecastError(ForecastViewError, ValueError):
    """The forecast payload does not have the expected shape."""
