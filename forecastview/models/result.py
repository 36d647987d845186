"""Forecast load results."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from forecastview.models.forecast import ForecastPeriod


class FailureReason(StrEnum):
    NETWORK_FAILURE = "NETWORK_FAILURE"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


@dataclass(frozen=True)
class Loaded:
    periods: tuple[ForecastPeriod, ...]


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    detail: str = ""


ForecastResult: TypeAlias = Loaded | Failed
