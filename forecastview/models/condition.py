"""Canonical weather condition categories used for iconography."""

from enum import StrEnum


class ConditionCategory(StrEnum):
    THUNDERSTORM = "thunderstorm"
    CLEAR_DAY = "clear_day"
    CLEAR_NIGHT = "clear_night"
    CLOUDY_DAY = "cloudy_day"
    CLOUDY_NIGHT = "cloudy_night"
    RAIN = "rain"
    SNOW = "snow"
    WIND = "wind"
    FOG_DAY = "fog_day"
    FOG_NIGHT = "fog_night"
    SMOKE = "smoke"
    DEFAULT = "default"
