"""Condition category -> icon asset path."""

from forecastview.models.condition import ConditionCategory

DEFAULT_ICON = "/icons/default.png"

ICON_PATHS: dict[ConditionCategory, str] = {
    ConditionCategory.THUNDERSTORM: "/icons/thunder.gif",
    ConditionCategory.CLEAR_DAY: "/icons/sunnysky.gif",
    ConditionCategory.CLEAR_NIGHT: "/icons/clearnight.gif",
    ConditionCategory.CLOUDY_DAY: "/icons/clouldysky.gif",
    ConditionCategory.CLOUDY_NIGHT: "/icons/mostlyclear.gif",
    ConditionCategory.RAIN: "/icons/rain.gif",
    ConditionCategory.SNOW: "/icons/snow.gif",
    ConditionCategory.WIND: "/icons/wind.gif",
    ConditionCategory.FOG_DAY: "/icons/clouldysky.gif",
    ConditionCategory.FOG_NIGHT: "/icons/cloudy.gif",
    ConditionCategory.SMOKE: "/icons/foggy.gif",
    ConditionCategory.DEFAULT: DEFAULT_ICON,
}


def icon_path(category: ConditionCategory) -> str:
    return ICON_PATHS.get(category, DEFAULT_ICON)
