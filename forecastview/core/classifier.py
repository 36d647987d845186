"""Rule-based mapping of forecast text to a condition category.

Rules are checked in a fixed order and the first match wins. Descriptions
often hold several keywords ("Patchy Fog then Sunny"), so reordering the
rules changes results.
"""

from forecastview.models.condition import ConditionCategory


def classify(description: str | None, is_night: bool) -> ConditionCategory:
    s = (description or "").lower()

    if "showers" in s and "thunderstorm" in s:
        return ConditionCategory.THUNDERSTORM
    if "sunny" in s or "clear" in s:
        return ConditionCategory.CLEAR_NIGHT if is_night else ConditionCategory.CLEAR_DAY
    if "cloud" in s or "partly" in s:
        return ConditionCategory.CLOUDY_NIGHT if is_night else ConditionCategory.CLOUDY_DAY
    if "rain" in s or "shower" in s or ("chance" in s and "rain" in s):
        return ConditionCategory.RAIN
    if "snow" in s:
        return ConditionCategory.SNOW
    if "wind" in s:
        return ConditionCategory.WIND
    if "fog" in s or "patchy" in s:
        return ConditionCategory.FOG_NIGHT if is_night else ConditionCategory.FOG_DAY
    if "smoke" in s:
        return ConditionCategory.SMOKE
    return ConditionCategory.DEFAULT
