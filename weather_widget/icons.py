from typing import Optional

from weather_widget.models import IconCategory

_ICONS = {
    "clear": IconCategory.CLEAR,
    "rain": IconCategory.RAIN,
}


def resolve(condition_main: Optional[str]) -> IconCategory:
    if not condition_main:
        return IconCategory.CLOUDY
    return _ICONS.get(condition_main.lower(), IconCategory.CLOUDY)
