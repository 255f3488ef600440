from weather_widget.models import UnitPreference


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


def to_display(temp_c: float, unit: UnitPreference) -> str:
    """Format a Celsius reading in the requested unit, one decimal place."""
    value = celsius_to_fahrenheit(temp_c) if unit is UnitPreference.FAHRENHEIT else temp_c
    return f"{value:.1f}"
