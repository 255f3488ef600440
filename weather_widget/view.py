from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from weather_widget import converter, icons
from weather_widget.models import (
    Failure,
    IconCategory,
    Idle,
    Loading,
    Number,
    QueryLifecycle,
    Success,
    UnitPreference,
    WeatherSnapshot,
)

NO_DATA = "No weather data available"
UNKNOWN_LOCATION = "Unknown location"


class WeatherCard(BaseModel):
    location: str
    temperature: str
    unit_symbol: str
    unit_toggle_label: str
    humidity: str
    wind: str
    description: str
    icon: IconCategory
    date: Optional[str] = None
    updated_at: Optional[datetime] = None


class WidgetView(BaseModel):
    status: Literal["idle", "loading", "success", "failure"]
    search_disabled: bool = False
    card: Optional[WeatherCard] = None
    error: Optional[str] = None
    placeholder: Optional[str] = None
    hint_visible: bool = False


def _plain(value: Number) -> Number:
    """60.0 -> 60, 3.2 -> 3.2"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _long_date(moment: datetime) -> str:
    # "Monday, January 5"
    return f"{moment:%A}, {moment:%B} {moment.day}"


def _capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def build_card(
    snapshot: WeatherSnapshot,
    unit: UnitPreference,
    updated_at: Optional[datetime] = None,
) -> WeatherCard:
    return WeatherCard(
        location=snapshot.location_name or UNKNOWN_LOCATION,
        temperature=converter.to_display(snapshot.temperature_celsius, unit),
        unit_symbol=unit.symbol,
        unit_toggle_label=unit.toggled().symbol,
        humidity=f"{_plain(snapshot.humidity_percent)}%",
        wind=f"{_plain(snapshot.wind_speed_meters_per_second)} m/s",
        description=_capitalize_words(snapshot.condition_description),
        icon=icons.resolve(snapshot.condition_main),
        date=_long_date(updated_at) if updated_at else None,
        updated_at=updated_at,
    )


def build_view(
    lifecycle: QueryLifecycle,
    unit: UnitPreference,
    hint_visible: bool = False,
) -> WidgetView:
    """Everything a front end needs to draw the widget for one state."""
    if isinstance(lifecycle, Loading):
        return WidgetView(status="loading", search_disabled=True, hint_visible=hint_visible)
    if isinstance(lifecycle, Failure):
        return WidgetView(status="failure", error=lifecycle.message, hint_visible=hint_visible)
    if isinstance(lifecycle, Success):
        card = build_card(lifecycle.snapshot, unit, updated_at=lifecycle.fetched_at)
        return WidgetView(status="success", card=card, hint_visible=hint_visible)
    if isinstance(lifecycle, Idle):
        return WidgetView(status="idle", placeholder=NO_DATA, hint_visible=hint_visible)
    raise TypeError(f"Unknown lifecycle state: {lifecycle!r}")
