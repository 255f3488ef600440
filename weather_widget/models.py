from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError

from weather_widget.errors import MalformedResponse


Number = Union[int, float]
# Provider numbers must arrive as JSON numbers; "21.5" or true is a malformed payload.
StrictNumber = Union[StrictInt, StrictFloat]


class UnitPreference(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    def toggled(self) -> "UnitPreference":
        if self is UnitPreference.CELSIUS:
            return UnitPreference.FAHRENHEIT
        return UnitPreference.CELSIUS


class IconCategory(str, Enum):
    CLEAR = "clear"
    RAIN = "rain"
    CLOUDY = "cloudy"


# ── Provider payload ─────────────────────────────────────────────────────────

class ProviderMain(BaseModel):
    temp: StrictNumber
    humidity: StrictNumber


class ProviderCondition(BaseModel):
    main: str = ""
    description: str = ""


class ProviderWind(BaseModel):
    speed: Optional[StrictNumber] = None


class ProviderPayload(BaseModel):
    main: ProviderMain
    weather: List[ProviderCondition] = Field(min_length=1)
    wind: Optional[ProviderWind] = None
    name: Optional[str] = None


# ── Snapshot ─────────────────────────────────────────────────────────────────

class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_name: Optional[str] = None
    temperature_celsius: float
    humidity_percent: Number
    wind_speed_meters_per_second: Number = 0
    condition_main: str
    condition_description: str


def parse_snapshot(payload: Any) -> WeatherSnapshot:
    """Normalize a gateway payload; raises MalformedResponse when it is unusable."""
    try:
        data = ProviderPayload.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse() from exc

    condition = data.weather[0]
    wind_speed = data.wind.speed if data.wind else None
    return WeatherSnapshot(
        location_name=data.name,
        temperature_celsius=data.main.temp,
        humidity_percent=data.main.humidity,
        wind_speed_meters_per_second=wind_speed or 0,
        condition_main=condition.main,
        condition_description=condition.description,
    )


def is_valid_payload(payload: Any) -> bool:
    try:
        parse_snapshot(payload)
    except MalformedResponse:
        return False
    return True


# ── Query lifecycle ──────────────────────────────────────────────────────────

class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["loading"] = "loading"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["success"] = "success"
    snapshot: WeatherSnapshot
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc).astimezone())


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["failure"] = "failure"
    message: str


QueryLifecycle = Union[Idle, Loading, Success, Failure]
