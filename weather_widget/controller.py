import logging
from typing import Callable, Optional

from weather_widget.errors import FAILED_TO_FETCH, WeatherLookupError
from weather_widget.models import (
    Failure,
    Idle,
    Loading,
    QueryLifecycle,
    Success,
    UnitPreference,
    parse_snapshot,
)
from weather_widget.services.gateway import HttpWeatherGateway, WeatherGateway
from weather_widget.view import WidgetView, build_view

logger = logging.getLogger(__name__)


class WeatherQueryController:
    """
    Owns the city input, the unit preference and the lookup lifecycle:

      Idle -> Loading -> Success | Failure -> Loading -> ...

    Only the most recently started search may move the lifecycle. Replies to
    older searches are dropped when they arrive.
    """

    def __init__(
        self,
        gateway: WeatherGateway,
        city: str = "Nairobi",
        unit: UnitPreference = UnitPreference.CELSIUS,
        on_change: Optional[Callable[[QueryLifecycle], None]] = None,
    ):
        self.gateway = gateway
        self.city = city
        self._unit = unit
        self._lifecycle: QueryLifecycle = Idle()
        self._generation = 0
        self.on_change = on_change

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "WeatherQueryController":
        return cls(HttpWeatherGateway.from_settings(settings), city=settings.default_city, **kwargs)

    @property
    def lifecycle(self) -> QueryLifecycle:
        return self._lifecycle

    @property
    def unit(self) -> UnitPreference:
        return self._unit

    def set_city(self, name: str) -> None:
        self.city = name

    def toggle_unit(self) -> UnitPreference:
        self._unit = self._unit.toggled()
        return self._unit

    def view(self, hint_visible: bool = False) -> WidgetView:
        return build_view(self._lifecycle, self._unit, hint_visible=hint_visible)

    async def search(self, city: Optional[str] = None) -> QueryLifecycle:
        if city is None:
            city = self.city
        if not city or not city.strip():
            logger.debug("Ignoring search for an empty city")
            return self._lifecycle

        self._generation += 1
        token = self._generation
        self._transition(Loading())

        try:
            payload = await self.gateway.fetch_weather(city)
            outcome: QueryLifecycle = Success(snapshot=parse_snapshot(payload))
        except WeatherLookupError as exc:
            logger.warning("Weather lookup for %r failed: %s", city, exc.message)
            outcome = Failure(message=exc.message)
        except Exception as exc:
            logger.warning("Weather lookup for %r failed", city, exc_info=True)
            outcome = Failure(message=str(exc) or FAILED_TO_FETCH)

        if token != self._generation:
            logger.debug("Discarding stale result for %r", city)
            return self._lifecycle

        self._transition(outcome)
        return self._lifecycle

    def _transition(self, lifecycle: QueryLifecycle) -> None:
        logger.debug("Lifecycle %s -> %s", self._lifecycle.kind, lifecycle.kind)
        self._lifecycle = lifecycle
        if self.on_change:
            self.on_change(lifecycle)
