import logging
from typing import Any, Dict, Protocol

import httpx

from weather_widget.errors import CityNotFound, TransportError

logger = logging.getLogger(__name__)


class WeatherGateway(Protocol):
    async def fetch_weather(self, city: str) -> Dict[str, Any]:
        """Return the raw provider payload for ``city``.

        Raises CityNotFound on a non-2xx answer and TransportError when the
        request or the body decoding fails.
        """
        ...


class HttpWeatherGateway:
    def __init__(self, url: str, timeout_seconds: float = 10.0):
        self.url = url
        self.timeout = timeout_seconds

    @classmethod
    def from_settings(cls, settings) -> "HttpWeatherGateway":
        return cls(settings.gateway_url, settings.gateway_timeout_seconds)

    async def fetch_weather(self, city: str) -> Dict[str, Any]:
        # httpx encodes the query string; the city is sent exactly as typed.
        params = {"city": city}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await client.get(self.url, params=params)
                r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.info("Gateway answered %s for %r", exc.response.status_code, city)
            raise CityNotFound() from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc)) from exc

        try:
            return r.json()
        except ValueError as exc:
            raise TransportError(str(exc)) from exc
