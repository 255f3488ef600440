from typing import Any, Dict

import httpx


class OpenWeatherClient:
    def __init__(self, base_url: str, api_key: str, timeout_seconds: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout_seconds

    async def get_current_by_city(self, city: str) -> Dict[str, Any]:
        """Current conditions for a city name, temperatures in Celsius."""
        url = f"{self.base_url}/weather"
        params = {"q": city, "units": "metric", "appid": self.api_key}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()
