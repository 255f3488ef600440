"""Shared fixtures: sample gateway payloads, a fake timer wheel, a scripted gateway."""
import asyncio
import os

import pytest

# Minimal env so pydantic-settings doesn't require a real .env file
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")


SAMPLE_NAIROBI = {
    "name": "Nairobi",
    "sys": {"country": "KE"},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "main": {"temp": 21.5, "feels_like": 21.0, "pressure": 1018, "humidity": 60},
    "wind": {"speed": 3.2},
    "cod": 200,
}

SAMPLE_LONDON = {
    "name": "London",
    "weather": [{"main": "Clear", "description": "clear sky"}],
    "main": {"temp": 15.0, "humidity": 70},
}


# ---------------------------------------------------------------------------
# Fake timers
# ---------------------------------------------------------------------------

class FakeHandle:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeTimers:
    """Stands in for the event loop's call_later; time only moves on advance()."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def advance_ms(self, ms):
        target = self.now + ms / 1000
        due = sorted(
            (h for h in self.handles if h.when <= target and not h.cancelled),
            key=lambda h: h.when,
        )
        for handle in due:
            self.now = handle.when
            self.handles.remove(handle)
            handle.callback(*handle.args)
        self.now = target

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture
def timers():
    return FakeTimers()


# ---------------------------------------------------------------------------
# Scripted gateway
# ---------------------------------------------------------------------------

class ScriptedGateway:
    """Each fetch waits until the test resolves it, so replies can arrive in any order."""

    def __init__(self):
        self.calls = []
        self._pending = {}

    async def fetch_weather(self, city):
        self.calls.append(city)
        future = asyncio.get_running_loop().create_future()
        self._pending[city] = future
        return await future

    def reply(self, city, payload):
        self._pending.pop(city).set_result(payload)

    def fail(self, city, exc):
        self._pending.pop(city).set_exception(exc)


@pytest.fixture
def scripted_gateway():
    return ScriptedGateway()
