"""Lookup failures. Every one of them ends up as a ``Failure(message)`` lifecycle."""

FAILED_TO_FETCH = "Failed to fetch weather"


class WeatherLookupError(Exception):
    default_message = FAILED_TO_FETCH

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class CityNotFound(WeatherLookupError):
    """The gateway answered with a non-2xx status."""

    default_message = "City not found"


class MalformedResponse(WeatherLookupError):
    """2xx answer without a condition list or a temperature/humidity block."""

    default_message = "Invalid weather data format"


class TransportError(WeatherLookupError):
    """Network or decoding fault between the widget and the gateway."""
