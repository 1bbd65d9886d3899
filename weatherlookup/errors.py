"""Error taxonomy for weather lookups."""


class WeatherLookupError(Exception):
    """Base class for all lookup failures."""


class NotFoundError(WeatherLookupError):
    """Raised when a place name resolves to no coordinates."""

    def __init__(self, place_name: str):
        super().__init__(f"No location found for {place_name!r}")
        self.place_name = place_name


class TransportError(WeatherLookupError):
    """Raised on network failure, timeout, or a non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedDataError(WeatherLookupError):
    """Raised when a provider payload violates the expected structure."""

    def __init__(self, field: str, detail: str = ""):
        message = f"Malformed provider data at {field!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.field = field


class StorageError(WeatherLookupError):
    """Raised when the search history cannot be read or written."""
