from typing import Optional

from weather_widget.models.search_model import ErrorInfo, ErrorKind, GeolocationReason


class WeatherWidgetError(Exception):
    """Base error. Every subclass resolves to a displayable failure state."""

    kind: ErrorKind
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_info(self) -> ErrorInfo:
        return ErrorInfo(kind=self.kind, message=self.message)


class LocationNotFoundError(WeatherWidgetError):
    kind = ErrorKind.LOCATION_NOT_FOUND
    default_message = "Location not found"


class EmptyQueryError(LocationNotFoundError):
    """Blank search input. Raised before any request is made."""
    kind = ErrorKind.EMPTY_QUERY
    default_message = "Please enter a city name"


class WeatherFetchError(WeatherWidgetError):
    kind = ErrorKind.WEATHER_FETCH
    default_message = "Failed to fetch weather data"


class InvalidCoordinatesError(WeatherWidgetError):
    kind = ErrorKind.INVALID_COORDINATES
    default_message = "Coordinates are out of range"


class UnexpectedError(WeatherWidgetError):
    """Anything the pipeline did not anticipate. Details go to the log, not the card."""
    kind = ErrorKind.UNEXPECTED
    default_message = "Unable to load the weather right now"


GEOLOCATION_MESSAGES = {
    GeolocationReason.PERMISSION_DENIED: "Location access denied by user",
    GeolocationReason.UNAVAILABLE: "Location information is unavailable",
    GeolocationReason.TIMEOUT: "Location request timed out",
    GeolocationReason.UNSUPPORTED: "Geolocation is not supported by this browser",
    GeolocationReason.UNKNOWN: "Unable to retrieve your location",
}


class GeolocationError(WeatherWidgetError):
    kind = ErrorKind.GEOLOCATION

    def __init__(self, reason: GeolocationReason, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or GEOLOCATION_MESSAGES[reason])

    def to_info(self) -> ErrorInfo:
        return ErrorInfo(kind=self.kind, message=self.message, reason=self.reason)


class ReverseGeocodingError(Exception):
    """A reverse geocoder could not name the coordinates. Never leaves the resolver."""
