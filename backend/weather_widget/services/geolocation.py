"""
Device geolocation sources.
The browser reports either a position or an error through two callbacks;
here that pair becomes one awaitable that returns Coordinates or raises
GeolocationError.
"""
from abc import ABC, abstractmethod
from typing import Optional
from pydantic import ValidationError

from weather_widget.core.exceptions import GeolocationError
from weather_widget.models.location_model import Coordinates
from weather_widget.models.search_model import GeolocationReason, GeolocationReport

# W3C GeolocationPositionError codes
POSITION_ERROR_CODES = {
    1: GeolocationReason.PERMISSION_DENIED,
    2: GeolocationReason.UNAVAILABLE,
    3: GeolocationReason.TIMEOUT,
}


class GeolocationSource(ABC):
    @abstractmethod
    async def current_position(self) -> Coordinates:
        pass


class ReportedPosition(GeolocationSource):
    """Replays what the browser already told us."""

    def __init__(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        error_code: Optional[int] = None
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.error_code = error_code

    @classmethod
    def from_report(cls, report: GeolocationReport) -> "ReportedPosition":
        return cls(report.latitude, report.longitude, report.error_code)

    async def current_position(self) -> Coordinates:
        if self.error_code is not None:
            raise GeolocationError(POSITION_ERROR_CODES.get(self.error_code, GeolocationReason.UNKNOWN))
        if self.latitude is None or self.longitude is None:
            raise GeolocationError(GeolocationReason.UNSUPPORTED)
        try:
            return Coordinates(latitude=self.latitude, longitude=self.longitude)
        except ValidationError as e:
            raise GeolocationError(GeolocationReason.UNAVAILABLE) from e
