from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from weather_widget.models.weather_model import WeatherView

# --- Enums ---
class SearchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"

class ErrorKind(str, Enum):
    EMPTY_QUERY = "EMPTY_QUERY"
    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"
    WEATHER_FETCH = "WEATHER_FETCH"
    GEOLOCATION = "GEOLOCATION"
    INVALID_COORDINATES = "INVALID_COORDINATES"
    UNEXPECTED = "UNEXPECTED"

class GeolocationReason(str, Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNAVAILABLE = "UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    UNSUPPORTED = "UNSUPPORTED"
    UNKNOWN = "UNKNOWN"

# --- State Models ---
class ErrorInfo(BaseModel):
    kind: ErrorKind
    message: str
    reason: Optional[GeolocationReason] = None

class SearchState(BaseModel):
    """What the UI shows: exactly one of nothing, a spinner, a result or an error."""
    phase: SearchPhase = SearchPhase.IDLE
    view: Optional[WeatherView] = None
    error: Optional[ErrorInfo] = None

# --- API Request Models ---
class SearchRequest(BaseModel):
    query: str = Field(..., description="City or place name typed by the user")

class GeolocationReport(BaseModel):
    """What the browser's getCurrentPosition callbacks produced."""
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    error_code: Optional[int] = Field(None, description="W3C GeolocationPositionError code")
