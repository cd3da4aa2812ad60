from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from weather_widget.models.location_model import ResolvedLocation

# Open-Meteo field names, in the order they are requested
CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
)
DAILY_FIELDS = ("sunrise", "sunset", "uv_index_max")


class CurrentConditions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    time: Optional[str] = None
    temperature_c: Optional[float] = Field(None, alias="temperature_2m")
    apparent_temperature_c: Optional[float] = Field(None, alias="apparent_temperature")
    relative_humidity_pct: Optional[int] = Field(None, alias="relative_humidity_2m")
    is_day: Optional[bool] = None
    precipitation_mm: Optional[float] = Field(None, alias="precipitation")
    weather_code: Optional[int] = None
    cloud_cover_pct: Optional[int] = Field(None, alias="cloud_cover")
    pressure_msl: Optional[float] = None
    surface_pressure: Optional[float] = None
    wind_speed_kmh: Optional[float] = Field(None, alias="wind_speed_10m")
    wind_direction_deg: Optional[int] = Field(None, alias="wind_direction_10m")
    wind_gusts_kmh: Optional[float] = Field(None, alias="wind_gusts_10m")


class DailySummary(BaseModel):
    """Today's entry of each daily series."""
    model_config = ConfigDict(frozen=True)

    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    uv_index_max: Optional[float] = None

    @classmethod
    def from_series(cls, daily: dict) -> "DailySummary":
        return cls(**{field: _first(daily.get(field)) for field in DAILY_FIELDS})


class WeatherReport(BaseModel):
    """Everything the forecast endpoint tells us about one coordinate pair."""
    current: CurrentConditions = CurrentConditions()
    daily: DailySummary = DailySummary()
    timezone: Optional[str] = None
    utc_offset_seconds: Optional[int] = None


class WeatherSnapshot(WeatherReport):
    location: ResolvedLocation

    @classmethod
    def from_report(cls, location: ResolvedLocation, report: WeatherReport) -> "WeatherSnapshot":
        return cls(location=location, **dict(report))


class WeatherView(BaseModel):
    """Display-ready strings for the weather card."""
    label: str
    date: str
    icon: str
    temperature: str
    apparent_temperature: str
    description: str
    humidity: str
    wind_speed: str
    pressure: str
    visibility: str
    uv_index: str
    sunrise: str
    sunset: str


def _first(values: Optional[List]) -> Optional[object]:
    if not values:
        return None
    return values[0]
