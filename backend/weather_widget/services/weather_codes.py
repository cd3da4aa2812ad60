"""
WMO weather code catalog.
Source: Open-Meteo WMO Weather interpretation codes.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class WeatherIcon(str, Enum):
    CLEAR_DAY = "☀️"
    CLEAR_NIGHT = "🌙"
    MOSTLY_CLEAR_DAY = "🌤️"
    PARTLY_CLOUDY = "⛅"
    OVERCAST = "☁️"
    FOG = "🌫️"
    SHOWERS = "🌦️"
    RAIN = "🌧️"
    STORM = "⛈️"
    SNOW = "🌨️"
    HEAVY_SNOW = "❄️"
    UNKNOWN = "❓"


@dataclass(frozen=True)
class WeatherCodeEntry:
    description: str
    icon_day: WeatherIcon
    icon_night: WeatherIcon


UNKNOWN_DESCRIPTION = "Unknown"


def _entry(description: str, icon: WeatherIcon, night_icon: Optional[WeatherIcon] = None) -> WeatherCodeEntry:
    return WeatherCodeEntry(description, icon, night_icon or icon)


WEATHER_CODES: Mapping[int, WeatherCodeEntry] = MappingProxyType({
    0: _entry("Clear sky", WeatherIcon.CLEAR_DAY, WeatherIcon.CLEAR_NIGHT),
    1: _entry("Mainly clear", WeatherIcon.MOSTLY_CLEAR_DAY, WeatherIcon.CLEAR_NIGHT),
    2: _entry("Partly cloudy", WeatherIcon.PARTLY_CLOUDY),
    3: _entry("Overcast", WeatherIcon.OVERCAST),
    45: _entry("Fog", WeatherIcon.FOG),
    48: _entry("Depositing rime fog", WeatherIcon.FOG),
    51: _entry("Light drizzle", WeatherIcon.SHOWERS),
    53: _entry("Moderate drizzle", WeatherIcon.SHOWERS),
    55: _entry("Dense drizzle", WeatherIcon.RAIN),
    61: _entry("Slight rain", WeatherIcon.RAIN),
    63: _entry("Moderate rain", WeatherIcon.RAIN),
    65: _entry("Heavy rain", WeatherIcon.STORM),
    71: _entry("Slight snow fall", WeatherIcon.SNOW),
    73: _entry("Moderate snow fall", WeatherIcon.HEAVY_SNOW),
    75: _entry("Heavy snow fall", WeatherIcon.HEAVY_SNOW),
    80: _entry("Slight rain showers", WeatherIcon.SHOWERS),
    81: _entry("Moderate rain showers", WeatherIcon.RAIN),
    82: _entry("Violent rain showers", WeatherIcon.STORM),
    95: _entry("Thunderstorm", WeatherIcon.STORM),
    96: _entry("Thunderstorm with slight hail", WeatherIcon.STORM),
    99: _entry("Thunderstorm with heavy hail", WeatherIcon.STORM),
})


class WeatherCodeCatalog:
    """Read-only lookups over WEATHER_CODES. Unknown codes never raise."""

    def __init__(self, codes: Mapping[int, WeatherCodeEntry] = WEATHER_CODES):
        self.codes = codes

    def describe(self, code: Optional[int]) -> str:
        # Same text by day and by night
        entry = self.codes.get(code)
        return entry.description if entry else UNKNOWN_DESCRIPTION

    def icon_for(self, code: Optional[int], is_day: Optional[bool]) -> WeatherIcon:
        entry = self.codes.get(code)
        if entry is None:
            return WeatherIcon.UNKNOWN
        return entry.icon_day if is_day else entry.icon_night


catalog = WeatherCodeCatalog()
