import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional

from weather_widget.models.weather_model import WeatherSnapshot, WeatherView
from weather_widget.services.weather_codes import WeatherCodeCatalog, catalog

NOT_AVAILABLE = "N/A"


class WeatherPresenter:
    """
    Turns a fetched snapshot into the strings the weather card shows.
    Pure: no I/O, and missing values render as "N/A" instead of raising.
    """

    def __init__(self, codes: WeatherCodeCatalog = catalog, clock: Callable[[], datetime] = datetime.now):
        self.codes = codes
        self.clock = clock

    def present(self, snapshot: WeatherSnapshot) -> WeatherView:
        current = snapshot.current
        daily = snapshot.daily

        return WeatherView(
            label=snapshot.location.label,
            date=format_long_date(self._observed_at(current.time)),
            icon=self.codes.icon_for(current.weather_code, current.is_day).value,
            temperature=round_temperature(current.temperature_c),
            apparent_temperature=round_temperature(current.apparent_temperature_c),
            description=self.codes.describe(current.weather_code),
            humidity=_with_unit(current.relative_humidity_pct, "%"),
            wind_speed=_with_unit(current.wind_speed_kmh, " km/h"),
            pressure=_with_unit(current.pressure_msl, " hPa"),
            visibility=NOT_AVAILABLE,  # Open-Meteo does not report visibility here
            uv_index=format_uv_index(daily.uv_index_max),
            sunrise=format_time(daily.sunrise),
            sunset=format_time(daily.sunset)
        )

    def _observed_at(self, time: Optional[str]) -> datetime:
        # Observation time is already local to the location (timezone=auto)
        return _parse_iso(time) or self.clock()


def round_temperature(value: Optional[float]) -> str:
    """Nearest whole degree, halves away from zero: 21.5 -> 22, -21.5 -> -22."""
    if not _is_number(value):
        return NOT_AVAILABLE
    rounded = Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return str(int(rounded))


def format_long_date(moment: datetime) -> str:
    """Saturday, June 1, 2024"""
    return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"


def format_time(value: Optional[str]) -> str:
    """ISO 8601 local time to 12-hour clock, e.g. 05:50 AM"""
    moment = _parse_iso(value)
    if moment is None:
        return NOT_AVAILABLE
    return moment.strftime("%I:%M %p")


def format_uv_index(value: Optional[float]) -> str:
    if not _is_number(value):
        return NOT_AVAILABLE
    return f"{value:g}"


def _with_unit(value, unit: str) -> str:
    if not _is_number(value):
        return NOT_AVAILABLE
    return f"{value}{unit}"


def _is_number(value) -> bool:
    # json.loads accepts NaN and Infinity
    return value is not None and math.isfinite(value)


def _parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
