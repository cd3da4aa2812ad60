import httpx
import logging
from typing import Optional
from pydantic import ValidationError

from weather_widget.core.config import settings
from weather_widget.core.exceptions import WeatherFetchError
from weather_widget.core.logger import logs
from weather_widget.models.weather_model import (
    CURRENT_FIELDS,
    DAILY_FIELDS,
    CurrentConditions,
    DailySummary,
    WeatherReport,
)
from weather_widget.services.base_service import HTTPService


class WeatherFetcher(HTTPService):
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        super().__init__(client)
        self.base_url = settings.FORECAST_URL

    async def fetch_by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        """
        One forecast request for the current conditions and today's
        sunrise, sunset and UV index, in the location's own timezone.
        Missing fields come back as None; only a failed request raises.
        """
        logs.log(logging.INFO, f"Calling Open-Meteo forecast for {lat}, {lon}", component="weather")
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto"
        }
        async with self._session() as client:
            try:
                resp = await client.get(self.base_url, params=params)
                resp.raise_for_status()
                raw_data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Weather API failed: {str(e)}", component="weather")
                raise WeatherFetchError() from e

        if not isinstance(raw_data, dict):
            logs.log(logging.ERROR, f"Weather API returned {type(raw_data).__name__}, expected an object", component="weather")
            raise WeatherFetchError()

        try:
            return WeatherReport(
                current=CurrentConditions.model_validate(raw_data.get("current") or {}),
                daily=DailySummary.from_series(raw_data.get("daily") or {}),
                timezone=raw_data.get("timezone"),
                utc_offset_seconds=raw_data.get("utc_offset_seconds")
            )
        except (AttributeError, TypeError, ValidationError) as e:
            logs.log(logging.ERROR, f"Weather API returned malformed data: {str(e)}", component="weather")
            raise WeatherFetchError() from e
