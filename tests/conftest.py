"""Pytest configuration and fixtures."""

import httpx
import pytest

GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"
NOMINATIM_HOST = "nominatim.openstreetmap.org"


class ProviderStub:
    """Canned answer for one provider; remembers every request it got."""

    def __init__(self, json=None, status_code: int = 200, content: bytes = None, offline: bool = False):
        self.json = json
        self.status_code = status_code
        self.content = content
        self.offline = offline
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def params(self):
        return self.requests[-1].url.params


class ProviderRouter:
    """Dispatches to a stub by host; unknown hosts answer 404."""

    def __init__(self, **stubs_by_host):
        self.stubs = stubs_by_host

    def __call__(self, request: httpx.Request) -> httpx.Response:
        stub = self.stubs.get(request.url.host)
        if stub is None:
            return httpx.Response(404, json={"error": True, "reason": "no stub"})
        return stub(request)


def routed(geocoding: ProviderStub = None, forecast: ProviderStub = None, nominatim: ProviderStub = None) -> ProviderRouter:
    stubs = {
        GEOCODING_HOST: geocoding,
        FORECAST_HOST: forecast,
        NOMINATIM_HOST: nominatim,
    }
    return ProviderRouter(**{host: stub for host, stub in stubs.items() if stub is not None})


@pytest.fixture
def make_client():
    """AsyncClient whose transport is a stub handler."""
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make


# --- Sample provider payloads ---
@pytest.fixture
def paris_geocoding():
    return {
        "results": [
            {
                "id": 2988507,
                "name": "Paris",
                "latitude": 48.8566,
                "longitude": 2.3522,
                "country_code": "FR",
                "country": "France",
                "admin1": "Île-de-France"
            }
        ],
        "generationtime_ms": 0.7
    }


@pytest.fixture
def paris_forecast():
    return {
        "latitude": 48.86,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "utc_offset_seconds": 7200,
        "current": {
            "time": "2024-06-01T14:15",
            "interval": 900,
            "temperature_2m": 18.3,
            "relative_humidity_2m": 62,
            "apparent_temperature": 17.1,
            "is_day": 1,
            "precipitation": 0.0,
            "weather_code": 0,
            "cloud_cover": 5,
            "pressure_msl": 1016.4,
            "surface_pressure": 1011.2,
            "wind_speed_10m": 12.5,
            "wind_direction_10m": 240,
            "wind_gusts_10m": 25.2
        },
        "daily": {
            "time": ["2024-06-01"],
            "sunrise": ["2024-06-01T05:50"],
            "sunset": ["2024-06-01T21:10"],
            "uv_index_max": [4.2]
        }
    }


@pytest.fixture
def nominatim_paris():
    return {
        "place_id": 88066702,
        "display_name": "Paris, Île-de-France, France métropolitaine, France",
        "address": {
            "city": "Paris",
            "county": "Paris",
            "state": "Île-de-France",
            "country": "France",
            "country_code": "fr"
        }
    }
