import pytest

from conftest import ProviderStub
from weather_widget.core.exceptions import WeatherFetchError
from weather_widget.services.weather_service import WeatherFetcher


@pytest.mark.asyncio
async def test_requests_fixed_fields_in_local_timezone(make_client, paris_forecast):
    stub = ProviderStub(json=paris_forecast)
    fetcher = WeatherFetcher(make_client(stub))

    await fetcher.fetch_by_coordinates(48.8566, 2.3522)

    assert len(stub.requests) == 1
    assert stub.requests[0].url.path == "/v1/forecast"
    assert stub.params["latitude"] == "48.8566"
    assert stub.params["longitude"] == "2.3522"
    assert stub.params["current"] == (
        "temperature_2m,relative_humidity_2m,apparent_temperature,is_day,precipitation,"
        "weather_code,cloud_cover,pressure_msl,surface_pressure,wind_speed_10m,"
        "wind_direction_10m,wind_gusts_10m"
    )
    assert stub.params["daily"] == "sunrise,sunset,uv_index_max"
    assert stub.params["timezone"] == "auto"


@pytest.mark.asyncio
async def test_parses_current_and_todays_summary(make_client, paris_forecast):
    paris_forecast["daily"] = {
        "time": ["2024-06-01", "2024-06-02"],
        "sunrise": ["2024-06-01T05:50", "2024-06-02T05:49"],
        "sunset": ["2024-06-01T21:10", "2024-06-02T21:11"],
        "uv_index_max": [4.2, 6.3],
    }
    fetcher = WeatherFetcher(make_client(ProviderStub(json=paris_forecast)))

    report = await fetcher.fetch_by_coordinates(48.8566, 2.3522)

    current = report.current
    assert current.temperature_c == 18.3
    assert current.apparent_temperature_c == 17.1
    assert current.relative_humidity_pct == 62
    assert current.is_day is True
    assert current.weather_code == 0
    assert current.cloud_cover_pct == 5
    assert current.pressure_msl == 1016.4
    assert current.surface_pressure == 1011.2
    assert current.wind_speed_kmh == 12.5
    assert current.wind_direction_deg == 240
    assert current.wind_gusts_kmh == 25.2
    assert current.precipitation_mm == 0.0
    assert current.time == "2024-06-01T14:15"
    assert report.daily.sunrise == "2024-06-01T05:50"
    assert report.daily.sunset == "2024-06-01T21:10"
    assert report.daily.uv_index_max == 4.2
    assert report.timezone == "Europe/Paris"
    assert report.utc_offset_seconds == 7200


@pytest.mark.asyncio
async def test_missing_fields_pass_through(make_client):
    payload = {"current": {"temperature_2m": -3.2, "is_day": 0}, "daily": {"uv_index_max": [], "sunrise": []}}
    fetcher = WeatherFetcher(make_client(ProviderStub(json=payload)))

    report = await fetcher.fetch_by_coordinates(78.22, 15.65)

    assert report.current.temperature_c == -3.2
    assert report.current.is_day is False
    assert report.current.weather_code is None
    assert report.daily.uv_index_max is None
    assert report.daily.sunrise is None
    assert report.daily.sunset is None


@pytest.mark.asyncio
async def test_empty_response_body(make_client):
    fetcher = WeatherFetcher(make_client(ProviderStub(json={})))

    report = await fetcher.fetch_by_coordinates(0.0, 0.0)

    assert report.current.temperature_c is None
    assert report.daily.uv_index_max is None


@pytest.mark.asyncio
@pytest.mark.parametrize("stub", [
    ProviderStub(status_code=400, json={"error": True, "reason": "Latitude must be in range of -90 to 90°."}),
    ProviderStub(status_code=502, json={}),
    ProviderStub(offline=True),
    ProviderStub(content=b"<html>oops</html>"),
    ProviderStub(json=["not", "an", "object"]),
    ProviderStub(json={"current": {"temperature_2m": "warm"}}),
])
async def test_failures_raise_weather_fetch_error(make_client, stub):
    fetcher = WeatherFetcher(make_client(stub))

    with pytest.raises(WeatherFetchError, match="Failed to fetch weather data"):
        await fetcher.fetch_by_coordinates(48.8566, 2.3522)
