import pytest

from weather_widget.services.weather_codes import (
    UNKNOWN_DESCRIPTION,
    WEATHER_CODES,
    WeatherCodeCatalog,
    WeatherCodeEntry,
    WeatherIcon,
    catalog,
)

KNOWN_CODES = {0, 1, 2, 3, 45, 48, 51, 53, 55, 61, 63, 65, 71, 73, 75, 80, 81, 82, 95, 96, 99}


class TestDescribe:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (0, "Clear sky"),
            (1, "Mainly clear"),
            (3, "Overcast"),
            (48, "Depositing rime fog"),
            (55, "Dense drizzle"),
            (65, "Heavy rain"),
            (75, "Heavy snow fall"),
            (82, "Violent rain showers"),
            (95, "Thunderstorm"),
            (99, "Thunderstorm with heavy hail"),
        ],
    )
    def test_known_codes(self, code, expected):
        assert catalog.describe(code) == expected

    @pytest.mark.parametrize("code", [-1, 4, 50, 77, 100, 999, None])
    def test_unknown_code_returns_fallback(self, code):
        assert catalog.describe(code) == UNKNOWN_DESCRIPTION


class TestIconFor:
    @pytest.mark.parametrize(
        "code, is_day, expected",
        [
            (0, True, WeatherIcon.CLEAR_DAY),
            (0, False, WeatherIcon.CLEAR_NIGHT),
            (1, True, WeatherIcon.MOSTLY_CLEAR_DAY),
            (1, False, WeatherIcon.CLEAR_NIGHT),
            (2, False, WeatherIcon.PARTLY_CLOUDY),
            (45, True, WeatherIcon.FOG),
            (65, True, WeatherIcon.STORM),
            (73, True, WeatherIcon.HEAVY_SNOW),
            (71, False, WeatherIcon.SNOW),
        ],
    )
    def test_known_codes(self, code, is_day, expected):
        assert catalog.icon_for(code, is_day) == expected

    def test_unknown_code_returns_unknown_icon(self):
        assert catalog.icon_for(42, True) == WeatherIcon.UNKNOWN
        assert catalog.icon_for(None, None) == WeatherIcon.UNKNOWN

    def test_missing_day_flag_uses_night_icon(self):
        assert catalog.icon_for(0, None) == WeatherIcon.CLEAR_NIGHT


def test_lookups_are_total():
    for code in range(-10, 201):
        for is_day in (True, False):
            assert catalog.describe(code)
            assert catalog.icon_for(code, is_day).value


def test_description_ignores_day_night():
    for code in KNOWN_CODES:
        entry = WEATHER_CODES[code]
        assert catalog.describe(code) == entry.description
        assert catalog.icon_for(code, True) == entry.icon_day
        assert catalog.icon_for(code, False) == entry.icon_night


def test_catalog_covers_exactly_the_wmo_codes():
    assert set(WEATHER_CODES) == KNOWN_CODES


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        WEATHER_CODES[4] = WeatherCodeEntry("Sandstorm", WeatherIcon.FOG, WeatherIcon.FOG)


def test_custom_table():
    codes = WeatherCodeCatalog({7: WeatherCodeEntry("Test", WeatherIcon.RAIN, WeatherIcon.SNOW)})
    assert codes.describe(7) == "Test"
    assert codes.icon_for(7, False) == WeatherIcon.SNOW
    assert codes.describe(0) == UNKNOWN_DESCRIPTION
