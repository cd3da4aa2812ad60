from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Open-Meteo endpoints (no API key required)
    FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
    GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"

    # Reverse geocoding
    REVERSE_GEOCODING_URL: str = "https://nominatim.openstreetmap.org/reverse"
    REVERSE_GEOCODER: str = "nominatim"  # Options: open-meteo, nominatim, chain
    GEOCODING_LANGUAGE: str = "en"

    # HTTP
    HTTP_TIMEOUT: float = 10.0
    USER_AGENT: str = "WeatherWidget/1.0"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
