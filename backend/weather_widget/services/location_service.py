"""
Location resolution.
Forward lookups go to the Open-Meteo geocoding API; reverse lookups go through
a pluggable ReverseGeocoder so the label provider can be swapped or chained.
"""
import httpx
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from pydantic import ValidationError

from weather_widget.core.config import settings
from weather_widget.core.exceptions import (
    EmptyQueryError,
    InvalidCoordinatesError,
    LocationNotFoundError,
    ReverseGeocodingError,
)
from weather_widget.core.logger import logs
from weather_widget.models.location_model import CURRENT_LOCATION, Coordinates, ResolvedLocation
from weather_widget.services.base_service import HTTPService

# Nominatim address keys, most specific first
ADDRESS_KEYS = ("city", "town", "village", "county")


class ReverseGeocoder(ABC):
    """Base class for all reverse geocoding strategies"""

    @abstractmethod
    async def reverse_geocode(self, lat: float, lon: float) -> ResolvedLocation:
        """Name the coordinates or raise ReverseGeocodingError"""
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        pass


class OpenMeteoReverseGeocoder(HTTPService, ReverseGeocoder):
    """Queries the geocoding search endpoint with coordinates instead of a name"""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        super().__init__(client)
        self.base_url = settings.GEOCODING_URL

    async def reverse_geocode(self, lat: float, lon: float) -> ResolvedLocation:
        params = {
            "latitude": lat,
            "longitude": lon,
            "count": 1,
            "language": settings.GEOCODING_LANGUAGE,
            "format": "json"
        }
        async with self._session() as client:
            try:
                resp = await client.get(self.base_url, params=params)
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                raise ReverseGeocodingError(f"Open-Meteo lookup failed: {str(e)}") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            raise ReverseGeocodingError(f"Open-Meteo has no place at {lat}, {lon}")

        item = results[0]
        return ResolvedLocation(
            name=item.get("name") or CURRENT_LOCATION,
            country=item.get("country") or "",
            latitude=lat,
            longitude=lon
        )

    def get_provider_name(self) -> str:
        return "Open-Meteo"


class NominatimReverseGeocoder(HTTPService, ReverseGeocoder):
    """OpenStreetMap reverse endpoint; needs a User-Agent per the usage policy"""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        super().__init__(client)
        self.base_url = settings.REVERSE_GEOCODING_URL
        self.headers = {"User-Agent": settings.USER_AGENT}

    async def reverse_geocode(self, lat: float, lon: float) -> ResolvedLocation:
        params = {
            "format": "json",
            "lat": lat,
            "lon": lon,
            "zoom": 10,
            "addressdetails": 1
        }
        async with self._session() as client:
            try:
                resp = await client.get(self.base_url, params=params, headers=self.headers)
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                raise ReverseGeocodingError(f"Nominatim lookup failed: {str(e)}") from e

        address = data.get("address") if isinstance(data, dict) else None
        if not address or not isinstance(address, dict):
            raise ReverseGeocodingError(f"Nominatim has no address at {lat}, {lon}")

        name = next((address[key] for key in ADDRESS_KEYS if address.get(key)), CURRENT_LOCATION)
        return ResolvedLocation(
            name=name,
            country=address.get("country") or "",
            latitude=lat,
            longitude=lon
        )

    def get_provider_name(self) -> str:
        return "Nominatim"


class ChainedReverseGeocoder(ReverseGeocoder):
    """Tries each geocoder in order; the first answer wins"""

    def __init__(self, geocoders: Sequence[ReverseGeocoder]):
        if not geocoders:
            raise ValueError("ChainedReverseGeocoder needs at least one geocoder")
        self.geocoders = list(geocoders)

    async def reverse_geocode(self, lat: float, lon: float) -> ResolvedLocation:
        failures = []
        for geocoder in self.geocoders:
            try:
                return await geocoder.reverse_geocode(lat, lon)
            except ReverseGeocodingError as e:
                logs.log(logging.WARNING, f"{geocoder.get_provider_name()} could not name {lat}, {lon}: {str(e)}", component="location")
                failures.append(str(e))
        raise ReverseGeocodingError("; ".join(failures))

    def get_provider_name(self) -> str:
        return " -> ".join(g.get_provider_name() for g in self.geocoders)


def build_reverse_geocoder(name: Optional[str] = None, client: Optional[httpx.AsyncClient] = None) -> ReverseGeocoder:
    """Pick the reverse geocoding strategy named in settings"""
    provider = (name or settings.REVERSE_GEOCODER).lower()

    if provider == "open-meteo":
        return OpenMeteoReverseGeocoder(client)
    elif provider == "nominatim":
        return NominatimReverseGeocoder(client)
    elif provider == "chain":
        return ChainedReverseGeocoder([NominatimReverseGeocoder(client), OpenMeteoReverseGeocoder(client)])
    else:
        logs.log(logging.WARNING, f"Unknown reverse geocoder '{provider}', defaulting to Nominatim", component="location")
        return NominatimReverseGeocoder(client)


class LocationResolver(HTTPService):
    def __init__(
        self,
        reverse_geocoder: Optional[ReverseGeocoder] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(client)
        self.base_url = settings.GEOCODING_URL
        self.reverse_geocoder = reverse_geocoder or build_reverse_geocoder(client=client)

    async def resolve_by_name(self, query: str) -> ResolvedLocation:
        """
        Forward geocoding. Takes the provider's first (most relevant) match.
        Raises LocationNotFoundError (EmptyQueryError for blank input).
        """
        query = (query or "").strip()
        if not query:
            raise EmptyQueryError()

        logs.log(logging.INFO, f"Geocoding '{query}'", component="location")
        params = {
            "name": query,
            "count": 1,
            "language": settings.GEOCODING_LANGUAGE,
            "format": "json"
        }
        async with self._session() as client:
            try:
                resp = await client.get(self.base_url, params=params)
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Geocoding API error: {str(e)}", component="location")
                raise LocationNotFoundError("Failed to find location") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list) or not results:
            logs.log(logging.WARNING, f"No geocoding results for '{query}'", component="location")
            raise LocationNotFoundError()

        item = results[0]
        try:
            location = ResolvedLocation(
                name=item.get("name") or query,
                country=item.get("country") or "",
                latitude=item["latitude"],
                longitude=item["longitude"]
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logs.log(logging.WARNING, f"Unusable geocoding result for '{query}': {item}", component="location")
            raise LocationNotFoundError() from e

        logs.log(logging.INFO, f"Resolved '{query}' to {location.label} ({location.latitude}, {location.longitude})", component="location")
        return location

    async def resolve_by_coordinates(self, lat: float, lon: float) -> ResolvedLocation:
        """
        Reverse geocoding. For in-range coordinates this never raises: a failed
        lookup still yields a usable record with the fallback label and the
        caller's coordinates. Out-of-range input is rejected before any request
        with InvalidCoordinatesError.
        """
        position = checked_coordinates(lat, lon)
        try:
            location = await self.reverse_geocoder.reverse_geocode(position.latitude, position.longitude)
        except Exception as e:
            logs.log(logging.WARNING, f"Reverse geocoding failed, using '{CURRENT_LOCATION}': {str(e)}", component="location")
            return ResolvedLocation.fallback(position.latitude, position.longitude)

        logs.log(logging.INFO, f"Reverse geocoded {lat}, {lon} to {location.label}", component="location")
        return location


def checked_coordinates(lat: float, lon: float) -> Coordinates:
    """Coordinates for a caller-supplied pair, or InvalidCoordinatesError."""
    try:
        return Coordinates(latitude=lat, longitude=lon)
    except ValidationError as e:
        logs.log(logging.WARNING, "Rejected coordinates", extra={"lat": lat, "lon": lon}, component="location")
        raise InvalidCoordinatesError(f"Coordinates are out of range: {lat}, {lon}") from e
