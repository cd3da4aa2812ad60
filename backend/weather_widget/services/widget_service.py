import logging
from typing import Awaitable, Optional, Tuple

from weather_widget.core.exceptions import UnexpectedError, WeatherWidgetError
from weather_widget.core.logger import logs
from weather_widget.models.location_model import ResolvedLocation
from weather_widget.models.search_model import SearchPhase, SearchState
from weather_widget.models.weather_model import WeatherReport, WeatherSnapshot, WeatherView
from weather_widget.services.geolocation import GeolocationSource
from weather_widget.services.location_service import LocationResolver, checked_coordinates
from weather_widget.services.presenter_service import WeatherPresenter
from weather_widget.services.weather_service import WeatherFetcher


class WeatherWidgetService:
    """
    The pipeline behind the weather card: Location -> Weather -> View.

    Tracks the search state the UI renders (idle, loading, success, failure).
    Every search bumps a generation counter; a search that finishes after a
    newer one has started still returns its result but leaves the visible
    state alone.
    """

    def __init__(
        self,
        resolver: Optional[LocationResolver] = None,
        fetcher: Optional[WeatherFetcher] = None,
        presenter: Optional[WeatherPresenter] = None
    ):
        self.resolver = resolver or LocationResolver()
        self.fetcher = fetcher or WeatherFetcher()
        self.presenter = presenter or WeatherPresenter()
        self.state = SearchState()
        self._generation = 0

    def reset(self) -> SearchState:
        self._generation += 1
        self.state = SearchState()
        return self.state

    async def search_by_name(self, query: str) -> SearchState:
        generation = self._begin()
        return await self._run(generation, self._locate_by_name(query))

    async def search_by_coordinates(self, lat: float, lon: float) -> SearchState:
        generation = self._begin()
        return await self._run(generation, self._locate_by_coordinates(lat, lon))

    async def search_current_location(self, source: GeolocationSource) -> SearchState:
        generation = self._begin()
        return await self._run(generation, self._locate_device(source))

    async def _locate_by_name(self, query: str) -> Tuple[ResolvedLocation, WeatherReport]:
        location = await self.resolver.resolve_by_name(query)
        report = await self.fetcher.fetch_by_coordinates(location.latitude, location.longitude)
        return location, report

    async def _locate_by_coordinates(self, lat: float, lon: float) -> Tuple[ResolvedLocation, WeatherReport]:
        position = checked_coordinates(lat, lon)
        # Forecast first: if it fails there is nothing to label
        report = await self.fetcher.fetch_by_coordinates(position.latitude, position.longitude)
        location = await self.resolver.resolve_by_coordinates(position.latitude, position.longitude)
        return location, report

    async def _locate_device(self, source: GeolocationSource) -> Tuple[ResolvedLocation, WeatherReport]:
        position = await source.current_position()
        return await self._locate_by_coordinates(position.latitude, position.longitude)

    async def _run(self, generation: int, pipeline: Awaitable[Tuple[ResolvedLocation, WeatherReport]]) -> SearchState:
        """Leaves LOADING exactly once, whatever the pipeline raises."""
        try:
            location, report = await pipeline
            view = self.presenter.present(WeatherSnapshot.from_report(location, report))
        except WeatherWidgetError as e:
            return self._fail(generation, e)
        except Exception as e:
            logs.log(logging.ERROR, f"Unexpected error in search #{generation}: {e!r}", component="widget")
            return self._fail(generation, UnexpectedError())
        return self._succeed(generation, view)

    def _begin(self) -> int:
        self._generation += 1
        self.state = SearchState(phase=SearchPhase.LOADING)
        return self._generation

    def _succeed(self, generation: int, view: WeatherView) -> SearchState:
        logs.log(logging.INFO, f"Weather ready for {view.label}: {view.temperature}°C, {view.description}", component="widget")
        return self._settle(generation, SearchState(phase=SearchPhase.SUCCESS, view=view))

    def _fail(self, generation: int, error: WeatherWidgetError) -> SearchState:
        logs.log(logging.WARNING, f"Search failed ({error.kind.value}): {error.message}", component="widget")
        return self._settle(generation, SearchState(phase=SearchPhase.FAILURE, error=error.to_info()))

    def _settle(self, generation: int, state: SearchState) -> SearchState:
        if generation == self._generation:
            self.state = state
        else:
            logs.log(logging.INFO, f"Search #{generation} superseded by #{self._generation}, result not shown", component="widget")
        return state
