from fastapi import APIRouter, Depends

from weather_widget.models.search_model import GeolocationReport, SearchRequest, SearchState
from weather_widget.services.geolocation import ReportedPosition
from weather_widget.services.weather_codes import catalog
from weather_widget.services.widget_service import WeatherWidgetService

router = APIRouter(prefix="/weather")

# --- Dependency Injection ---
def get_widget_service() -> WeatherWidgetService:
    return WeatherWidgetService()

@router.post("/search", response_model=SearchState)
async def search_endpoint(
    request: SearchRequest,
    service: WeatherWidgetService = Depends(get_widget_service)
):
    return await service.search_by_name(request.query)

@router.post("/geolocation", response_model=SearchState)
async def geolocation_endpoint(
    report: GeolocationReport,
    service: WeatherWidgetService = Depends(get_widget_service)
):
    """
    Receives whatever navigator.geolocation produced (a position or an
    error code) and shows the weather for it.
    """
    return await service.search_current_location(ReportedPosition.from_report(report))

@router.get("/codes")
async def codes_endpoint():
    return {
        code: {
            "description": entry.description,
            "icon_day": entry.icon_day.value,
            "icon_night": entry.icon_night.value
        }
        for code, entry in catalog.codes.items()
    }
