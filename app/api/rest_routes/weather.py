from fastapi import APIRouter

from app.models.common import RequestContext
from app.models.weather import WeatherSnapshot
from app.services.insight_service import weather_snapshot

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.post(
    "/snapshot",
    response_model=WeatherSnapshot,
    response_model_exclude_none=True,
)
async def get_weather_snapshot(context: RequestContext):
    """
    Current conditions and a farming advisory. Missing coordinates fall back to
    the configured default location.
    """
    return await weather_snapshot(context)
