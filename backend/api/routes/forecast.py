"""API routes for spot forecasts."""
from fastapi import APIRouter, Depends

from backend.schemas.navigability import ForecastRequest, ForecastResponse
from backend.services.navigability_service import NavigabilityService
from backend.api.dependencies import get_navigability_service

router = APIRouter(tags=["forecast"])


@router.post("/forecast", response_model=ForecastResponse)
async def build_forecast(
    request: ForecastRequest,
    navigability_service: NavigabilityService = Depends(get_navigability_service),
) -> ForecastResponse:
    """
    Group raw UTC entries into local days and find each day's slots.

    Pass `today` to drop past days and get a summary of today's
    navigable spots.
    """
    return navigability_service.get_forecasts(
        spots=[spot.model_dump() for spot in request.spots],
        overrides=request.overrides.model_dump(by_alias=True) if request.overrides else None,
        today=request.today,
    )
