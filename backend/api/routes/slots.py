"""API routes for navigable slots."""
from fastapi import APIRouter, Depends

from backend.schemas.navigability import (
    NavigabilityConfigSchema,
    SlotsRequest,
    SlotsResponse,
)
from backend.services.navigability_service import NavigabilityService
from backend.api.dependencies import get_navigability_service

router = APIRouter(tags=["slots"])


@router.get("/config", response_model=NavigabilityConfigSchema)
async def get_config(
    navigability_service: NavigabilityService = Depends(get_navigability_service),
) -> NavigabilityConfigSchema:
    """Get the global navigability config."""
    return navigability_service.default_config.to_dict()


@router.post("/slots", response_model=SlotsResponse)
async def calculate_slots(
    request: SlotsRequest,
    navigability_service: NavigabilityService = Depends(get_navigability_service),
) -> SlotsResponse:
    """
    Calculate navigable slots for one day of hourly samples.

    Uses the global config unless one is given; rider overrides replace
    the speed and gust minimums.
    """
    return navigability_service.get_slots(
        hourly=[h.model_dump(by_alias=True) for h in request.hourly],
        config=request.config.model_dump(by_alias=True) if request.config else None,
        overrides=request.overrides.model_dump(by_alias=True) if request.overrides else None,
    )
