"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from backend.services.navigability_service import NavigabilityService


@lru_cache()
def get_navigability_service() -> NavigabilityService:
    """Get cached navigability service instance."""
    return NavigabilityService()
