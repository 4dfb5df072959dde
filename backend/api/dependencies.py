"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from backend.config import settings
from backend.data.forecast_repository import ForecastRepository
from backend.services.forecast_service import ForecastService
from backend.services.tip_service import TipService


@lru_cache()
def get_forecast_repository() -> ForecastRepository:
    """Get cached forecast repository instance."""
    return ForecastRepository()


@lru_cache()
def get_forecast_service() -> ForecastService:
    """Get cached forecast service instance."""
    return ForecastService(
        forecast_repo=get_forecast_repository(),
        horizon_days=settings.horizon_days,
        location_name=settings.location_name,
        seed=settings.random_seed,
    )


@lru_cache()
def get_tip_service() -> TipService:
    """Get cached tip service instance."""
    return TipService(
        api_url=settings.tip_api_url,
        model=settings.tip_model,
        api_key=settings.tip_api_key,
        location_name=settings.location_name,
        timeout=settings.tip_timeout_seconds,
    )
