"""API routes for the session forecast."""
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException

from backend.schemas.forecast import DailyForecastResponse, ForecastResponse
from backend.services.forecast_service import ForecastService
from backend.services.tip_service import TipService
from backend.api.dependencies import get_forecast_service, get_tip_service

router = APIRouter(prefix="/forecast", tags=["forecast"])


@router.get("", response_model=ForecastResponse)
async def get_forecast(
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> ForecastResponse:
    """
    Get the full forecast for the session.

    Each day and each three-hourly slice carries a freshly evaluated
    fishing/drone verdict.
    """
    return forecast_service.get_forecast()


@router.post("/regenerate", response_model=ForecastResponse)
async def regenerate_forecast(
    seed: Optional[int] = Query(None, description="Random seed for reproducible output"),
    forecast_service: ForecastService = Depends(get_forecast_service),
    tip_service: TipService = Depends(get_tip_service),
) -> ForecastResponse:
    """
    Replace the whole forecast set with a newly generated one.

    Stored tips describe the previous conditions and are dropped.
    """
    forecast_service.regenerate(seed=seed)
    tip_service.clear_all()
    return forecast_service.get_forecast()


@router.get("/{date}", response_model=DailyForecastResponse)
async def get_forecast_day(
    date: str,
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> DailyForecastResponse:
    """Get a single forecast day by date (YYYY-MM-DD)."""
    result = forecast_service.get_day_response(date)
    if result is None:
        raise HTTPException(status_code=404, detail="Forecast day not found")
    return result
