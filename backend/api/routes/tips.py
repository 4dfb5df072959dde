"""API routes for generated fishing tips."""
from fastapi import APIRouter, Depends, HTTPException

from backend.schemas.tip import FishingTipResponse
from backend.services.forecast_service import ForecastService
from backend.services.tip_service import TipRequestInFlight, TipService
from backend.api.dependencies import get_forecast_service, get_tip_service

router = APIRouter(prefix="/forecast/{date}/tip", tags=["tips"])


@router.post("", response_model=FishingTipResponse)
async def generate_tip(
    date: str,
    forecast_service: ForecastService = Depends(get_forecast_service),
    tip_service: TipService = Depends(get_tip_service),
) -> FishingTipResponse:
    """
    Generate a fishing tip for a forecast day.

    Service failures resolve to a fallback message rather than an error.
    """
    day = forecast_service.get_day(date)
    if day is None:
        raise HTTPException(status_code=404, detail="Forecast day not found")
    try:
        tip = await tip_service.generate_tip(day)
    except TipRequestInFlight as e:
        raise HTTPException(status_code=409, detail=str(e))
    return FishingTipResponse(date=date, tip=tip)


@router.get("", response_model=FishingTipResponse)
async def get_tip(
    date: str,
    tip_service: TipService = Depends(get_tip_service),
) -> FishingTipResponse:
    """Get the most recent tip generated for a day."""
    tip = tip_service.latest_tip(date)
    if tip is None:
        raise HTTPException(status_code=404, detail="No tip for this day")
    return FishingTipResponse(date=date, tip=tip)


@router.delete("", status_code=204)
async def clear_tip(
    date: str,
    tip_service: TipService = Depends(get_tip_service),
) -> None:
    """Clear the stored tip for a day."""
    tip_service.clear_tip(date)
