"""API routes for condition evaluation."""
from typing import Literal
from fastapi import APIRouter, Query

from forecast_core.services import condition_evaluator

from backend.schemas.condition import ConditionEvaluationResponse
from backend.services.forecast_service import verdict_response

router = APIRouter(prefix="/conditions", tags=["conditions"])

CompassPoint = Literal["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


@router.get("", response_model=ConditionEvaluationResponse)
async def evaluate_conditions(
    wind_speed: float = Query(..., ge=0, description="Sustained wind speed in km/h"),
    wind_direction: CompassPoint = Query(..., description="Compass point the wind blows from"),
    wind_gust: float = Query(..., ge=0, description="Gust speed in km/h"),
) -> ConditionEvaluationResponse:
    """Evaluate fishing and drone suitability for the given wind values."""
    verdict = condition_evaluator.evaluate(wind_speed, wind_direction, wind_gust)
    return ConditionEvaluationResponse(
        wind_speed=wind_speed,
        wind_direction=wind_direction,
        wind_gust=wind_gust,
        verdict=verdict_response(verdict),
    )
