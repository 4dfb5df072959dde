"""Pydantic schemas for condition verdicts."""
from pydantic import BaseModel


class ConditionVerdictResponse(BaseModel):
    """Fishing and drone suitability for a set of wind values."""

    condition: str  # "Good" or "Poor"
    drone_not_an_option: bool
    should_flash: bool
    should_warn_drone: bool
    drone_warning_reason: str


class ConditionEvaluationResponse(BaseModel):
    """Response schema for an ad hoc condition evaluation."""

    wind_speed: float
    wind_direction: str
    wind_gust: float
    verdict: ConditionVerdictResponse
