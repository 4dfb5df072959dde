"""Pydantic schemas for forecast data."""
from pydantic import BaseModel
from typing import List, Optional

from backend.schemas.condition import ConditionVerdictResponse


class HourlyForecastResponse(BaseModel):
    """A three-hourly forecast slice."""

    time: str  # "HH:00"
    temperature: int
    description: str
    wind_speed: int  # km/h
    wind_gust: int  # km/h
    wind_direction: str
    tide_height: float  # meters
    tide_status: str
    tide_trend: Optional[str] = None
    conditions: ConditionVerdictResponse


class TideWindowResponse(BaseModel):
    """Coarse daily high/low tide times."""

    high: List[str]
    low: List[str]


class DailyForecastResponse(BaseModel):
    """A single forecast day."""

    date: str  # "YYYY-MM-DD"
    wind_speed: int
    wind_gust: int
    wind_direction: str
    description: str
    temp: int
    humidity: int
    ideal_fishing_time: str
    tide_times: TideWindowResponse
    hourly_forecast: List[HourlyForecastResponse]
    conditions: ConditionVerdictResponse
    wind_intensity: Optional[str] = None
    sky_category: str


class ForecastResponse(BaseModel):
    """Response schema for the full forecast set."""

    location: str
    days: List[DailyForecastResponse]
