"""Display hints derived from forecast values."""
from typing import Optional

from forecast_core.config import (
    FALLING_TIDE,
    HIGH_TIDE,
    LOW_TIDE,
    RISING_TIDE,
    WIND_INTENSITY_HIGH_MAX,
    WIND_INTENSITY_LOW_MAX,
    WIND_INTENSITY_MODERATE_MAX,
)


def wind_intensity(wind_speed: float) -> Optional[str]:
    """
    Background animation band for a sustained wind speed.

    Returns None above the high band, where drone alerts take over.
    """
    if wind_speed <= WIND_INTENSITY_LOW_MAX:
        return "low"
    if wind_speed <= WIND_INTENSITY_MODERATE_MAX:
        return "moderate"
    if wind_speed <= WIND_INTENSITY_HIGH_MAX:
        return "high"
    return None


def sky_category(description: str) -> str:
    """Map a weather description to an icon category."""
    text = description.lower()
    if "sunny" in text or "clear" in text:
        return "sunny"
    if "rain" in text or "showers" in text:
        return "rain"
    if "cloudy" in text or "overcast" in text:
        return "cloudy"
    if "wind" in text:
        return "windy"
    return "cloudy"


def tide_trend(status: str) -> Optional[str]:
    if status == RISING_TIDE:
        return "up"
    if status == FALLING_TIDE:
        return "down"
    if status == HIGH_TIDE:
        return "high"
    if status == LOW_TIDE:
        return "low"
    return None
