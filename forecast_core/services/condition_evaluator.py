"""Fishing and drone suitability rules for beach fishing by drone or long line."""
from forecast_core.config import (
    BAD_ONSHORE_WIND_THRESHOLD,
    CONDITION_GOOD,
    CONDITION_POOR,
    DRONE_GUST_NO_GO_THRESHOLD,
    DRONE_MAX_SUSTAINED_WIND_SPEED,
    DRONE_STRONG_FLASH_THRESHOLD,
    DRONE_WARNING_FLASH_THRESHOLD,
    GENERAL_BAD_SUSTAINED_THRESHOLD,
    ONSHORE_DIRECTIONS,
)
from forecast_core.models.condition import ConditionVerdict


def is_onshore(wind_direction: str) -> bool:
    """Check if a compass direction blows onshore (case-insensitive)."""
    return wind_direction.upper() in ONSHORE_DIRECTIONS


def evaluate(
    wind_speed: float,
    wind_direction: str,
    wind_gust: float,
) -> ConditionVerdict:
    """
    Evaluate fishing conditions for a sustained wind, direction and gust.

    Drone checks run first as an exclusive chain:
        1. gust > 40            -> drone out, red flash, Poor
        2. sustained > 35       -> drone out, Poor (red flash above 38)
        3. sustained in [30, 35] -> orange drone warning
    General checks only run while the condition is still Good:
        - sustained >= 20                  -> Poor
        - onshore direction and >= 10      -> Poor

    Inputs are expected to be non-negative; callers clamp them first.

    Args:
        wind_speed: Sustained wind speed in km/h
        wind_direction: Compass point the wind blows from (e.g. "NW")
        wind_gust: Gust speed in km/h

    Returns:
        ConditionVerdict
    """
    condition = CONDITION_GOOD
    drone_not_an_option = False
    should_flash = False
    should_warn_drone = False
    reason = ""

    if wind_gust > DRONE_GUST_NO_GO_THRESHOLD:
        drone_not_an_option = True
        should_flash = True
        condition = CONDITION_POOR
        reason = f"Gusts > {DRONE_GUST_NO_GO_THRESHOLD}km/h"
    elif wind_speed > DRONE_MAX_SUSTAINED_WIND_SPEED:
        drone_not_an_option = True
        condition = CONDITION_POOR
        reason = f"Wind > {DRONE_MAX_SUSTAINED_WIND_SPEED}km/h"
        if wind_speed > DRONE_STRONG_FLASH_THRESHOLD:
            should_flash = True
    elif DRONE_WARNING_FLASH_THRESHOLD <= wind_speed <= DRONE_MAX_SUSTAINED_WIND_SPEED:
        should_warn_drone = True
        reason = f"Wind {DRONE_WARNING_FLASH_THRESHOLD}-{DRONE_MAX_SUSTAINED_WIND_SPEED}km/h"

    if condition == CONDITION_GOOD:
        if wind_speed >= GENERAL_BAD_SUSTAINED_THRESHOLD:
            condition = CONDITION_POOR
        if is_onshore(wind_direction) and wind_speed >= BAD_ONSHORE_WIND_THRESHOLD:
            condition = CONDITION_POOR

    return ConditionVerdict(
        condition=condition,
        drone_not_an_option=drone_not_an_option,
        should_flash=should_flash,
        should_warn_drone=should_warn_drone,
        drone_warning_reason=reason,
    )
