"""Service for simulating a stylized daily tide curve."""
from typing import List, Optional, Sequence, Tuple

import numpy as np

from forecast_core.config import (
    FALLING_TIDE,
    HIGH_TIDE,
    HOURS_OF_DAY,
    LOW_TIDE,
    RISING_TIDE,
    STABLE_TIDE,
    TIDE_AMPLITUDE_RANGE,
    TIDE_BASE_HEIGHT_RANGE,
    TIDE_DAY_PHASE_SHIFT,
    TIDE_HIGH_THRESHOLD,
    TIDE_LOW_THRESHOLD,
)
from forecast_core.services.random_source import RandomSource


class TideSimulator:
    """
    Periodic tide height approximation with derived status labels.

    Heights follow a single sine wave per day:

        height = base + (range / 2) * sin(2*pi*hour/24 + day_index*pi/3)

    The per-day phase shift keeps consecutive days out of step. This is a
    display approximation, not a harmonic tidal model.
    """

    def __init__(
        self,
        high_threshold: float = TIDE_HIGH_THRESHOLD,
        low_threshold: float = TIDE_LOW_THRESHOLD,
    ):
        self.high_threshold = high_threshold
        self.low_threshold = low_threshold

    @staticmethod
    def tide_height(
        hour_of_day: int,
        day_index: int,
        base_height: float,
        amplitude_range: float,
    ) -> float:
        """Tide height in meters for an hour of day on a given day."""
        phase = 2 * np.pi * hour_of_day / 24 + day_index * TIDE_DAY_PHASE_SHIFT
        return float(base_height + (amplitude_range / 2) * np.sin(phase))

    def classify(self, height: float, previous_height: Optional[float] = None) -> str:
        """
        Classify a tide height into a status label.

        Absolute bands (high/low) take precedence over the trend against
        the previous sample. Without a previous sample only the bands apply.
        """
        if height > self.high_threshold:
            return HIGH_TIDE
        if height < self.low_threshold:
            return LOW_TIDE
        if previous_height is not None:
            if height > previous_height:
                return RISING_TIDE
            if height < previous_height:
                return FALLING_TIDE
        return STABLE_TIDE

    @staticmethod
    def draw_day_parameters(random_source: RandomSource) -> Tuple[float, float]:
        """Draw (base_height, amplitude_range) for one day."""
        base_height = random_source.uniform(*TIDE_BASE_HEIGHT_RANGE)
        amplitude_range = random_source.uniform(*TIDE_AMPLITUDE_RANGE)
        return base_height, amplitude_range

    def build_curve(
        self,
        day_index: int,
        base_height: float,
        amplitude_range: float,
        hours: Sequence[int] = HOURS_OF_DAY,
    ) -> List[Tuple[float, str]]:
        """
        Compute (unrounded height, status) for each hour in order.

        Each status is classified against the previous sample's unrounded
        height; the first sample has no predecessor.
        """
        curve = []
        previous = None
        for hour in hours:
            height = self.tide_height(hour, day_index, base_height, amplitude_range)
            curve.append((height, self.classify(height, previous)))
            previous = height
        return curve
