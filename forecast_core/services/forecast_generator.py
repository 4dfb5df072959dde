"""Service for generating a synthetic multi-day fishing forecast."""
from datetime import date, timedelta
from typing import List, Optional

from forecast_core.config import (
    DAY_ZERO_WIND_GUST,
    DAY_ZERO_WIND_SPEED,
    DESCRIPTIONS,
    HORIZON_DAYS,
    HOURLY_GUST_EXTRA_RANGE,
    HOURLY_TEMP_SPREAD,
    HOURLY_WIND_SPREAD,
    HOURS_OF_DAY,
    HUMIDITY_RANGE,
    IDEAL_FISHING_TIME_GOOD,
    IDEAL_FISHING_TIME_POOR,
    TEMP_RANGE,
    TIDE_HEIGHT_DECIMALS,
    WIND_DIRECTIONS,
    WIND_GUST_EXTRA_RANGE,
    WIND_SPEED_RANGE,
)
from forecast_core.models.forecast import DailyForecast, HourlyRecord, TideWindow
from forecast_core.services import condition_evaluator
from forecast_core.services.random_source import NumpyRandomSource, RandomSource
from forecast_core.services.tide_simulator import TideSimulator


def _clock_label(hour: int, suffix: str) -> str:
    """12-hour clock label, e.g. 21 -> "9:00 PM"."""
    return f"{hour % 12 or 12}:00 {suffix}"


def build_tide_window(day_index: int) -> TideWindow:
    """
    Coarse high/low tide labels for a day, shifted one hour per day.

    Independent of the hourly tide curve.
    """
    return TideWindow(
        high=[_clock_label(9 + day_index, "AM"), _clock_label(21 + day_index, "PM")],
        low=[_clock_label(3 + day_index, "AM"), _clock_label(15 + day_index, "PM")],
    )


class ForecastGenerator:
    """Builds synthetic daily forecasts with three-hourly breakdowns.

    Every random draw goes through the injected RandomSource, in a fixed
    order per day: wind speed and gust (days after the first), temperature,
    humidity, description, direction, tide base and range, then per hour
    temperature, wind speed and gust.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        tide_simulator: Optional[TideSimulator] = None,
    ):
        """
        Initialize generator.

        Args:
            random_source: Source of uniform [0, 1) values (entropy-seeded if omitted)
            tide_simulator: Tide curve simulator
        """
        self.random_source = random_source or NumpyRandomSource()
        self.tide_simulator = tide_simulator or TideSimulator()

    def generate(
        self,
        horizon_days: int = HORIZON_DAYS,
        today: Optional[date] = None,
    ) -> List[DailyForecast]:
        """
        Generate one DailyForecast per day starting at `today`.

        Args:
            horizon_days: Number of days to generate
            today: First forecast date (defaults to the current date)

        Returns:
            List of DailyForecast ordered by date
        """
        if horizon_days < 0:
            raise ValueError(f"horizon_days must be non-negative, got {horizon_days}")
        today = today or date.today()
        return [self._generate_day(i, today + timedelta(days=i)) for i in range(horizon_days)]

    def _generate_day(self, day_index: int, day_date: date) -> DailyForecast:
        rs = self.random_source

        if day_index == 0:
            wind_speed = DAY_ZERO_WIND_SPEED
            wind_gust = DAY_ZERO_WIND_GUST
        else:
            wind_speed = rs.uniform_int(*WIND_SPEED_RANGE)
            wind_gust = wind_speed + rs.uniform_int(*WIND_GUST_EXTRA_RANGE)

        temp = rs.uniform_int(*TEMP_RANGE)
        humidity = rs.uniform_int(*HUMIDITY_RANGE)
        description = rs.choice(DESCRIPTIONS)
        wind_direction = rs.choice(WIND_DIRECTIONS)

        base_height, amplitude_range = self.tide_simulator.draw_day_parameters(rs)
        tide_curve = self.tide_simulator.build_curve(
            day_index, base_height, amplitude_range, HOURS_OF_DAY
        )

        hourly_forecast = [
            self._generate_hour(
                hour, temp, wind_speed, wind_direction, description, tide_height, tide_status
            )
            for hour, (tide_height, tide_status) in zip(HOURS_OF_DAY, tide_curve)
        ]

        verdict = condition_evaluator.evaluate(wind_speed, wind_direction, wind_gust)
        ideal_fishing_time = (
            IDEAL_FISHING_TIME_GOOD if verdict.is_good else IDEAL_FISHING_TIME_POOR
        )

        return DailyForecast(
            date=day_date,
            wind_speed=wind_speed,
            wind_gust=wind_gust,
            wind_direction=wind_direction,
            description=description,
            temp=temp,
            humidity=humidity,
            ideal_fishing_time=ideal_fishing_time,
            tide_times=build_tide_window(day_index),
            hourly_forecast=hourly_forecast,
        )

    def _generate_hour(
        self,
        hour: int,
        temp: int,
        wind_speed: int,
        wind_direction: str,
        description: str,
        tide_height: float,
        tide_status: str,
    ) -> HourlyRecord:
        rs = self.random_source
        hour_temp = temp - HOURLY_TEMP_SPREAD + rs.uniform_int(0, 2 * HOURLY_TEMP_SPREAD)
        hour_wind_speed = max(
            0, wind_speed - HOURLY_WIND_SPREAD + rs.uniform_int(0, 2 * HOURLY_WIND_SPREAD)
        )
        hour_wind_gust = max(0, hour_wind_speed + rs.uniform_int(*HOURLY_GUST_EXTRA_RANGE))

        return HourlyRecord(
            time=f"{hour:02d}:00",
            temperature=hour_temp,
            description=description,
            wind_speed=hour_wind_speed,
            wind_gust=hour_wind_gust,
            wind_direction=wind_direction,
            tide_height=round(tide_height, TIDE_HEIGHT_DECIMALS),
            tide_status=tide_status,
        )
