"""Service for generating and serving the session forecast."""
import logging
from datetime import date
from typing import Callable, List, Optional

from forecast_core.config import HORIZON_DAYS
from forecast_core.models.condition import ConditionVerdict
from forecast_core.models.forecast import DailyForecast, HourlyRecord
from forecast_core.services import condition_evaluator
from forecast_core.services.forecast_generator import ForecastGenerator
from forecast_core.services.presentation_hints import sky_category, tide_trend, wind_intensity
from forecast_core.services.random_source import NumpyRandomSource

from backend.data.forecast_repository import ForecastRepository
from backend.schemas.condition import ConditionVerdictResponse
from backend.schemas.forecast import (
    DailyForecastResponse,
    ForecastResponse,
    HourlyForecastResponse,
    TideWindowResponse,
)

logger = logging.getLogger(__name__)


def verdict_response(verdict: ConditionVerdict) -> ConditionVerdictResponse:
    return ConditionVerdictResponse(**verdict.to_dict())


class ForecastService:
    """Service for forecast operations.

    Verdicts are evaluated on every response and never stored on the
    forecast records.
    """

    def __init__(
        self,
        forecast_repo: ForecastRepository = None,
        horizon_days: int = HORIZON_DAYS,
        location_name: str = "",
        seed: Optional[int] = None,
        today_provider: Callable[[], date] = date.today,
    ):
        """Initialize service with repository and generation settings."""
        self.forecast_repo = forecast_repo or ForecastRepository()
        self.horizon_days = horizon_days
        self.location_name = location_name
        self.seed = seed
        self.today_provider = today_provider

    def regenerate(self, seed: Optional[int] = None) -> List[DailyForecast]:
        """Generate a new forecast set and replace the current one."""
        seed = self.seed if seed is None else seed
        today = self.today_provider()
        generator = ForecastGenerator(random_source=NumpyRandomSource(seed=seed))
        forecasts = generator.generate(horizon_days=self.horizon_days, today=today)
        self.forecast_repo.replace_all(forecasts)
        logger.info(
            "Generated %d-day forecast starting %s (seed=%s)",
            self.horizon_days, today.isoformat(), seed,
        )
        return forecasts

    def ensure_loaded(self) -> None:
        """Generate the session forecast once if nothing is loaded yet."""
        if not self.forecast_repo.is_loaded:
            self.regenerate()

    def get_day(self, date_key: str) -> Optional[DailyForecast]:
        self.ensure_loaded()
        return self.forecast_repo.get_by_date(date_key)

    def get_forecast(self) -> ForecastResponse:
        """Get the full forecast set with fresh condition verdicts."""
        self.ensure_loaded()
        return ForecastResponse(
            location=self.location_name,
            days=[self.build_day_response(day) for day in self.forecast_repo.get_all()],
        )

    def get_day_response(self, date_key: str) -> Optional[DailyForecastResponse]:
        day = self.get_day(date_key)
        if day is None:
            return None
        return self.build_day_response(day)

    def build_day_response(self, day: DailyForecast) -> DailyForecastResponse:
        verdict = condition_evaluator.evaluate(day.wind_speed, day.wind_direction, day.wind_gust)
        return DailyForecastResponse(
            date=day.date_key,
            wind_speed=day.wind_speed,
            wind_gust=day.wind_gust,
            wind_direction=day.wind_direction,
            description=day.description,
            temp=day.temp,
            humidity=day.humidity,
            ideal_fishing_time=day.ideal_fishing_time,
            tide_times=TideWindowResponse(**day.tide_times.to_dict()),
            hourly_forecast=[self._build_hour_response(r) for r in day.hourly_forecast],
            conditions=verdict_response(verdict),
            wind_intensity=wind_intensity(day.wind_speed),
            sky_category=sky_category(day.description),
        )

    def _build_hour_response(self, record: HourlyRecord) -> HourlyForecastResponse:
        verdict = condition_evaluator.evaluate(
            record.wind_speed, record.wind_direction, record.wind_gust
        )
        return HourlyForecastResponse(
            **record.to_dict(),
            tide_trend=tide_trend(record.tide_status),
            conditions=verdict_response(verdict),
        )
