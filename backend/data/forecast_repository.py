"""Repository holding the session's generated forecast set."""
from typing import Dict, List, Optional

from forecast_core.models.forecast import DailyForecast


class ForecastRepository:
    """In-memory holder for the current forecast set.

    The set is only ever replaced as a whole; individual days are never
    patched.
    """

    def __init__(self):
        self._forecasts: List[DailyForecast] = []
        self._by_date: Dict[str, DailyForecast] = {}
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def replace_all(self, forecasts: List[DailyForecast]) -> None:
        """Swap in a freshly generated forecast set."""
        forecasts = list(forecasts)
        self._forecasts = forecasts
        self._by_date = {f.date_key: f for f in forecasts}
        self._loaded = True

    def get_all(self) -> List[DailyForecast]:
        return list(self._forecasts)

    def get_by_date(self, date_key: str) -> Optional[DailyForecast]:
        """Get a day by ISO date ("YYYY-MM-DD")."""
        return self._by_date.get(date_key)
