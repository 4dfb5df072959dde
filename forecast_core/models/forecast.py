"""Forecast data structures for daily and three-hourly records."""
from datetime import date
from typing import List

from attrs import define, field


@define(frozen=True)
class HourlyRecord:
    """A single three-hourly slice of a day's forecast."""

    time: str  # "HH:00"
    temperature: int  # degrees C
    description: str  # inherited from the parent day
    wind_speed: int  # km/h, clamped at 0
    wind_gust: int  # km/h, clamped at 0
    wind_direction: str
    tide_height: float  # meters, 2 decimals
    tide_status: str

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "time": self.time,
            "temperature": self.temperature,
            "description": self.description,
            "wind_speed": self.wind_speed,
            "wind_gust": self.wind_gust,
            "wind_direction": self.wind_direction,
            "tide_height": self.tide_height,
            "tide_status": self.tide_status,
        }


@define(frozen=True)
class TideWindow:
    """Coarse daily high/low tide time labels.

    Not derived from the hourly tide curve, so the two can disagree.
    """

    high: List[str] = field(factory=list)
    low: List[str] = field(factory=list)

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {"high": list(self.high), "low": list(self.low)}


@define(frozen=True)
class DailyForecast:
    """One day of the synthetic forecast with its hourly breakdown."""

    date: date
    wind_speed: int
    wind_gust: int
    wind_direction: str
    description: str
    temp: int
    humidity: int
    ideal_fishing_time: str
    tide_times: TideWindow
    hourly_forecast: List[HourlyRecord] = field(factory=list)

    @property
    def date_key(self) -> str:
        """ISO 8601 date string ("YYYY-MM-DD")."""
        return self.date.isoformat()

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "date": self.date_key,
            "wind_speed": self.wind_speed,
            "wind_gust": self.wind_gust,
            "wind_direction": self.wind_direction,
            "description": self.description,
            "temp": self.temp,
            "humidity": self.humidity,
            "ideal_fishing_time": self.ideal_fishing_time,
            "tide_times": self.tide_times.to_dict(),
            "hourly_forecast": [r.to_dict() for r in self.hourly_forecast],
        }
