"""Backend configuration."""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_core.config import HORIZON_DAYS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="FISHCAST_")

    # API settings
    api_title: str = "Fishcast API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Forecast generation
    horizon_days: int = Field(default=HORIZON_DAYS, ge=0)
    random_seed: Optional[int] = None  # None = entropy-seeded

    # Tip generation service
    location_name: str = "Porangahau Beach"
    tip_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    tip_model: str = "gemini-2.0-flash"
    tip_api_key: str = ""
    tip_timeout_seconds: Optional[float] = None  # None = no timeout


settings = Settings()
