"""Backend configuration."""
from typing import Optional
from pydantic_settings import BaseSettings

from navigability.config import (
    DEFAULT_DAY_END_HOUR,
    DEFAULT_DAY_START_HOUR,
    DEFAULT_GUST_MIN,
    DEFAULT_MIN_CONSECUTIVE_HOURS,
    DEFAULT_TIMEZONE,
    DEFAULT_WIND_SPEED_MIN,
)
from navigability.models.navigability_config import NavigabilityConfig


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    api_title: str = "Navigability API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Global navigability config, overridable per rider
    wind_speed_min: float = DEFAULT_WIND_SPEED_MIN
    wind_speed_max: Optional[float] = None
    gust_min: float = DEFAULT_GUST_MIN
    min_consecutive_hours: int = DEFAULT_MIN_CONSECUTIVE_HOURS
    day_start_hour: int = DEFAULT_DAY_START_HOUR
    day_end_hour: int = DEFAULT_DAY_END_HOUR
    timezone: str = DEFAULT_TIMEZONE

    class Config:
        env_prefix = "NAVIGABILITY_"

    def default_config(self) -> NavigabilityConfig:
        """Build the validated global navigability config."""
        return NavigabilityConfig(
            wind_speed_min=self.wind_speed_min,
            wind_speed_max=self.wind_speed_max,
            gust_min=self.gust_min,
            min_consecutive_hours=self.min_consecutive_hours,
            day_start_hour=self.day_start_hour,
            day_end_hour=self.day_end_hour,
            timezone=self.timezone,
        )


settings = Settings()
