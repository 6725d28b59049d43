"""Navigability thresholds and day window."""
import math
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from attrs import define, evolve, field

from navigability.config import (
    DEFAULT_DAY_END_HOUR,
    DEFAULT_DAY_START_HOUR,
    DEFAULT_GUST_MIN,
    DEFAULT_MIN_CONSECUTIVE_HOURS,
    DEFAULT_TIMEZONE,
    DEFAULT_WIND_SPEED_MIN,
)
from navigability.exceptions import ConfigurationError

# camelCase keys of the stored config document -> attribute names
_DOCUMENT_KEYS = {
    "windSpeedMin": "wind_speed_min",
    "windSpeedMax": "wind_speed_max",
    "gustMin": "gust_min",
    "minConsecutiveHours": "min_consecutive_hours",
    "dayStartHour": "day_start_hour",
    "dayEndHour": "day_end_hour",
    "timezone": "timezone",
}


def _check_threshold(instance, attribute, value):
    if value is None and attribute.name == "wind_speed_max":
        return
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{attribute.name} must be a finite number >= 0, got {value!r}")


def _check_window_hour(instance, attribute, value):
    if not isinstance(value, int) or not 0 <= value <= 24:
        raise ConfigurationError(f"{attribute.name} must be an integer in 0..24, got {value!r}")


@define(frozen=True)
class NavigabilityConfig:
    """Rider thresholds deciding which hours are navigable.

    An hour is navigable when its speed is at least `wind_speed_min`, its gust
    at least `gust_min` and, when `wind_speed_max` is set, its speed at most
    `wind_speed_max`. Only hours in [day_start_hour, day_end_hour) count.
    """

    wind_speed_min: float = field(default=DEFAULT_WIND_SPEED_MIN, validator=_check_threshold)
    gust_min: float = field(default=DEFAULT_GUST_MIN, validator=_check_threshold)
    min_consecutive_hours: int = field(default=DEFAULT_MIN_CONSECUTIVE_HOURS)
    day_start_hour: int = field(default=DEFAULT_DAY_START_HOUR, validator=_check_window_hour)
    day_end_hour: int = field(default=DEFAULT_DAY_END_HOUR, validator=_check_window_hour)
    wind_speed_max: Optional[float] = field(default=None, validator=_check_threshold)
    timezone: str = field(default=DEFAULT_TIMEZONE)

    @min_consecutive_hours.validator
    def _check_min_consecutive_hours(self, attribute, value):
        if not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"min_consecutive_hours must be an integer >= 1, got {value!r}")

    @timezone.validator
    def _check_timezone(self, attribute, value):
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            raise ConfigurationError(f"unknown timezone: {value!r}") from None

    def __attrs_post_init__(self):
        if self.day_end_hour <= self.day_start_hour:
            raise ConfigurationError(
                f"day window is empty: day_end_hour ({self.day_end_hour}) "
                f"must be greater than day_start_hour ({self.day_start_hour})"
            )
        if self.wind_speed_max is not None and self.wind_speed_max < self.wind_speed_min:
            raise ConfigurationError(
                f"wind_speed_max ({self.wind_speed_max}) is below "
                f"wind_speed_min ({self.wind_speed_min})"
            )

    def is_navigable(self, speed: float, gust: float) -> bool:
        """Check whether an hour with this speed and gust is navigable."""
        if speed < self.wind_speed_min or gust < self.gust_min:
            return False
        return self.wind_speed_max is None or speed <= self.wind_speed_max

    def in_window(self, hour: int) -> bool:
        """Check whether an hour lies inside the day window."""
        return self.day_start_hour <= hour < self.day_end_hour

    def with_overrides(
        self,
        wind_speed_min: Optional[float] = None,
        gust_min: Optional[float] = None,
    ) -> "NavigabilityConfig":
        """
        Build the effective config for a rider.

        Riders may only override the speed and gust minimums; everything else
        comes from the global config. None keeps the global value.
        """
        changes = {}
        if wind_speed_min is not None:
            changes["wind_speed_min"] = wind_speed_min
        if gust_min is not None:
            changes["gust_min"] = gust_min
        return evolve(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NavigabilityConfig":
        """Create a config from a stored document (camelCase or attribute keys)."""
        kwargs = {}
        for key, value in data.items():
            name = _DOCUMENT_KEYS.get(key, key)
            if name not in _DOCUMENT_KEYS.values():
                raise ConfigurationError(f"unknown navigability setting: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Convert to the stored document representation."""
        return {
            key: getattr(self, name)
            for key, name in _DOCUMENT_KEYS.items()
            if not (name == "wind_speed_max" and self.wind_speed_max is None)
        }
