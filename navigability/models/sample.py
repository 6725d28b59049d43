"""Hourly wind sample model."""
import math
import operator
from typing import Any, Mapping

from attrs import define, field, Factory

from navigability.exceptions import InvalidSampleError
from navigability.utils.compass_utils import deg_to_compass, round_half_up


def _as_hour(value: Any) -> int:
    # bool is an int subclass; True must not pass as hour 1
    if isinstance(value, bool):
        raise InvalidSampleError(f"hour must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidSampleError(f"hour must be an integer, got {value!r}") from None


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidSampleError(f"expected a number, got {value!r}") from None


def _as_minutes(value: Any) -> int:
    minutes = _as_float(value)
    if not math.isfinite(minutes):
        raise InvalidSampleError(f"sunshine_minutes must be finite, got {value!r}")
    return round_half_up(minutes)


def _check_hour(instance, attribute, value):
    if not 0 <= value <= 23:
        raise InvalidSampleError(f"hour must be in 0..23, got {value}")


def _check_non_negative(instance, attribute, value):
    if not math.isfinite(value) or value < 0:
        raise InvalidSampleError(f"{attribute.name} must be a finite number >= 0, got {value}")


def _check_finite(instance, attribute, value):
    if not math.isfinite(value):
        raise InvalidSampleError(f"{attribute.name} must be finite, got {value}")


def _default_label(sample: "HourlySample") -> str:
    # Non-finite directions are rejected by the validator right after
    if not math.isfinite(sample.direction):
        return ""
    return deg_to_compass(sample.direction)


@define(frozen=True)
class HourlySample:
    """One hour of observed or forecast wind at a spot.

    `hour` is the local hour of day; the day itself is tracked by the caller.
    Speeds are in km/h, `direction` is the wind-from bearing in degrees.
    """

    hour: int = field(converter=_as_hour, validator=_check_hour)
    speed: float = field(converter=_as_float, validator=_check_non_negative)
    gust: float = field(converter=_as_float, validator=_check_non_negative)
    direction: float = field(converter=_as_float, validator=_check_finite)
    direction_label: str = field(default=Factory(_default_label, takes_self=True))
    sunshine_minutes: int = field(default=0, converter=_as_minutes, validator=_check_non_negative)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HourlySample":
        """
        Create a sample from a mapping.

        Accepts both the stored forecast keys (`dir`, `dirText`, `sun`) and
        the attribute names. Hour, speed, gust and direction are required.
        """
        direction = data.get("direction", data.get("dir"))
        missing = [
            name for name, value in (
                ("hour", data.get("hour")),
                ("speed", data.get("speed")),
                ("gust", data.get("gust")),
                ("direction", direction),
            )
            if value is None
        ]
        if missing:
            raise InvalidSampleError(f"sample is missing {', '.join(missing)}: {dict(data)!r}")

        kwargs = {
            "hour": data["hour"],
            "speed": data["speed"],
            "gust": data["gust"],
            "direction": direction,
            "sunshine_minutes": data.get("sunshine_minutes", data.get("sun")) or 0,
        }
        label = data.get("direction_label", data.get("dirText"))
        if label:
            kwargs["direction_label"] = label
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Convert to the stored forecast representation."""
        return {
            "hour": self.hour,
            "speed": self.speed,
            "gust": self.gust,
            "dir": self.direction,
            "dirText": self.direction_label,
            "sun": self.sunshine_minutes,
        }
