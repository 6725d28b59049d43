"""Navigable slot and daily forecast models."""
from attrs import define, field
from typing import List

from navigability.models.sample import HourlySample


@define(frozen=True)
class NavigableSlot:
    """A run of consecutive navigable hours, aggregated.

    `end` is exclusive, so the slot covers hours [start, end).
    """

    start: int
    end: int
    hours: int
    avg_speed: int  # km/h, rounded mean
    avg_gust: int  # km/h, rounded mean
    direction: str  # compass label of the mean direction

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "start": self.start,
            "end": self.end,
            "hours": self.hours,
            "avgSpeed": self.avg_speed,
            "avgGust": self.avg_gust,
            "direction": self.direction,
        }


@define
class DayForecast:
    """One local calendar day of hourly samples with its navigable slots."""

    date: str  # "YYYY-MM-DD"
    sunshine: float  # hours of sunshine within the day window
    slots: List[NavigableSlot] = field(factory=list)
    hourly: List[HourlySample] = field(factory=list)

    @property
    def is_navigable(self) -> bool:
        """Check if the day has at least one navigable slot."""
        return len(self.slots) > 0

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "date": self.date,
            "sunshine": self.sunshine,
            "isNavigable": self.is_navigable,
            "slots": [slot.to_dict() for slot in self.slots],
            "hourly": [sample.to_dict() for sample in self.hourly],
        }
