"""Date helpers for selecting and labelling forecast days.

`today` is always passed in by the caller so results never depend on the
wall clock.
"""
from datetime import date
from typing import Iterable, List, Optional

from navigability.models.slot import DayForecast

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def day_offset(date_str: str, today: date) -> int:
    """Number of days from `today` to the given "YYYY-MM-DD" date."""
    return (date.fromisoformat(date_str) - today).days


def day_label(date_str: str, today: date) -> str:
    """Return "Today", "Tomorrow" or the weekday name of the date."""
    offset = day_offset(date_str, today)
    if offset == 0:
        return "Today"
    if offset == 1:
        return "Tomorrow"
    return WEEKDAY_NAMES[date.fromisoformat(date_str).weekday()]


def upcoming_days(days: Iterable[DayForecast], today: date) -> List[DayForecast]:
    """Keep the days that are today or later."""
    return [d for d in days if day_offset(d.date, today) >= 0]


def find_day(days: Iterable[DayForecast], today: date) -> Optional[DayForecast]:
    """Return the forecast for `today`, if present."""
    for d in days:
        if day_offset(d.date, today) == 0:
            return d
    return None
