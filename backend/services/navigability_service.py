"""Service for navigability calculations and slot summaries."""
import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from navigability.config import MAX_SUMMARY_SPOTS
from navigability.models.navigability_config import NavigabilityConfig
from navigability.models.slot import NavigableSlot
from navigability.services.forecast_builder import ForecastBuilder
from navigability.services.slot_calculator import calculate_slots
from navigability.utils.date_utils import find_day, upcoming_days

from backend.config import settings

logger = logging.getLogger(__name__)


def format_slot(slot: NavigableSlot) -> str:
    """Format a slot as e.g. "20-30 km/h S (10h-14h)"."""
    return f"{slot.avg_speed}-{slot.avg_gust} km/h {slot.direction} ({slot.start}h-{slot.end}h)"


def format_spot_line(name: str, slots: Sequence[NavigableSlot]) -> str:
    """Format all slots of a spot on one line."""
    return f"{name}: {' / '.join(format_slot(s) for s in slots)}"


def build_summary(
    navigable_spots: Sequence[Tuple[str, Sequence[NavigableSlot]]],
    max_spots: int = MAX_SUMMARY_SPOTS,
) -> Optional[str]:
    """
    Summarize navigable spots, one line per spot.

    Lists at most `max_spots` spots and counts the rest.

    Returns:
        The summary text, or None if no spot is navigable
    """
    if not navigable_spots:
        return None

    lines = [format_spot_line(name, slots) for name, slots in navigable_spots[:max_spots]]
    remaining = len(navigable_spots) - max_spots
    if remaining > 0:
        lines.append(f"... and {remaining} more")
    return "\n".join(lines)


class NavigabilityService:
    """Service for navigability operations."""

    def __init__(self, default_config: NavigabilityConfig = None):
        """Initialize service with the global navigability config."""
        self.default_config = default_config or settings.default_config()

    def effective_config(
        self,
        config: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> NavigabilityConfig:
        """
        Resolve the config for a request.

        An explicit config replaces the global one; rider overrides then
        replace its speed and gust minimums.
        """
        base = NavigabilityConfig.from_dict(config) if config else self.default_config
        if not overrides:
            return base
        return base.with_overrides(
            wind_speed_min=overrides.get("windSpeedMin"),
            gust_min=overrides.get("gustMin"),
        )

    def get_slots(
        self,
        hourly: List[Mapping[str, Any]],
        config: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Calculate the navigable slots of one day."""
        slots = calculate_slots(hourly, self.effective_config(config, overrides))
        return {
            "isNavigable": bool(slots),
            "slots": [s.to_dict() for s in slots],
        }

    def get_forecasts(
        self,
        spots: List[Mapping[str, Any]],
        overrides: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Build day forecasts for each spot.

        When `today` is given, past days are dropped and the summary lists
        the spots navigable today.
        """
        builder = ForecastBuilder(self.effective_config(overrides=overrides))

        results = []
        navigable_today = []
        for spot in spots:
            days = builder.build_days(spot["entries"])
            if today is not None:
                days = upcoming_days(days, today)
                today_forecast = find_day(days, today)
                if today_forecast is not None and today_forecast.is_navigable:
                    navigable_today.append((spot["name"], today_forecast.slots))
            results.append({
                "name": spot["name"],
                "days": [d.to_dict() for d in days],
            })

        logger.info(
            "Built forecasts for %d spots, %d navigable today",
            len(results), len(navigable_today),
        )
        return {
            "spots": results,
            "summary": build_summary(navigable_today),
        }
