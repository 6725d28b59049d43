"""Service for grouping raw hourly entries into local forecast days."""
import logging
from typing import Any, Iterable, List, Mapping

import pandas as pd

from navigability.config import RAW_TIMESTAMP_FORMAT, SPEED_DECIMALS
from navigability.exceptions import InvalidSampleError
from navigability.models.navigability_config import NavigabilityConfig
from navigability.models.sample import HourlySample
from navigability.models.slot import DayForecast
from navigability.services.slot_calculator import SlotCalculator
from navigability.utils.compass_utils import deg_to_compass, round_half_up

logger = logging.getLogger(__name__)

VALUE_COLUMNS = ["speed", "gust", "dir", "sun"]


class ForecastBuilder:
    """Service for building per-day forecasts for one spot.

    Raw entries are the merged upstream parameters for one point: a UTC
    timestamp ("YYYYMMDDHHmm") with speed, gust, direction and sunshine
    minutes. Missing values count as 0.
    """

    def __init__(self, config: NavigabilityConfig):
        """
        Initialize forecast builder.

        Args:
            config: Navigability config; its timezone defines the local day
        """
        self.config = config
        self.calculator = SlotCalculator(config)

    def _to_frame(self, entries: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
        """Load entries into a DataFrame with local date and hour columns."""
        df = pd.DataFrame(list(entries), columns=["timestamp"] + VALUE_COLUMNS)
        if df.empty:
            return df

        df[VALUE_COLUMNS] = df[VALUE_COLUMNS].apply(pd.to_numeric, errors="coerce").fillna(0.0)

        try:
            utc = pd.to_datetime(df["timestamp"].astype(str), format=RAW_TIMESTAMP_FORMAT, utc=True)
        except ValueError as e:
            raise InvalidSampleError(f"invalid entry timestamp: {e}") from e

        local = utc.dt.tz_convert(self.config.timezone)
        df["utc"] = utc
        df["date"] = local.dt.strftime("%Y-%m-%d")
        df["hour"] = local.dt.hour
        return df.sort_values("utc", kind="stable")

    def _to_samples(self, group: pd.DataFrame) -> List[HourlySample]:
        """Convert one day's rows to samples rounded for display."""
        scale = 10 ** SPEED_DECIMALS
        return [
            HourlySample(
                hour=int(row.hour),
                speed=round_half_up(row.speed * scale) / scale,
                gust=round_half_up(row.gust * scale) / scale,
                direction=round_half_up(row.dir),
                # Label from the unrounded bearing
                direction_label=deg_to_compass(row.dir),
                sunshine_minutes=round_half_up(row.sun),
            )
            for row in group.itertuples(index=False)
        ]

    def build_day(self, date: str, hourly: List[HourlySample]) -> DayForecast:
        """
        Build the forecast for one day from its samples.

        Args:
            date: Local date ("YYYY-MM-DD")
            hourly: The day's samples in ascending hour order

        Returns:
            DayForecast restricted to the day window, with slots and
            sunshine hours computed over that window
        """
        window = [s for s in hourly if self.config.in_window(s.hour)]
        sunshine_minutes = sum(s.sunshine_minutes for s in window)

        return DayForecast(
            date=date,
            sunshine=round_half_up(sunshine_minutes / 60 * 10) / 10,
            slots=self.calculator.calculate(window),
            hourly=window,
        )

    def build_days(self, entries: Iterable[Mapping[str, Any]]) -> List[DayForecast]:
        """
        Group raw entries by local calendar day and compute each day.

        On the autumn DST change a local hour occurs twice; the earlier
        (summer time) entry is kept.

        Args:
            entries: Raw entries with `timestamp` and optional speed/gust/dir/sun

        Returns:
            DayForecast per local date, in ascending date order
        """
        df = self._to_frame(entries)
        if df.empty:
            return []

        days = []
        for date, group in df.groupby("date", sort=True):
            group = group.drop_duplicates("hour", keep="first").sort_values("hour", kind="stable")
            days.append(self.build_day(str(date), self._to_samples(group)))

        logger.info(
            "Built %d days (%d navigable) from %d entries",
            len(days), sum(d.is_navigable for d in days), len(df),
        )
        return days
