"""Service for finding navigable slots in a day of hourly wind samples."""
import logging
from typing import Any, Iterable, List, Mapping, Union

from navigability.exceptions import InvalidSampleError
from navigability.models.navigability_config import NavigabilityConfig
from navigability.models.sample import HourlySample
from navigability.models.slot import NavigableSlot
from navigability.services.slot_builder import build_slot

logger = logging.getLogger(__name__)

SampleLike = Union[HourlySample, Mapping[str, Any]]


def parse_samples(hourly: Iterable[SampleLike]) -> List[HourlySample]:
    """
    Turn one day of input into validated samples.

    Mappings are parsed with HourlySample.from_dict. Hours must be strictly
    ascending: a duplicated or out-of-order hour rejects the whole day.

    Raises:
        InvalidSampleError: If a sample is invalid or out of order
    """
    samples = [
        s if isinstance(s, HourlySample) else HourlySample.from_dict(s)
        for s in hourly
    ]
    for previous, current in zip(samples, samples[1:]):
        if current.hour <= previous.hour:
            raise InvalidSampleError(
                f"hours must be strictly ascending, got {current.hour} after {previous.hour}"
            )
    return samples


class SlotCalculator:
    """Service for computing navigable slots from hourly samples.

    Scans the hours of the day window once, left to right. Consecutive
    navigable hours form a run; a run that lasts at least
    `min_consecutive_hours` becomes a NavigableSlot, shorter runs are dropped.

    A missing hour ends the current run, so a slot never spans a gap in the
    data and `slot.hours == slot.end - slot.start` always holds.
    """

    def __init__(self, config: NavigabilityConfig):
        """
        Initialize slot calculator.

        Args:
            config: Thresholds and day window. Already validated on construction.
        """
        self.config = config

    def calculate(self, hourly: Iterable[SampleLike]) -> List[NavigableSlot]:
        """
        Calculate navigable slots for one day.

        Args:
            hourly: The day's samples in ascending hour order

        Returns:
            Slots ordered by start hour, non-overlapping

        Raises:
            InvalidSampleError: If the samples are invalid or out of order
        """
        samples = parse_samples(hourly)

        slots: List[NavigableSlot] = []
        run: List[HourlySample] = []

        for sample in samples:
            # Hours outside the window neither extend nor break a run
            if not self.config.in_window(sample.hour):
                continue

            if not self.config.is_navigable(sample.speed, sample.gust):
                self._close_run(run, slots)
                run = []
                continue

            if run and sample.hour != run[-1].hour + 1:
                self._close_run(run, slots)
                run = []
            run.append(sample)

        # Run still open at the end of the window
        self._close_run(run, slots)
        return slots

    def _close_run(self, run: List[HourlySample], slots: List[NavigableSlot]) -> None:
        """Emit a slot for the run if it is long enough."""
        if not run:
            return
        if len(run) >= self.config.min_consecutive_hours:
            slots.append(build_slot(run[0].hour, run))
        else:
            logger.debug(
                "Dropping %d-hour run at %dh (minimum %d)",
                len(run), run[0].hour, self.config.min_consecutive_hours,
            )


def calculate_slots(
    hourly: Iterable[SampleLike],
    config: Union[NavigabilityConfig, Mapping[str, Any]],
) -> List[NavigableSlot]:
    """
    Calculate navigable slots for a day's hourly data using the given config.

    Only hours within [day_start_hour, day_end_hour) are considered.

    Raises:
        ConfigurationError: If config is a mapping describing an invalid config
        InvalidSampleError: If the samples are invalid or out of order
    """
    if not isinstance(config, NavigabilityConfig):
        config = NavigabilityConfig.from_dict(config)
    return SlotCalculator(config).calculate(hourly)
