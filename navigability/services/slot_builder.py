"""Aggregate a run of navigable hours into a slot."""
from typing import Sequence

import numpy as np

from navigability.models.sample import HourlySample
from navigability.models.slot import NavigableSlot
from navigability.utils.compass_utils import average_direction, deg_to_compass, round_half_up


def build_slot(start_hour: int, run_samples: Sequence[HourlySample]) -> NavigableSlot:
    """
    Build a NavigableSlot from a consecutive run of navigable hours.

    Args:
        start_hour: Hour of the first sample in the run
        run_samples: The run, in hour order. The caller has already checked
            it meets the minimum duration.

    Returns:
        Slot with rounded mean speed and gust and the label of the
        circular-mean direction
    """
    if not run_samples:
        raise ValueError("build_slot() requires a non-empty run")

    speeds = np.array([s.speed for s in run_samples], dtype=np.float64)
    gusts = np.array([s.gust for s in run_samples], dtype=np.float64)
    mean_direction = average_direction([s.direction for s in run_samples])

    return NavigableSlot(
        start=start_hour,
        end=run_samples[-1].hour + 1,
        hours=len(run_samples),
        avg_speed=round_half_up(float(speeds.mean())),
        avg_gust=round_half_up(float(gusts.mean())),
        direction=deg_to_compass(mean_direction),
    )
