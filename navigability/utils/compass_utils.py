"""Compass and wind direction helpers."""
import math
from typing import Sequence

import numpy as np

from navigability.config import COMPASS_SECTOR_DEGREES, COMPASS_SECTORS

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# Labels as displayed to French-speaking riders (O = ouest)
FRENCH_COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSO", "SO", "OSO", "O", "ONO", "NO", "NNO",
]

# Vector sums shorter than this are treated as (0, 0)
_CANCELLED_VECTOR_EPSILON = 1e-9


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up.

    Python's round() uses banker's rounding (round(20.5) == 20); averages
    shown to riders round .5 upwards instead.
    """
    return int(math.floor(value + 0.5))


def deg_to_compass(deg: float, points: Sequence[str] = COMPASS_POINTS) -> str:
    """
    Convert a bearing in degrees to a 16-point compass label.

    Args:
        deg: Bearing in degrees. Values outside [0, 360) wrap around.
        points: The 16 labels, starting at north and going clockwise

    Returns:
        Label of the 22.5 degree sector centered closest to the bearing
    """
    index = round_half_up(deg / COMPASS_SECTOR_DEGREES) % COMPASS_SECTORS
    return points[index]


def average_direction(directions: Sequence[float]) -> int:
    """
    Average wind directions with a circular (vector) mean.

    An arithmetic mean breaks at the 0/360 boundary: 350 and 10 average to
    180 instead of 0. Summing unit vectors does not.

    Args:
        directions: Bearings in degrees (any finite value)

    Returns:
        Mean bearing rounded to the nearest degree, in [0, 360).
        Directions that cancel out (e.g. 90 and 270) give 0. A plain
        atan2 on the float sums would instead follow rounding noise, giving
        180 for [90, 270] and 90 for [0, 180].
    """
    radians = np.radians(np.asarray(directions, dtype=np.float64))
    if radians.size == 0:
        raise ValueError("average_direction() requires at least one direction")

    sin_sum = float(np.sin(radians).sum())
    cos_sum = float(np.cos(radians).sum())
    if math.hypot(sin_sum, cos_sum) < _CANCELLED_VECTOR_EPSILON * radians.size:
        return 0

    avg = math.degrees(math.atan2(sin_sum, cos_sum))
    if avg < 0:
        avg += 360
    # 359.6 rounds to 360, which is north again
    return round_half_up(avg) % 360
