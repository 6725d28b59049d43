"""Configuration constants for the navigability engine."""

# Default navigability thresholds (km/h)
DEFAULT_WIND_SPEED_MIN = 15.0
DEFAULT_GUST_MIN = 25.0
DEFAULT_MIN_CONSECUTIVE_HOURS = 2

# Day window: hours in [start, end) are considered
DEFAULT_DAY_START_HOUR = 7
DEFAULT_DAY_END_HOUR = 20

# Local timezone of the forecast points
DEFAULT_TIMEZONE = "Europe/Zurich"

# Compass: 16 sectors of 22.5 degrees centered on N, NNE, ...
COMPASS_SECTOR_DEGREES = 22.5
COMPASS_SECTORS = 16

# Upstream timestamps are UTC "YYYYMMDDHHmm"
RAW_TIMESTAMP_FORMAT = "%Y%m%d%H%M"

# Rounding applied to upstream values when grouping into days
SPEED_DECIMALS = 1

# Summaries list at most this many spots
MAX_SUMMARY_SPOTS = 4
