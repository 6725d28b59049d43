"""Errors raised by the navigability engine."""


class NavigabilityError(Exception):
    """Base class for navigability engine errors."""


class ConfigurationError(NavigabilityError, ValueError):
    """Invalid navigability configuration (window, thresholds, run length)."""


class InvalidSampleError(NavigabilityError, ValueError):
    """Invalid hourly sample, or samples not in strictly ascending hour order."""
