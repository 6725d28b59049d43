"""Tests for the sample and config models."""
import math

import pytest

from navigability.config import DEFAULT_TIMEZONE
from navigability.exceptions import ConfigurationError, InvalidSampleError
from navigability.models.navigability_config import NavigabilityConfig
from navigability.models.sample import HourlySample


class TestHourlySample:
    """Tests for HourlySample."""

    def test_direction_label_derived(self):
        """Test that the compass label is computed from the direction."""
        sample = HourlySample(hour=10, speed=20, gust=30, direction=180)
        assert sample.direction_label == "S"
        assert sample.sunshine_minutes == 0

    def test_explicit_label_kept(self):
        """Test that a supplied label is carried as is."""
        sample = HourlySample(hour=10, speed=20, gust=30, direction=270, direction_label="O")
        assert sample.direction_label == "O"

    def test_integral_float_hour_accepted(self):
        """Test that 7.0 is accepted as hour 7."""
        assert HourlySample(hour=7.0, speed=1, gust=2, direction=0).hour == 7

    @pytest.mark.parametrize("hour", [-1, 24, 7.5, "x", True, False])
    def test_invalid_hour(self, hour):
        """Test that hours outside 0..23 are rejected."""
        with pytest.raises(InvalidSampleError):
            HourlySample(hour=hour, speed=10, gust=20, direction=0)

    @pytest.mark.parametrize("field, value", [
        ("speed", -1),
        ("gust", -0.1),
        ("speed", math.inf),
        ("gust", math.nan),
        ("direction", math.nan),
        ("direction", math.inf),
        ("sunshine_minutes", -5),
    ])
    def test_invalid_values(self, field, value):
        """Test that negative or non-finite values are rejected."""
        kwargs = {"hour": 10, "speed": 10, "gust": 20, "direction": 90}
        kwargs[field] = value
        with pytest.raises(InvalidSampleError):
            HourlySample(**kwargs)

    @pytest.mark.parametrize("minutes, expected", [(59.9, 60), (12.5, 13), (12.4, 12), (30, 30)])
    def test_sunshine_minutes_rounded(self, minutes, expected):
        """Test that fractional sunshine rounds to the nearest minute."""
        sample = HourlySample(hour=10, speed=10, gust=20, direction=90, sunshine_minutes=minutes)
        assert sample.sunshine_minutes == expected

    def test_direction_outside_circle_accepted(self):
        """Test that any finite bearing is treated as an angle."""
        sample = HourlySample(hour=10, speed=10, gust=20, direction=360)
        assert sample.direction_label == "N"

    def test_from_dict_stored_keys(self):
        """Test parsing the stored hourly representation."""
        data = {"hour": 14, "speed": 18.4, "gust": 27.1, "dir": 225, "dirText": "SO", "sun": 42}

        sample = HourlySample.from_dict(data)

        assert sample.hour == 14
        assert sample.speed == 18.4
        assert sample.direction == 225
        assert sample.direction_label == "SO"
        assert sample.sunshine_minutes == 42
        assert sample.to_dict() == data

    def test_from_dict_missing_field(self):
        """Test that missing required values are rejected, not zeroed."""
        with pytest.raises(InvalidSampleError, match="gust"):
            HourlySample.from_dict({"hour": 10, "speed": 20, "dir": 90})

    def test_immutable(self):
        """Test that samples cannot be modified."""
        sample = HourlySample(hour=10, speed=20, gust=30, direction=180)
        with pytest.raises(AttributeError):
            sample.speed = 5


class TestNavigabilityConfig:
    """Tests for NavigabilityConfig."""

    def test_defaults(self):
        """Test the default thresholds and window."""
        config = NavigabilityConfig()
        assert config.wind_speed_min == 15
        assert config.gust_min == 25
        assert config.min_consecutive_hours == 2
        assert (config.day_start_hour, config.day_end_hour) == (7, 20)
        assert config.wind_speed_max is None
        assert config.timezone == DEFAULT_TIMEZONE

    @pytest.mark.parametrize("kwargs", [
        {"day_start_hour": 20, "day_end_hour": 7},
        {"day_start_hour": 10, "day_end_hour": 10},
        {"day_start_hour": -1},
        {"day_end_hour": 25},
        {"wind_speed_min": -1},
        {"gust_min": -5},
        {"gust_min": math.nan},
        {"min_consecutive_hours": 0},
        {"min_consecutive_hours": 1.5},
        {"wind_speed_min": 20, "wind_speed_max": 10},
        {"timezone": "Mars/Olympus_Mons"},
    ])
    def test_invalid_config(self, kwargs):
        """Test that invalid configs are rejected on construction."""
        with pytest.raises(ConfigurationError):
            NavigabilityConfig(**kwargs)

    def test_configuration_error_is_value_error(self):
        """Test that callers catching ValueError also catch config errors."""
        with pytest.raises(ValueError):
            NavigabilityConfig(min_consecutive_hours=0)

    def test_is_navigable(self):
        """Test the navigability predicate."""
        config = NavigabilityConfig(wind_speed_min=15, gust_min=25)
        assert config.is_navigable(15, 25)
        assert config.is_navigable(40, 60)
        assert not config.is_navigable(14.9, 30)
        assert not config.is_navigable(20, 24.9)

    def test_is_navigable_with_ceiling(self):
        """Test the optional speed ceiling."""
        config = NavigabilityConfig(wind_speed_min=15, gust_min=25, wind_speed_max=30)
        assert config.is_navigable(30, 40)
        assert not config.is_navigable(30.1, 40)

    def test_in_window(self):
        """Test the half-open day window."""
        config = NavigabilityConfig(day_start_hour=7, day_end_hour=20)
        assert config.in_window(7)
        assert config.in_window(19)
        assert not config.in_window(6)
        assert not config.in_window(20)

    def test_with_overrides(self):
        """Test that rider overrides replace only the minimums."""
        config = NavigabilityConfig(min_consecutive_hours=3, wind_speed_max=40)

        effective = config.with_overrides(wind_speed_min=12, gust_min=18)

        assert effective.wind_speed_min == 12
        assert effective.gust_min == 18
        assert effective.min_consecutive_hours == 3
        assert effective.wind_speed_max == 40
        assert config.wind_speed_min == 15

    def test_with_overrides_none_keeps_global(self):
        """Test that missing overrides keep the global values."""
        config = NavigabilityConfig()
        assert config.with_overrides() is config
        assert config.with_overrides(gust_min=20).wind_speed_min == 15

    def test_with_overrides_validated(self):
        """Test that overrides go through validation."""
        with pytest.raises(ConfigurationError):
            NavigabilityConfig().with_overrides(wind_speed_min=-3)

    def test_from_dict_document(self):
        """Test parsing a stored config document."""
        config = NavigabilityConfig.from_dict({
            "windSpeedMin": 12,
            "windSpeedMax": 35,
            "gustMin": 20,
            "minConsecutiveHours": 3,
            "dayStartHour": 8,
            "dayEndHour": 19,
            "timezone": "Europe/Zurich",
        })
        assert config.wind_speed_min == 12
        assert config.wind_speed_max == 35
        assert config.min_consecutive_hours == 3
        assert config.to_dict()["dayStartHour"] == 8

    def test_from_dict_unknown_key(self):
        """Test that typos in documents are reported."""
        with pytest.raises(ConfigurationError, match="windSpeedMn"):
            NavigabilityConfig.from_dict({"windSpeedMn": 12})

    def test_to_dict_omits_unset_ceiling(self):
        """Test that no windSpeedMax is written when unset."""
        assert "windSpeedMax" not in NavigabilityConfig().to_dict()
