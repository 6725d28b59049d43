"""Pydantic schemas for navigability requests and responses."""
from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from navigability.config import DEFAULT_TIMEZONE


class CamelModel(BaseModel):
    """Base schema accepting and emitting the camelCase document keys."""

    model_config = ConfigDict(populate_by_name=True)


class HourlySampleSchema(CamelModel):
    """One hour of wind data."""

    hour: int
    speed: float
    gust: float
    dir: float
    dir_text: Optional[str] = Field(default=None, alias="dirText")
    sun: int = 0


class NavigabilityConfigSchema(CamelModel):
    """Navigability thresholds and day window."""

    wind_speed_min: float = Field(alias="windSpeedMin")
    wind_speed_max: Optional[float] = Field(default=None, alias="windSpeedMax")
    gust_min: float = Field(alias="gustMin")
    min_consecutive_hours: int = Field(alias="minConsecutiveHours")
    day_start_hour: int = Field(alias="dayStartHour")
    day_end_hour: int = Field(alias="dayEndHour")
    timezone: str = DEFAULT_TIMEZONE


class RiderOverrides(CamelModel):
    """Per-rider threshold overrides of the global config."""

    wind_speed_min: Optional[float] = Field(default=None, alias="windSpeedMin")
    gust_min: Optional[float] = Field(default=None, alias="gustMin")


class NavigableSlotSchema(CamelModel):
    """An aggregated navigable slot, hours [start, end)."""

    start: int
    end: int
    hours: int
    avg_speed: int = Field(alias="avgSpeed")
    avg_gust: int = Field(alias="avgGust")
    direction: str


class SlotsRequest(CamelModel):
    """Request body for slot calculation over one day."""

    hourly: List[HourlySampleSchema]
    config: Optional[NavigabilityConfigSchema] = None
    overrides: Optional[RiderOverrides] = None


class SlotsResponse(CamelModel):
    """Slots found in one day."""

    is_navigable: bool = Field(alias="isNavigable")
    slots: List[NavigableSlotSchema]


class RawEntrySchema(BaseModel):
    """Merged upstream values for one UTC timestamp ("YYYYMMDDHHmm")."""

    timestamp: str = Field(pattern=r"^\d{12}$")
    speed: Optional[float] = None
    gust: Optional[float] = None
    dir: Optional[float] = None
    sun: Optional[float] = None


class SpotEntries(BaseModel):
    """Raw entries for one spot."""

    name: str
    entries: List[RawEntrySchema]


class ForecastRequest(CamelModel):
    """Request body for building day forecasts for several spots."""

    spots: List[SpotEntries]
    overrides: Optional[RiderOverrides] = None
    today: Optional[date] = None


class DayForecastSchema(CamelModel):
    """One local day of a spot forecast."""

    date: str
    sunshine: float
    is_navigable: bool = Field(alias="isNavigable")
    slots: List[NavigableSlotSchema]
    hourly: List[HourlySampleSchema]


class SpotForecastSchema(BaseModel):
    """Forecast days for one spot."""

    name: str
    days: List[DayForecastSchema]


class ForecastResponse(BaseModel):
    """Forecasts for all requested spots, plus today's summary."""

    spots: List[SpotForecastSchema]
    summary: Optional[str] = None
