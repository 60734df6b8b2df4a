"""Pydantic models for Withings API responses."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .const import DeviceModel, DeviceType, MeasureCategory, MeasureType


class WithingsModel(BaseModel):
    """Base model that ignores unknown fields and is immutable."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


BodyT = TypeVar("BodyT", bound=WithingsModel)


class WithingsResponse(WithingsModel, Generic[BodyT]):
    """Envelope shared by every endpoint.

    A non-zero status is passed through as is, callers inspect it themselves.
    Withings usually omits the body and sends an error message instead.
    """

    status: int
    body: BodyT | None = None
    error: str | None = None

    @property
    def is_success(self) -> bool:
        """Return True if the API reported success."""
        return self.status == 0


def _epoch_to_datetime(value: Any) -> Any:
    """Convert Unix seconds from the wire into an aware UTC datetime.

    Only integers are accepted, floats and strings are rejected.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Unix timestamp must be an integer, got {value!r}")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError) as err:
        raise ValueError(f"Unix timestamp {value} is out of range") from err


def _to_code_enum(enum_cls: type[MeasureType | MeasureCategory], value: Any) -> Any:
    """Look up an integer code, unknown codes resolve to UNKNOWN."""
    if isinstance(value, int) and not isinstance(value, bool):
        return enum_cls(value)
    return value


# ========== User ==========


class Device(WithingsModel):
    """Device registered to the account."""

    type: DeviceType | str = Field(union_mode="left_to_right")
    model: DeviceModel | str = Field(union_mode="left_to_right")
    battery: str | None = None
    device_id: str = Field(alias="deviceid")
    timezone: str | None = None


class GetDeviceBody(WithingsModel):
    """Body of the getdevice action."""

    devices: tuple[Device, ...] = ()


class GetDeviceResponse(WithingsResponse[GetDeviceBody]):
    """Response of the getdevice action."""


# ========== Measure ==========


class Measure(WithingsModel):
    """Single measure.

    The real value is ``value * 10 ** unit``.
    """

    value: int
    type: MeasureType = MeasureType.UNKNOWN
    unit: int = 0
    # Deprecated by Withings, kept for wire compatibility
    algo: int | None = None
    fm: int | None = None
    fw: int | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _validate_type(cls, value: Any) -> Any:
        return _to_code_enum(MeasureType, value)

    @property
    def real_value(self) -> float:
        """Return the value scaled by its unit exponent."""
        return self.value * 10**self.unit


class MeasureGroup(WithingsModel):
    """Measures taken together, e.g. one weigh-in."""

    group_id: int = Field(alias="grpid")
    attribute: int = Field(alias="attrib")
    date: datetime
    created: datetime
    category: MeasureCategory = MeasureCategory.UNKNOWN
    device_id: str | None = Field(default=None, alias="deviceid")
    measures: tuple[Measure, ...] = ()
    comment: str | None = None  # deprecated

    @field_validator("date", "created", mode="before")
    @classmethod
    def _validate_timestamp(cls, value: Any) -> Any:
        return _epoch_to_datetime(value)

    @field_validator("category", mode="before")
    @classmethod
    def _validate_category(cls, value: Any) -> Any:
        return _to_code_enum(MeasureCategory, value)


class GetMeasBody(WithingsModel):
    """Body of the getmeas action."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    update_time: str | None = Field(default=None, alias="updatetime")
    timezone: str | None = None
    measure_groups: tuple[MeasureGroup, ...] = Field(default=(), alias="measuregrps")
    more: bool = False
    offset: int = 0


class GetMeasResponse(WithingsResponse[GetMeasBody]):
    """Response of the getmeas action."""


# ========== Activity ==========


class Activity(WithingsModel):
    """Daily activity aggregates.

    Aggregates not requested through ``data_fields`` are None.
    """

    date: str
    timezone: str | None = None
    device_id: str | None = Field(default=None, alias="deviceid")
    brand: int | None = None
    is_tracker: bool | None = None
    steps: int | None = None
    distance: float | None = None
    elevation: float | None = None
    soft: int | None = None
    moderate: int | None = None
    intense: int | None = None
    active: int | None = None
    calories: float | None = None
    total_calories: float | None = Field(default=None, alias="totalcalories")
    hr_average: int | None = None
    hr_min: int | None = None
    hr_max: int | None = None
    hr_zone_0: int | None = None
    hr_zone_1: int | None = None
    hr_zone_2: int | None = None
    hr_zone_3: int | None = None


class GetActivityBody(WithingsModel):
    """Body of the getactivity action."""

    activities: tuple[Activity, ...] = ()
    more: bool = False
    offset: int = 0


class GetActivityResponse(WithingsResponse[GetActivityBody]):
    """Response of the getactivity action."""
