"""Async client for the Withings health data API."""

from .client import WithingsClient
from .const import (
    DEFAULT_API_ENDPOINT,
    ActivityDataField,
    DeviceModel,
    DeviceType,
    MeasureCategory,
    MeasureType,
)
from .exceptions import (
    DecodeFailedError,
    InvalidArgumentError,
    MalformedURLError,
    RequestFailedError,
    WithingsError,
)
from .models import (
    Activity,
    Device,
    GetActivityBody,
    GetActivityResponse,
    GetDeviceBody,
    GetDeviceResponse,
    GetMeasBody,
    GetMeasResponse,
    Measure,
    MeasureGroup,
    WithingsResponse,
)

__all__ = [
    "DEFAULT_API_ENDPOINT",
    "Activity",
    "ActivityDataField",
    "DecodeFailedError",
    "Device",
    "DeviceModel",
    "DeviceType",
    "GetActivityBody",
    "GetActivityResponse",
    "GetDeviceBody",
    "GetDeviceResponse",
    "GetMeasBody",
    "GetMeasResponse",
    "InvalidArgumentError",
    "MalformedURLError",
    "Measure",
    "MeasureCategory",
    "MeasureGroup",
    "MeasureType",
    "RequestFailedError",
    "WithingsClient",
    "WithingsError",
    "WithingsResponse",
]
