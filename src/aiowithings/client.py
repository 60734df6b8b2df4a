"""Async client for the Withings API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import TYPE_CHECKING, TypeVar

import aiohttp
from multidict import MultiDict
from pydantic import ValidationError
from yarl import URL

from .const import (
    ACTION_GET_ACTIVITY,
    ACTION_GET_DEVICE,
    ACTION_GET_MEAS,
    DATE_FORMAT,
    DEFAULT_API_ENDPOINT,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    MEASURE_PATH,
    MEASURE_V2_PATH,
    USER_PATH,
    ActivityDataField,
    MeasureCategory,
    MeasureType,
)
from .exceptions import (
    DecodeFailedError,
    InvalidArgumentError,
    MalformedURLError,
    RequestFailedError,
)
from .models import (
    GetActivityResponse,
    GetDeviceResponse,
    GetMeasResponse,
    WithingsResponse,
)

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

_LOGGER = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=WithingsResponse)


def _unix(value: datetime) -> str:
    """Format a datetime as Unix seconds."""
    return str(int(value.timestamp()))


def _ymd(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def _join_data_fields(data_fields: Iterable[ActivityDataField | str]) -> str:
    """Validate activity data field selectors and join them for the query.

    A single string is one selector, not a sequence of characters.
    """
    if isinstance(data_fields, str):
        fields = [data_fields]
    else:
        fields = list(data_fields)
    if not fields:
        raise InvalidArgumentError("data_fields must contain at least one field")
    try:
        values = [ActivityDataField(field).value for field in fields]
    except ValueError as err:
        raise InvalidArgumentError(f"Unknown activity data field: {err}") from err
    if len(values) == 1:
        return values[0]
    return ",".join(values)


class WithingsClient:
    """Async Withings API client."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        endpoint: str = DEFAULT_API_ENDPOINT,
        access_token: str | None = None,
        request_timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize client.

        Args:
            session: aiohttp ClientSession, may already send an Authorization
                header. A session owned by the client is created if omitted.
            endpoint: Base URL of the Withings API
            access_token: OAuth2 access token sent as a bearer token
            request_timeout: Default timeout for a single request in seconds
        """
        self._session = session
        self._close_session = False
        self._endpoint = endpoint
        self._access_token = access_token
        self._request_timeout = request_timeout

    @property
    def endpoint(self) -> str:
        """Return the base URL requests are sent to."""
        return self._endpoint

    def _make_url(self, path: str) -> URL:
        """Join endpoint and path into an absolute URL."""
        try:
            url = URL(self._endpoint + path)
        except (TypeError, ValueError) as err:
            raise MalformedURLError(f"Invalid URL {self._endpoint}{path}: {err}") from err
        if not url.absolute or not url.host:
            raise MalformedURLError(f"URL {url} is not absolute")
        return url

    def _headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._close_session = True
        return self._session

    async def _get(
        self,
        path: str,
        params: MultiDict[str],
        response_type: type[ResponseT],
        timeout: float | None = None,
    ) -> ResponseT:
        """Send a GET request and decode the JSON envelope into response_type.

        The body is always read completely and the response released so the
        connection can be reused. HTTP status codes are not checked, the
        envelope status is left to the caller.
        """
        url = self._make_url(path)

        if timeout is None:
            timeout = self._request_timeout
        if timeout <= 0:
            raise RequestFailedError(f"Request to {url.path} timed out before it was sent")

        session = self._get_session()
        try:
            async with session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                raw = await response.read()
                _LOGGER.debug(
                    "GET %s (%s) returned %d", url.path, params.get("action"), response.status
                )
        except asyncio.TimeoutError as err:
            _LOGGER.debug("Request to %s timed out after %ss", url.path, timeout)
            raise RequestFailedError(f"Request to {url.path} timed out") from err
        except aiohttp.ClientError as err:
            _LOGGER.debug("Request to %s failed: %s", url.path, err)
            raise RequestFailedError(f"Request to {url.path} failed: {err}") from err

        try:
            result = response_type.model_validate_json(raw)
        except ValidationError as err:
            _LOGGER.debug("Invalid response from %s: %s", url.path, raw[:200])
            raise DecodeFailedError(
                f"Could not decode response from {url.path}: {err}"
            ) from err

        if not result.is_success:
            _LOGGER.debug(
                "API %s returned status %d: %s", url.path, result.status, result.error
            )
        return result

    # ========== User ==========

    async def get_devices(self, *, timeout: float | None = None) -> GetDeviceResponse:
        """Get the devices registered to the account."""
        params: MultiDict[str] = MultiDict(action=ACTION_GET_DEVICE)
        return await self._get(USER_PATH, params, GetDeviceResponse, timeout)

    # ========== Measure ==========

    async def get_measures(
        self,
        meastype: MeasureType,
        category: MeasureCategory,
        startdate: datetime,
        enddate: datetime,
        offset: int,
        lastupdate: datetime,
        *,
        timeout: float | None = None,
    ) -> GetMeasResponse:
        """Get measure groups.

        Results are paginated: when ``body.more`` is set, call again with
        ``body.offset``.

        Args:
            meastype: Type of measures to return
            category: Real measures or user objectives
            startdate: Start of the time window
            enddate: End of the time window
            offset: Pagination offset from a previous response
            lastupdate: Only return groups updated since this time
            timeout: Timeout in seconds, overrides request_timeout
        """
        params: MultiDict[str] = MultiDict()
        params.add("action", ACTION_GET_MEAS)
        params.add("meastype", str(int(meastype)))
        params.add("category", str(int(category)))
        params.add("startdate", _unix(startdate))
        params.add("enddate", _unix(enddate))
        params.add("offset", str(offset))
        params.add("lastupdate", _unix(lastupdate))
        return await self._get(MEASURE_PATH, params, GetMeasResponse, timeout)

    async def get_activity(
        self,
        startdate: date,
        enddate: date,
        offset: int,
        data_fields: Iterable[ActivityDataField | str],
        lastupdate: datetime,
        *,
        timeout: float | None = None,
    ) -> GetActivityResponse:
        """Get daily activity aggregates.

        Args:
            startdate: First day of the range
            enddate: Last day of the range
            offset: Pagination offset from a previous response
            data_fields: Aggregates to return, at least one
            lastupdate: Only return days updated since this time
            timeout: Timeout in seconds, overrides request_timeout
        """
        fields = _join_data_fields(data_fields)

        params: MultiDict[str] = MultiDict()
        params.add("action", ACTION_GET_ACTIVITY)
        params.add("startdateymd", _ymd(startdate))
        params.add("enddateymd", _ymd(enddate))
        params.add("offset", str(offset))
        params.add("data_fields", fields)
        params.add("lastupdate", _unix(lastupdate))
        return await self._get(MEASURE_V2_PATH, params, GetActivityResponse, timeout)

    # ========== Lifecycle ==========

    async def close(self) -> None:
        """Close the session if it was created by the client."""
        if self._session is not None and self._close_session:
            await self._session.close()
            self._session = None
            self._close_session = False

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
