"""Exceptions for aiowithings."""

from __future__ import annotations


class WithingsError(Exception):
    """Base exception for aiowithings."""


class MalformedURLError(WithingsError):
    """Endpoint and path do not form a valid absolute URL."""


class RequestFailedError(WithingsError):
    """The request could not be sent or no response was received.

    Raised for connection errors, timeouts and an exhausted timeout budget.
    HTTP status codes are not treated as failures.
    """


class DecodeFailedError(WithingsError):
    """Response body is not JSON or does not match the expected shape."""


class InvalidArgumentError(WithingsError, ValueError):
    """Invalid input, detected before any request is made."""
