"""Exceptions raised by the connpass client.

Every error derives from :class:`ConnpassError` so callers have a single
catch point. Validation errors are raised before any network call is made;
HTTP response errors carry the status code of the offending response; and
transport errors wrap the underlying ``httpx`` failure.
"""

from __future__ import annotations

import http

_API_REFERENCE_URL = "https://connpass.com/about/api/"


class ConnpassError(Exception):
    """Base exception for all connpass client errors."""


class ValidationError(ConnpassError):
    """Raised when a query value fails validation.

    Attributes
    ----------
    message
        Human-readable description of the rejected value.

    """

    def __init__(self, message: str) -> None:
        """Initialise the error with a human-readable message."""
        self.message = message
        super().__init__(message)


class OutOfRangeError(ValidationError):
    """Raised when a numeric value falls outside its permitted range."""

    @classmethod
    def invalid_count(
        cls, value: int, minimum: int, maximum: int
    ) -> OutOfRangeError:
        """Create error for a ``count`` outside the fetch range."""
        return cls(
            f"`count` should be greater than or equal to {minimum} and less than "
            f"or equal to {maximum}, got {value}. "
            f"See more details: {_API_REFERENCE_URL}"
        )

    @classmethod
    def invalid_unsigned(
        cls, name: str, value: object, maximum: int
    ) -> OutOfRangeError:
        """Create error for a value that does not fit an unsigned integer."""
        return cls(
            f"`{name}` should be an integer between 0 and {maximum}, "
            f"got {value!r}. "
            f"See more details: {_API_REFERENCE_URL}"
        )


class InvalidTokenError(ValidationError):
    """Raised when a value is not one of the accepted tokens."""

    @classmethod
    def invalid_format(cls, value: str) -> InvalidTokenError:
        """Create error for a ``format`` other than ``"json"``."""
        return cls(
            f'`format` can only accept the string "json", got {value!r}. '
            f"See more details: {_API_REFERENCE_URL}"
        )

    @classmethod
    def invalid_order(cls, value: object) -> InvalidTokenError:
        """Create error for an unknown ``order`` code."""
        return cls(f"Invalid order code: {value!r}. Expected one of 1, 2 or 3.")


class HttpResponseError(ConnpassError):
    """Raised when the API answers with a response that cannot be used.

    Attributes
    ----------
    status_code
        HTTP status code of the response.

    """

    def __init__(self, message: str, *, status_code: int) -> None:
        """Initialise the error with message and status code."""
        self.status_code = status_code
        super().__init__(message)


class ForbiddenError(HttpResponseError):
    """Raised for HTTP 403 responses."""

    @classmethod
    def from_status(cls) -> ForbiddenError:
        """Create error for a 403 response."""
        status = http.HTTPStatus.FORBIDDEN
        return cls(status.phrase, status_code=status.value)


class InternalServerError(HttpResponseError):
    """Raised for HTTP 500 responses."""

    @classmethod
    def from_status(cls) -> InternalServerError:
        """Create error for a 500 response."""
        status = http.HTTPStatus.INTERNAL_SERVER_ERROR
        return cls(status.phrase, status_code=status.value)


class ServiceUnavailableError(HttpResponseError):
    """Raised for HTTP 503 responses."""

    @classmethod
    def from_status(cls) -> ServiceUnavailableError:
        """Create error for a 503 response."""
        status = http.HTTPStatus.SERVICE_UNAVAILABLE
        return cls(status.phrase, status_code=status.value)


class UnexpectedStatusError(HttpResponseError):
    """Raised for any status code without a dedicated error type."""

    @classmethod
    def from_status(cls, status_code: int) -> UnexpectedStatusError:
        """Create error carrying the literal status for diagnostics."""
        return cls(
            f"Unexpected response received: {status_code} (status code)",
            status_code=status_code,
        )


class JsonDecodeError(HttpResponseError):
    """Raised when a successful response body cannot be decoded.

    Attributes
    ----------
    detail
        Message reported by the JSON decoder.

    """

    def __init__(self, message: str, *, status_code: int, detail: str) -> None:
        """Initialise the error with the decoder message."""
        self.detail = detail
        super().__init__(message, status_code=status_code)

    @classmethod
    def from_decoder(cls, detail: str, *, status_code: int = 200) -> JsonDecodeError:
        """Create error wrapping a decoder failure message."""
        return cls(
            f"Failed to decode connpass response: {detail}",
            status_code=status_code,
            detail=detail,
        )


class TransportError(ConnpassError):
    """Raised when the request never produced an HTTP response.

    Covers refused connections, timeouts, DNS and TLS failures.

    Attributes
    ----------
    cause
        The underlying transport exception.

    """

    def __init__(self, message: str, *, cause: BaseException) -> None:
        """Initialise the error with the transport failure."""
        self.cause = cause
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> TransportError:
        """Create error wrapping a transport exception."""
        detail = str(exc) or type(exc).__name__
        return cls(f"connpass API transport error: {detail}", cause=exc)


class ConnpassConfigError(ConnpassError):
    """Raised when client configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, value: str) -> ConnpassConfigError:
        """Create error for a timeout that is not a positive number."""
        return cls(f"Invalid CONNPASS_TIMEOUT_S '{value}'. Must be a positive number")

    @classmethod
    def empty_value(cls, name: str) -> ConnpassConfigError:
        """Create error for a blank configuration value."""
        return cls(f"{name} must be non-empty")


__all__ = [
    "ConnpassConfigError",
    "ConnpassError",
    "ForbiddenError",
    "HttpResponseError",
    "InternalServerError",
    "InvalidTokenError",
    "JsonDecodeError",
    "OutOfRangeError",
    "ServiceUnavailableError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
]
