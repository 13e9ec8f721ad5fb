"""Structured request events and error categorization.

Both clients emit one ``started`` event per request followed by either a
``completed`` or a ``failed`` event. Events are single log lines of
``key=value`` pairs prefixed with the event type, suitable for log
aggregators.

Usage
-----
>>> event_logger = RequestEventLogger()
>>> event_logger.log_request_started(endpoint=url, param_count=3)

"""

from __future__ import annotations

import enum
import typing as typ

from connpass.errors import (
    ConnpassConfigError,
    HttpResponseError,
    JsonDecodeError,
    TransportError,
    ValidationError,
)
from connpass.logging import get_logger, log_error, log_info

if typ.TYPE_CHECKING:
    import datetime as dt

    from connpass.response import ConnpassResponse

logger = get_logger(__name__)

_HTTP_SERVER_ERROR_THRESHOLD = 500


class RequestEventType(enum.StrEnum):
    """Structured log event types for API requests."""

    REQUEST_STARTED = "connpass.request.started"
    REQUEST_COMPLETED = "connpass.request.completed"
    REQUEST_FAILED = "connpass.request.failed"


class ErrorCategory(enum.StrEnum):
    """Coarse failure categories callers can route on."""

    VALIDATION = "validation"
    CLIENT_ERROR = "client_error"
    TRANSIENT = "transient"
    SCHEMA_DRIFT = "schema_drift"
    TRANSPORT = "transport"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (ValidationError, ErrorCategory.VALIDATION),
    (JsonDecodeError, ErrorCategory.SCHEMA_DRIFT),
    (TransportError, ErrorCategory.TRANSPORT),
    (ConnpassConfigError, ErrorCategory.CONFIGURATION),
)


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize an exception raised while querying the API.

    Returns
    -------
    ErrorCategory
        ``TRANSIENT`` for 5xx responses, ``CLIENT_ERROR`` for other HTTP
        errors, and a type-based category for everything else.

    """
    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    if isinstance(exc, HttpResponseError):
        if exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD:
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR

    return ErrorCategory.UNKNOWN


class RequestEventLogger:
    """Emit structured request events via femtologging."""

    def log_request_started(self, *, endpoint: str, param_count: int) -> None:
        """Log that a search request is about to be sent."""
        log_info(
            logger,
            "[%s] endpoint=%s param_count=%d",
            RequestEventType.REQUEST_STARTED,
            endpoint,
            param_count,
        )

    def log_request_completed(
        self,
        *,
        endpoint: str,
        response: ConnpassResponse,
        duration: dt.timedelta,
    ) -> None:
        """Log a decoded response with its pagination figures."""
        log_info(
            logger,
            "[%s] endpoint=%s duration_seconds=%.3f results_returned=%d "
            "results_available=%d results_start=%d",
            RequestEventType.REQUEST_COMPLETED,
            endpoint,
            duration.total_seconds(),
            response.results_returned,
            response.results_available,
            response.results_start,
        )

    def log_request_failed(
        self,
        *,
        endpoint: str,
        error: BaseException,
        duration: dt.timedelta,
    ) -> None:
        """Log a failed request with its error category.

        Parameters
        ----------
        endpoint
            URL the request was sent to.
        error
            Exception about to be raised to the caller.
        duration
            Time spent before the failure surfaced.

        """
        status_code = getattr(error, "status_code", None)
        log_error(
            logger,
            "[%s] endpoint=%s duration_seconds=%.3f status_code=%s "
            "error_type=%s error_category=%s error_message=%s",
            RequestEventType.REQUEST_FAILED,
            endpoint,
            duration.total_seconds(),
            status_code,
            type(error).__name__,
            categorize_error(error),
            str(error),
        )
