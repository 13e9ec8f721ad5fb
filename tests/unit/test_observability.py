"""Unit tests for request events and error categorization."""

from __future__ import annotations

import datetime as dt

import httpx
import pytest

from connpass import observability
from connpass.errors import (
    ConnpassConfigError,
    ForbiddenError,
    InternalServerError,
    InvalidTokenError,
    JsonDecodeError,
    OutOfRangeError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedStatusError,
)
from connpass.observability import (
    ErrorCategory,
    RequestEventLogger,
    RequestEventType,
    categorize_error,
)
from connpass.response import ConnpassResponse
from tests.helpers.fake_logger import FakeLogger

_ENDPOINT = "https://connpass.com/api/v1/event/"


class TestCategorizeError:
    """Tests for categorize_error."""

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (OutOfRangeError.invalid_count(0, 1, 100), ErrorCategory.VALIDATION),
            (InvalidTokenError.invalid_format("xml"), ErrorCategory.VALIDATION),
            (ForbiddenError.from_status(), ErrorCategory.CLIENT_ERROR),
            (UnexpectedStatusError.from_status(404), ErrorCategory.CLIENT_ERROR),
            (InternalServerError.from_status(), ErrorCategory.TRANSIENT),
            (ServiceUnavailableError.from_status(), ErrorCategory.TRANSIENT),
            (UnexpectedStatusError.from_status(502), ErrorCategory.TRANSIENT),
            (JsonDecodeError.from_decoder("bad"), ErrorCategory.SCHEMA_DRIFT),
            (
                TransportError.from_exception(httpx.ConnectError("refused")),
                ErrorCategory.TRANSPORT,
            ),
            (ConnpassConfigError.invalid_timeout("x"), ErrorCategory.CONFIGURATION),
            (RuntimeError("other"), ErrorCategory.UNKNOWN),
        ],
        ids=[
            "out-of-range",
            "invalid-token",
            "forbidden",
            "unexpected-4xx",
            "internal-server-error",
            "service-unavailable",
            "unexpected-5xx",
            "json-decode",
            "transport",
            "config",
            "unknown",
        ],
    )
    def test_categories(self, exc: BaseException, expected: ErrorCategory) -> None:
        """Each error type maps onto its category."""
        assert categorize_error(exc) is expected


class TestRequestEventLogger:
    """Tests for the structured request event lines."""

    @pytest.fixture
    def fake_logger(self, monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
        """Replace the module logger with a recording double."""
        fake = FakeLogger()
        monkeypatch.setattr(observability, "logger", fake)
        return fake

    def test_started_event(self, fake_logger: FakeLogger) -> None:
        """The started event carries the endpoint and parameter count."""
        RequestEventLogger().log_request_started(endpoint=_ENDPOINT, param_count=3)

        assert fake_logger.calls == [
            (
                "INFO",
                f"[{RequestEventType.REQUEST_STARTED}] endpoint={_ENDPOINT} "
                "param_count=3",
                None,
                False,
            )
        ]

    def test_completed_event(self, fake_logger: FakeLogger) -> None:
        """The completed event carries duration and pagination figures."""
        response = ConnpassResponse(
            results_returned=10,
            results_available=91,
            results_start=11,
            events=(),
        )

        RequestEventLogger().log_request_completed(
            endpoint=_ENDPOINT,
            response=response,
            duration=dt.timedelta(milliseconds=250),
        )

        [(level, message, _, _)] = fake_logger.calls
        assert level == "INFO"
        assert message.startswith("[connpass.request.completed]")
        assert "duration_seconds=0.250" in message
        assert "results_returned=10" in message
        assert "results_available=91" in message
        assert "results_start=11" in message

    def test_failed_event(self, fake_logger: FakeLogger) -> None:
        """The failed event carries status, type and category."""
        RequestEventLogger().log_request_failed(
            endpoint=_ENDPOINT,
            error=ServiceUnavailableError.from_status(),
            duration=dt.timedelta(seconds=1),
        )

        [(level, message, _, _)] = fake_logger.calls
        assert level == "ERROR"
        assert message.startswith("[connpass.request.failed]")
        assert "status_code=503" in message
        assert "error_type=ServiceUnavailableError" in message
        assert "error_category=transient" in message
        assert "error_message=Service Unavailable" in message

    def test_failed_event_without_status(self, fake_logger: FakeLogger) -> None:
        """Transport failures are logged without a status code."""
        error = TransportError.from_exception(httpx.ConnectError("refused"))

        RequestEventLogger().log_request_failed(
            endpoint=_ENDPOINT, error=error, duration=dt.timedelta()
        )

        assert "status_code=None" in fake_logger.messages[0]
        assert "error_category=transport" in fake_logger.messages[0]
