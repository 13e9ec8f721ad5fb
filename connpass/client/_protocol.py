"""Request building and response classification shared by both clients.

The async and blocking clients differ only in how they wait on ``httpx``;
everything about what is sent and how the answer is interpreted lives here.
"""

from __future__ import annotations

import datetime as dt
import http
import time
import typing as typ

from connpass.errors import (
    ForbiddenError,
    InternalServerError,
    ServiceUnavailableError,
    UnexpectedStatusError,
)
from connpass.logging import get_logger, log_debug
from connpass.response import ConnpassResponse, decode_response

if typ.TYPE_CHECKING:
    from connpass.config import ConnpassClientConfig
    from connpass.query import Query, QueryParams

logger = get_logger(__name__)

_STATUS_ERRORS: dict[int, typ.Callable[[], Exception]] = {
    http.HTTPStatus.FORBIDDEN: ForbiddenError.from_status,
    http.HTTPStatus.INTERNAL_SERVER_ERROR: InternalServerError.from_status,
    http.HTTPStatus.SERVICE_UNAVAILABLE: ServiceUnavailableError.from_status,
}


def request_headers(config: ConnpassClientConfig) -> dict[str, str]:
    """Return the headers attached to every search request."""
    return {"User-Agent": config.user_agent, "Accept": "application/json"}


def build_request_params(query: Query) -> QueryParams:
    """Serialize ``query`` into the request's query string parameters."""
    params = query.to_params()
    log_debug(logger, "Serialized connpass query into %d params", len(params))
    return params


def classify_response(status_code: int, content: bytes) -> ConnpassResponse:
    """Interpret an HTTP response from the search endpoint.

    Only a 200 body is decoded. Every other status is turned into the
    matching error without looking at the body.

    Parameters
    ----------
    status_code
        HTTP status code of the response.
    content
        Fully buffered response body.

    Returns
    -------
    ConnpassResponse
        The decoded payload of a 200 response.

    Raises
    ------
    JsonDecodeError
        If a 200 body does not decode into a ``ConnpassResponse``.
    ForbiddenError, InternalServerError, ServiceUnavailableError
        For 403, 500 and 503 responses.
    UnexpectedStatusError
        For any other status code.

    """
    if status_code == http.HTTPStatus.OK:
        return decode_response(content)

    error_factory = _STATUS_ERRORS.get(status_code)
    if error_factory is not None:
        raise error_factory()
    raise UnexpectedStatusError.from_status(status_code)


def elapsed_since(started: float) -> dt.timedelta:
    """Return the time elapsed since a ``time.perf_counter`` reading."""
    return dt.timedelta(seconds=time.perf_counter() - started)
