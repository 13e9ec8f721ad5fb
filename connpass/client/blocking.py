"""Blocking connpass API client built on ``httpx.Client``.

Intended for synchronous callers such as command-line tools that have no
concurrent work to interleave with the request.
"""

from __future__ import annotations

import time
import typing as typ

import httpx

from connpass.config import ConnpassClientConfig
from connpass.errors import ConnpassError, TransportError
from connpass.observability import RequestEventLogger

from ._protocol import (
    build_request_params,
    classify_response,
    elapsed_since,
    request_headers,
)

if typ.TYPE_CHECKING:
    import types

    from connpass.query import Query, QueryParams
    from connpass.response import ConnpassResponse


class ConnpassClient:
    """Blocking client for the connpass event search API.

    Examples
    --------
    >>> from connpass.client.blocking import ConnpassClient
    >>> from connpass.query import QueryBuilder
    >>> query = QueryBuilder.begin().event_id(228732).build()
    >>> with ConnpassClient() as client:  # doctest: +SKIP
    ...     response = client.send(query)

    """

    def __init__(
        self,
        config: ConnpassClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
        event_logger: RequestEventLogger | None = None,
    ) -> None:
        """Initialise the client; ``http_client`` stays caller-owned."""
        self._config = config or ConnpassClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self._config.timeout_s,
            headers=request_headers(self._config),
        )
        self._events = event_logger or RequestEventLogger()

    @property
    def config(self) -> ConnpassClientConfig:
        """Configuration used by this client."""
        return self._config

    def __enter__(self) -> ConnpassClient:
        """Return the client for use in ``with``."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        self.close()

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def send(self, query: Query) -> ConnpassResponse:
        """Send one search request, blocking until it is decoded.

        Raises
        ------
        TransportError
            If no HTTP response was received.
        HttpResponseError
            If the response status is not 200 or its body cannot be decoded.

        """
        endpoint = self._config.endpoint
        params = build_request_params(query)
        self._events.log_request_started(endpoint=endpoint, param_count=len(params))
        started = time.perf_counter()
        try:
            response = self._send_request(params)
            result = classify_response(response.status_code, response.content)
        except ConnpassError as exc:
            self._events.log_request_failed(
                endpoint=endpoint, error=exc, duration=elapsed_since(started)
            )
            raise
        self._events.log_request_completed(
            endpoint=endpoint, response=result, duration=elapsed_since(started)
        )
        return result

    def _send_request(self, params: QueryParams) -> httpx.Response:
        try:
            return self._client.get(
                self._config.endpoint,
                params=params,
                headers=request_headers(self._config),
            )
        except httpx.RequestError as exc:
            raise TransportError.from_exception(exc) from exc
