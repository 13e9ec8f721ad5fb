"""Non-blocking connpass API client built on ``httpx.AsyncClient``."""

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
    """Async client for the connpass event search API.

    The client keeps no per-request state, so one instance may serve many
    concurrent ``send`` calls.

    Parameters
    ----------
    config
        Endpoint, timeout and user agent. Defaults to
        :class:`ConnpassClientConfig` defaults.
    http_client
        Optional caller-owned ``httpx.AsyncClient``. When omitted the
        instance creates and owns one.
    event_logger
        Optional sink for request events.

    Examples
    --------
    >>> import asyncio
    >>> from connpass.client.aio import ConnpassClient
    >>> from connpass.query import QueryBuilder
    >>> async def main() -> None:
    ...     query = QueryBuilder.begin().event_id(228732).build()
    ...     async with ConnpassClient() as client:
    ...         print(await client.send(query))
    >>> # asyncio.run(main())

    """

    def __init__(
        self,
        config: ConnpassClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        event_logger: RequestEventLogger | None = None,
    ) -> None:
        """Initialise the client with configuration and transport."""
        self._config = config or ConnpassClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=self._config.timeout_s,
            headers=request_headers(self._config),
        )
        self._events = event_logger or RequestEventLogger()

    @property
    def config(self) -> ConnpassClientConfig:
        """Configuration used by this client."""
        return self._config

    async def __aenter__(self) -> ConnpassClient:
        """Return the client for use in ``async with``."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def send(self, query: Query) -> ConnpassResponse:
        """Send one search request and decode the response.

        Parameters
        ----------
        query
            Validated search parameters. An empty query lets the API apply
            its defaults.

        Returns
        -------
        ConnpassResponse
            Decoded search result.

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
            response = await self._send_request(params)
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

    async def _send_request(self, params: QueryParams) -> httpx.Response:
        """Perform the GET request, wrapping transport failures."""
        try:
            return await self._client.get(
                self._config.endpoint,
                params=params,
                headers=request_headers(self._config),
            )
        except httpx.RequestError as exc:
            raise TransportError.from_exception(exc) from exc
