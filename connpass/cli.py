"""Command-line search against the connpass event API.

Usage:
    connpass-search --event-id 228732
    connpass-search --keyword-or Python --keyword-or 機械学習 \\
        --ym 202110 --ym 202111 --order newer --count 15
    connpass-search --keyword Rust --blocking

Environment variables:
    CONNPASS_ENDPOINT   - Endpoint override
    CONNPASS_TIMEOUT_S  - Request timeout in seconds (default: 30)
    CONNPASS_USER_AGENT - User-Agent override
    CONNPASS_LOG_LEVEL  - Log level (default: WARNING)
"""

from __future__ import annotations

import asyncio
import dataclasses
import sys
import typing as typ

import msgspec
from cyclopts import App, Parameter

from connpass import __version__
from connpass.client import aio, blocking
from connpass.config import ConnpassClientConfig
from connpass.errors import ConnpassError
from connpass.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_warning,
)
from connpass.query import OrderOption, Query, QueryBuilder

if typ.TYPE_CHECKING:
    from connpass.response import ConnpassResponse

logger = get_logger(__name__)

app = App(
    name="connpass-search",
    help="Search events on connpass and print the response as JSON",
    version=__version__,
)


@dataclasses.dataclass(frozen=True, slots=True)
class SearchOptions:
    """Search criteria collected from the command line."""

    event_id: tuple[int, ...] = ()
    keyword: tuple[str, ...] = ()
    keyword_or: tuple[str, ...] = ()
    ym: tuple[int, ...] = ()
    ymd: tuple[int, ...] = ()
    nickname: tuple[str, ...] = ()
    owner_nickname: tuple[str, ...] = ()
    series_id: tuple[int, ...] = ()
    start: int | None = None
    order: OrderOption | None = None
    count: int | None = None

    def to_query(self) -> Query:
        """Build a validated query; repeated options are only sent if given."""
        builder = QueryBuilder.begin()
        if self.event_id:
            builder.event_ids(self.event_id)
        if self.keyword:
            builder.keywords(self.keyword)
        if self.keyword_or:
            builder.keywords_or(self.keyword_or)
        if self.ym:
            builder.yms(self.ym)
        if self.ymd:
            builder.ymds(self.ymd)
        if self.nickname:
            builder.nicknames(self.nickname)
        if self.owner_nickname:
            builder.owner_nicknames(self.owner_nickname)
        if self.series_id:
            builder.series_ids(self.series_id)
        if self.start is not None:
            builder.start(self.start)
        if self.order is not None:
            builder.order(self.order)
        if self.count is not None:
            builder.count(self.count)
        return builder.build()


def _make_async_client(config: ConnpassClientConfig) -> aio.ConnpassClient:
    return aio.ConnpassClient(config)


def _make_blocking_client(config: ConnpassClientConfig) -> blocking.ConnpassClient:
    return blocking.ConnpassClient(config)


async def _fetch_async(query: Query, config: ConnpassClientConfig) -> ConnpassResponse:
    async with _make_async_client(config) as client:
        return await client.send(query)


def _fetch_blocking(query: Query, config: ConnpassClientConfig) -> ConnpassResponse:
    with _make_blocking_client(config) as client:
        return client.send(query)


def _configure_logging(log_level: str) -> None:
    normalized_level, invalid_level = configure_logging(log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid CONNPASS_LOG_LEVEL %r, falling back to %s",
            log_level,
            normalized_level,
        )


@app.default
def search(  # noqa: PLR0913
    *,
    event_id: list[int] | None = None,
    keyword: list[str] | None = None,
    keyword_or: list[str] | None = None,
    ym: list[int] | None = None,
    ymd: list[int] | None = None,
    nickname: list[str] | None = None,
    owner_nickname: list[str] | None = None,
    series_id: list[int] | None = None,
    start: int | None = None,
    order: OrderOption | None = None,
    count: int | None = None,
    use_blocking: typ.Annotated[bool, Parameter(name="--blocking")] = False,
    log_level: typ.Annotated[
        str, Parameter(env_var="CONNPASS_LOG_LEVEL")
    ] = DEFAULT_LOG_LEVEL,
) -> int:
    """Send one search request and print the decoded response.

    Repeat list options (for example ``--keyword``) to send several values.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when validation or the request fails.

    """
    _configure_logging(log_level)
    options = SearchOptions(
        event_id=tuple(event_id or ()),
        keyword=tuple(keyword or ()),
        keyword_or=tuple(keyword_or or ()),
        ym=tuple(ym or ()),
        ymd=tuple(ymd or ()),
        nickname=tuple(nickname or ()),
        owner_nickname=tuple(owner_nickname or ()),
        series_id=tuple(series_id or ()),
        start=start,
        order=order,
        count=count,
    )
    try:
        query = options.to_query()
        config = ConnpassClientConfig.from_env()
        if use_blocking:
            response = _fetch_blocking(query, config)
        else:
            response = asyncio.run(_fetch_async(query, config))
    except ConnpassError as exc:
        print(f"connpass search failed: {exc}", file=sys.stderr)
        return 1

    print(msgspec.json.encode(response).decode("utf-8"))
    return 0


def main() -> int:
    """Entry point for the ``connpass-search`` console script."""
    return app()


if __name__ == "__main__":
    raise SystemExit(main())
