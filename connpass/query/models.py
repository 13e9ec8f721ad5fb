"""Immutable search query and its wire serialization."""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .types import OrderOption

QueryParams = list[tuple[str, str]]


@dataclasses.dataclass(frozen=True, slots=True)
class Query:
    """Validated search parameters for the connpass event endpoint.

    Instances are produced by :meth:`connpass.query.QueryBuilder.build`,
    which validates ``count`` and ``format``. Every field is optional; unset
    fields are omitted from the request so the API applies its defaults.

    Attributes
    ----------
    event_id
        Event IDs to fetch.
    keyword
        Keywords combined with AND by the API.
    keyword_or
        Keywords combined with OR by the API.
    year_month
        Months in ``YYYYMM`` form.
    year_month_day
        Dates in ``YYYYMMDD`` form.
    nickname
        Participant nicknames.
    owner_nickname
        Organiser nicknames.
    series_id
        Group (series) IDs.
    start
        1-based offset of the first result.
    order
        Sort order of the results.
    count
        Number of results to return (1 to 100).
    format
        Response format; always ``"json"`` when set.

    """

    event_id: tuple[int, ...] | None = None
    keyword: tuple[str, ...] | None = None
    keyword_or: tuple[str, ...] | None = None
    year_month: tuple[int, ...] | None = None
    year_month_day: tuple[int, ...] | None = None
    nickname: tuple[str, ...] | None = None
    owner_nickname: tuple[str, ...] | None = None
    series_id: tuple[int, ...] | None = None
    start: int | None = None
    order: OrderOption | None = None
    count: int | None = None
    format: str | None = None

    def to_params(self) -> QueryParams:
        """Flatten the query into ordered ``(key, value)`` pairs.

        List fields emit one pair per element under a repeated key. Scalar
        fields emit at most one pair. ``order`` is sent as its numeric code.

        Returns
        -------
        list[tuple[str, str]]
            Parameters in field declaration order.

        """
        params: QueryParams = []
        _extend_repeated(params, "event_id", self.event_id)
        _extend_repeated(params, "keyword", self.keyword)
        _extend_repeated(params, "keyword_or", self.keyword_or)
        _extend_repeated(params, "ym", self.year_month)
        _extend_repeated(params, "ymd", self.year_month_day)
        _extend_repeated(params, "nickname", self.nickname)
        _extend_repeated(params, "owner_nickname", self.owner_nickname)
        _extend_repeated(params, "series_id", self.series_id)
        _append_single(params, "start", self.start)
        _append_single(
            params, "order", self.order.code if self.order is not None else None
        )
        _append_single(params, "count", self.count)
        _append_single(params, "format", self.format)
        return params


def _extend_repeated(
    params: QueryParams, key: str, values: cabc.Iterable[object] | None
) -> None:
    if values is None:
        return
    params.extend((key, str(value)) for value in values)


def _append_single(params: QueryParams, key: str, value: object | None) -> None:
    if value is not None:
        params.append((key, str(value)))
