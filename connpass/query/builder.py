"""Chainable builder producing validated :class:`Query` values.

Setters come in pairs. Singular setters (``event_id``, ``keyword``, ...)
append one value, creating the list on first use. Plural setters
(``event_ids``, ``keywords``, ...) replace whatever the field held before.
Integer values must fit an unsigned 32-bit integer; :meth:`QueryBuilder.build`
rejects anything else.

Example:
>>> from connpass.query import OrderOption, QueryBuilder
>>> query = (
...     QueryBuilder.begin()
...     .keyword_or("Python")
...     .keyword_or("機械学習")
...     .yms([202110, 202111])
...     .order(OrderOption.NEWER)
...     .count(15)
...     .build()
... )

"""

from __future__ import annotations

import typing as typ

from .models import Query
from .validator import FetchCountRange, FormatJson, UnsignedInt

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .types import OrderOption
    from .validator import Validator

_T = typ.TypeVar("_T")


def _append(values: list[_T] | None, value: _T) -> list[_T]:
    if values is None:
        return [value]
    values.append(value)
    return values


def _frozen(values: list[_T] | None) -> tuple[_T, ...] | None:
    return tuple(values) if values is not None else None


class QueryBuilder:
    """Accumulate search criteria and build a validated :class:`Query`."""

    def __init__(self) -> None:
        """Initialise an empty builder with every field unset."""
        self._event_id: list[int] | None = None
        self._keyword: list[str] | None = None
        self._keyword_or: list[str] | None = None
        self._year_month: list[int] | None = None
        self._year_month_day: list[int] | None = None
        self._nickname: list[str] | None = None
        self._owner_nickname: list[str] | None = None
        self._series_id: list[int] | None = None
        self._start: int | None = None
        self._order: OrderOption | None = None
        self._count: FetchCountRange | None = None
        self._format: FormatJson | None = None

    @classmethod
    def begin(cls) -> QueryBuilder:
        """Return an empty builder."""
        return cls()

    def event_ids(self, ids: cabc.Iterable[int]) -> QueryBuilder:
        """Replace the event IDs to search for."""
        self._event_id = list(ids)
        return self

    def event_id(self, event_id: int) -> QueryBuilder:
        """Add one event ID to search for."""
        self._event_id = _append(self._event_id, event_id)
        return self

    def keywords(self, keywords: cabc.Iterable[str]) -> QueryBuilder:
        """Replace the AND-combined keywords."""
        self._keyword = list(keywords)
        return self

    def keyword(self, keyword: str) -> QueryBuilder:
        """Add one AND-combined keyword."""
        self._keyword = _append(self._keyword, keyword)
        return self

    def keywords_or(self, keywords: cabc.Iterable[str]) -> QueryBuilder:
        """Replace the OR-combined keywords."""
        self._keyword_or = list(keywords)
        return self

    def keyword_or(self, keyword: str) -> QueryBuilder:
        """Add one OR-combined keyword."""
        self._keyword_or = _append(self._keyword_or, keyword)
        return self

    def yms(self, year_months: cabc.Iterable[int]) -> QueryBuilder:
        """Replace the ``YYYYMM`` months."""
        self._year_month = list(year_months)
        return self

    def ym(self, year_month: int) -> QueryBuilder:
        """Add one ``YYYYMM`` month."""
        self._year_month = _append(self._year_month, year_month)
        return self

    def ymds(self, dates: cabc.Iterable[int]) -> QueryBuilder:
        """Replace the ``YYYYMMDD`` dates."""
        self._year_month_day = list(dates)
        return self

    def ymd(self, date: int) -> QueryBuilder:
        """Add one ``YYYYMMDD`` date."""
        self._year_month_day = _append(self._year_month_day, date)
        return self

    def nicknames(self, nicknames: cabc.Iterable[str]) -> QueryBuilder:
        """Replace the participant nicknames."""
        self._nickname = list(nicknames)
        return self

    def nickname(self, nickname: str) -> QueryBuilder:
        """Add one participant nickname."""
        self._nickname = _append(self._nickname, nickname)
        return self

    def owner_nicknames(self, nicknames: cabc.Iterable[str]) -> QueryBuilder:
        """Replace the organiser nicknames."""
        self._owner_nickname = list(nicknames)
        return self

    def owner_nickname(self, nickname: str) -> QueryBuilder:
        """Add one organiser nickname."""
        self._owner_nickname = _append(self._owner_nickname, nickname)
        return self

    def series_ids(self, ids: cabc.Iterable[int]) -> QueryBuilder:
        """Replace the series (group) IDs."""
        self._series_id = list(ids)
        return self

    def series_id(self, series_id: int) -> QueryBuilder:
        """Add one series (group) ID."""
        self._series_id = _append(self._series_id, series_id)
        return self

    def start(self, start: int) -> QueryBuilder:
        """Set the 1-based offset of the first result."""
        self._start = start
        return self

    def order(self, order: OrderOption) -> QueryBuilder:
        """Set the sort order."""
        self._order = order
        return self

    def count(self, count: int) -> QueryBuilder:
        """Set the number of results; checked by :meth:`build`."""
        self._count = FetchCountRange(count)
        return self

    def format(self, response_format: str) -> QueryBuilder:
        """Set the response format; checked by :meth:`build`."""
        self._format = FormatJson(response_format)
        return self

    def _pending_validators(self) -> list[Validator]:
        """Return every constrained value in the order it is checked."""
        validators: list[Validator] = []
        if self._count is not None:
            validators.append(self._count)
        if self._format is not None:
            validators.append(self._format)
        for name, values in (
            ("event_id", self._event_id),
            ("ym", self._year_month),
            ("ymd", self._year_month_day),
            ("series_id", self._series_id),
        ):
            validators.extend(UnsignedInt(name, value) for value in values or ())
        if self._start is not None:
            validators.append(UnsignedInt("start", self._start))
        return validators

    def build(self) -> Query:
        """Validate the accumulated criteria and return a :class:`Query`.

        Constrained values are validated before the query is assembled, so a
        failure never yields a partially populated query.

        Returns
        -------
        Query
            Immutable query holding copies of the accumulated values.

        Raises
        ------
        OutOfRangeError
            If ``count`` lies outside 1 to 100, or an ID, date or ``start``
            does not fit an unsigned 32-bit integer.
        InvalidTokenError
            If ``format`` is anything other than ``"json"``.

        """
        for validator in self._pending_validators():
            validator.validate()
        count = self._count.value if self._count is not None else None
        response_format = self._format.value if self._format is not None else None
        return Query(
            event_id=_frozen(self._event_id),
            keyword=_frozen(self._keyword),
            keyword_or=_frozen(self._keyword_or),
            year_month=_frozen(self._year_month),
            year_month_day=_frozen(self._year_month_day),
            nickname=_frozen(self._nickname),
            owner_nickname=_frozen(self._owner_nickname),
            series_id=_frozen(self._series_id),
            start=self._start,
            order=self._order,
            count=count,
            format=response_format,
        )
