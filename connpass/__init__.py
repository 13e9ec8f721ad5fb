"""Typed client for the connpass event search API.

Build a validated :class:`Query` with :class:`QueryBuilder`, send it with
the async or blocking :class:`ConnpassClient`, and receive a decoded
:class:`ConnpassResponse` or a :class:`ConnpassError` subclass.

Examples
--------
>>> from connpass import QueryBuilder
>>> from connpass.client.blocking import ConnpassClient
>>> query = QueryBuilder.begin().keyword("Python").count(10).build()
>>> with ConnpassClient() as client:  # doctest: +SKIP
...     response = client.send(query)

"""

from __future__ import annotations

__version__ = "0.1.0"

from connpass.client import ConnpassClient
from connpass.config import ConnpassClientConfig
from connpass.errors import (
    ConnpassConfigError,
    ConnpassError,
    ForbiddenError,
    HttpResponseError,
    InternalServerError,
    InvalidTokenError,
    JsonDecodeError,
    OutOfRangeError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)
from connpass.query import OrderOption, Query, QueryBuilder
from connpass.response import ConnpassResponse, Event, EventType, Series

__all__ = [
    "ConnpassClient",
    "ConnpassClientConfig",
    "ConnpassConfigError",
    "ConnpassError",
    "ConnpassResponse",
    "Event",
    "EventType",
    "ForbiddenError",
    "HttpResponseError",
    "InternalServerError",
    "InvalidTokenError",
    "JsonDecodeError",
    "OrderOption",
    "OutOfRangeError",
    "Query",
    "QueryBuilder",
    "Series",
    "ServiceUnavailableError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
    "__version__",
]
