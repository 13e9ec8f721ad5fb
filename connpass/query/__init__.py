"""Search query construction for the connpass event API.

Public API
----------
QueryBuilder
    Chainable accumulator and the only place queries are validated.
Query
    Immutable, validated search parameters.
OrderOption
    Sort order with its numeric wire code.
Validator
    Protocol implemented by constrained values.
FetchCountRange
    Confirmed ``count`` wrapper (1 to 100).
FormatJson
    Confirmed ``format`` wrapper (``"json"`` only).
UnsignedInt
    Confirmed wrapper for integer parameters (0 to 4294967295).

"""

from __future__ import annotations

from .builder import QueryBuilder
from .models import Query, QueryParams
from .types import OrderOption
from .validator import FetchCountRange, FormatJson, UnsignedInt, Validator

__all__ = [
    "FetchCountRange",
    "FormatJson",
    "OrderOption",
    "Query",
    "QueryBuilder",
    "QueryParams",
    "UnsignedInt",
    "Validator",
]
