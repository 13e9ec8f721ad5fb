"""Clients for the connpass event search endpoint.

``connpass.client.aio.ConnpassClient`` suspends the calling task during the
round trip; ``connpass.client.blocking.ConnpassClient`` occupies the calling
thread. Both send exactly one request per ``send`` call and never retry.
"""

from __future__ import annotations

from . import blocking
from ._protocol import (
    build_request_params,
    classify_response,
    request_headers,
)
from .aio import ConnpassClient

__all__ = [
    "ConnpassClient",
    "blocking",
    "build_request_params",
    "classify_response",
    "request_headers",
]
