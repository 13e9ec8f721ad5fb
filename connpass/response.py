"""Typed response payload of the connpass event search API.

The field layout follows https://connpass.com/about/api/. Every event field
except ``event_id`` is optional because the API does not guarantee it is
populated. Timestamps and coordinates stay as strings; the service sometimes
omits or malforms them.
"""

from __future__ import annotations

import enum
import typing as typ

import msgspec

from connpass.errors import JsonDecodeError

# Counts and identifiers are unsigned 32-bit integers on the wire.
U32 = typ.Annotated[int, msgspec.Meta(ge=0, le=4_294_967_295)]


class EventType(enum.StrEnum):
    """Kind of connpass event."""

    PARTICIPATION = "participation"
    ADVERTISEMENT = "advertisement"


class Series(msgspec.Struct, kw_only=True, frozen=True):
    """Group (series) an event belongs to."""

    id: U32
    title: str | None = None
    url: str | None = None


class Event(msgspec.Struct, kw_only=True, frozen=True):
    """Single event returned by the search API.

    Attributes
    ----------
    event_id
        Event identifier, always present.
    catch
        Catch phrase shown under the title.
    hash_tag
        Twitter hashtag without the leading ``#``.
    started_at, ended_at, updated_at
        ISO 8601 timestamps, kept verbatim.
    limit
        Participant capacity.
    place
        Venue name.
    lat, lon
        Venue coordinates as returned by the API.
    accepted, waiting
        Accepted and wait-listed participant counts.

    """

    event_id: U32
    title: str | None = None
    catch: str | None = None
    description: str | None = None
    event_url: str | None = None
    hash_tag: str | None = None
    started_at: str | None = None
    ended_at: str | None = None
    limit: U32 | None = None
    event_type: EventType | None = None
    series: Series | None = None
    address: str | None = None
    place: str | None = None
    lat: str | None = None
    lon: str | None = None
    owner_id: U32 | None = None
    owner_nickname: str | None = None
    owner_display_name: str | None = None
    accepted: U32 | None = None
    waiting: U32 | None = None
    updated_at: str | None = None


class ConnpassResponse(msgspec.Struct, kw_only=True, frozen=True):
    """Decoded search result with pagination metadata.

    Attributes
    ----------
    results_returned
        Number of events in this response.
    results_available
        Number of events matching the query in total.
    results_start
        1-based offset of the first returned event.
    events
        Events in the order returned by the API.

    """

    results_returned: U32
    results_available: U32
    results_start: U32
    events: tuple[Event, ...]


_DECODER = msgspec.json.Decoder(ConnpassResponse)


def decode_response(content: bytes | str) -> ConnpassResponse:
    """Decode a JSON body into a :class:`ConnpassResponse`.

    Parameters
    ----------
    content
        Raw response body.

    Returns
    -------
    ConnpassResponse
        The decoded payload.

    Raises
    ------
    JsonDecodeError
        If the body is not valid JSON or does not match the response shape,
        including unknown ``event_type`` values.

    """
    try:
        return _DECODER.decode(content)
    except msgspec.DecodeError as exc:
        raise JsonDecodeError.from_decoder(str(exc)) from exc


__all__ = [
    "U32",
    "ConnpassResponse",
    "Event",
    "EventType",
    "Series",
    "decode_response",
]
