"""Shared fixtures for connpass client tests."""

from __future__ import annotations

import typing as typ

import pytest

from tests.helpers.payloads import event_payload, search_payload


@pytest.fixture
def single_event_payload() -> dict[str, typ.Any]:
    """Provide a search response holding one fully populated event."""
    return search_payload(event_payload())
