"""Shared test fixtures for the client test suite."""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest

from eventsphere.config.settings import ClientConfig
from eventsphere.integration.transport import HttpTransport
from eventsphere.models.schemas import Event
from eventsphere.offline.dataset import StaticEventSource

PRODUCTION_URL = "https://eventsphereindia-api.azurewebsites.net/api"
LOCAL_URL = "http://localhost:7071/api"


# ---------------------------------------------------------------------------
# Keep host environment out of EventSphereSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_eventsphere_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("EVENTSPHERE_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Event data
# ---------------------------------------------------------------------------

def make_event(
    event_id: str,
    title: str,
    city: str,
    category: str = "Music",
    description: str = "A community event.",
) -> dict:
    """Build a camelCase event dict in the backend's wire format."""
    return {
        "id": event_id,
        "title": title,
        "description": description,
        "shortDescription": title,
        "images": [],
        "date": "2025-03-14T19:00:00+05:30",
        "time": "7:00 PM",
        "venue": {
            "name": f"{city} Hall",
            "address": "Main Road",
            "city": city,
            "state": "State",
            "pincode": "400001",
        },
        "category": category,
        "price": {"min": 0, "max": 500, "currency": "INR"},
        "isFree": False,
        "organizer": {"id": "org-1", "name": "Organizer"},
        "capacity": 100,
        "bookedCount": 10,
        "status": "active",
        "tags": [],
        "rating": 4.5,
        "reviewCount": 12,
    }


@pytest.fixture
def event_factory():
    """Factory for wire-format event dicts."""
    return make_event


@pytest.fixture
def sample_events() -> list[Event]:
    return [
        Event.model_validate(
            make_event("evt-1", "Jazz Night", "Pune", "Music", "Smooth live jazz.")
        ),
        Event.model_validate(
            make_event("evt-2", "Tech Meetup", "Bengaluru", "Technology", "Talks on Python.")
        ),
        Event.model_validate(
            make_event("evt-3", "Food Carnival", "Delhi", "Food", "Street food from Pune and beyond.")
        ),
    ]


@pytest.fixture
def event_source(sample_events: list[Event]) -> StaticEventSource:
    return StaticEventSource(sample_events)


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def production_config() -> ClientConfig:
    return ClientConfig(
        base_url=PRODUCTION_URL,
        is_local_target=False,
        fallback_enabled=False,
        retry_attempts=3,
        retry_delay_ms=1000,
    )


@pytest.fixture
def local_config() -> ClientConfig:
    return ClientConfig(
        base_url=LOCAL_URL,
        is_local_target=True,
        fallback_enabled=True,
        retry_attempts=3,
        retry_delay_ms=1000,
    )


@pytest.fixture
def stub_transport() -> MagicMock:
    """HttpTransport double; configure ``send.side_effect`` per test."""
    transport = MagicMock(spec=HttpTransport)
    transport.build_url.return_value = f"{PRODUCTION_URL}/GetEvents"
    return transport

