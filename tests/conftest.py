"""Shared fixtures: upstream payloads and a TestClient wired to a fake events API."""
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from apis.events import get_events_client
from core.events import EventsApiClient
from web import app

API_BASE = "http://events.test"


def make_event_payload(**overrides) -> dict:
    """A complete upstream event record in camelCase, as the API sends it."""
    payload = {
        "id": "evt-1",
        "name": "Downtown Raleigh Farmers Market",
        "description": "Fresh produce and local crafts every Saturday.",
        "category": "farmers_market",
        "tags": ["produce", "local"],
        "venueName": "City Plaza",
        "address": "400 Fayetteville St",
        "city": "Raleigh",
        "state": "NC",
        "zipCode": "27601",
        "latitude": "35.7775",
        "longitude": "-78.6390",
        "startDate": "2026-03-14T09:00:00",
        "endDate": "2026-03-14T13:00:00",
        "applicationDeadline": None,
        "boothFeeMin": 2500,
        "boothFeeMax": 5000,
        "vendorSpots": 80,
        "expectedAttendance": 12000,
        "organizerName": "Raleigh Markets Co",
        "organizerEmail": "hello@example.com",
        "website": "https://example.com/market",
        "applicationUrl": "https://example.com/market/apply",
        "applicationMethod": "online",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def event_payload() -> Callable[..., dict]:
    return make_event_payload


@pytest.fixture
def fake_api():
    """Install a handler-driven fake for the events API; returns the request log."""
    state = {"handler": None, "requests": []}

    def transport_handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["handler"](request)

    def override() -> EventsApiClient:
        return EventsApiClient(
            API_BASE, timeout=1.0, transport=httpx.MockTransport(transport_handler)
        )

    app.dependency_overrides[get_events_client] = override
    yield state
    app.dependency_overrides.pop(get_events_client, None)


@pytest.fixture
def client():
    """Create test client for the FastAPI app."""
    return TestClient(app, raise_server_exceptions=False)
