"""Vendor-event listing: models, formatting, rendering and the upstream API client."""

from core.events.model import Event, Location
from core.events.client import EventsApiClient, EventsApiError
from core.events.render import render_events_page, render_error_page


__all__ = [
    "Event",
    "Location",
    "EventsApiClient",
    "EventsApiError",
    "render_events_page",
    "render_error_page",
]
