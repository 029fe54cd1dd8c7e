"""Listing and error page rendering."""

from __future__ import annotations

from datetime import datetime
from html import escape
from types import MappingProxyType
from typing import NamedTuple, Optional, Sequence

from core.common.app_settings import settings
from core.events import templates
from core.events.format import (
    DeadlineSeverity,
    deadline_severity,
    format_count,
    format_date,
    format_deadline,
    format_fee_range,
    format_number,
)
from core.events.model import Event, Location

MAX_TAGS = 5
NEUTRAL_COLOR = "#64748b"

CATEGORY_COLORS = MappingProxyType(
    {
        "farmers_market": "#22c55e",
        "craft_fair": "#8b5cf6",
        "festival": "#f59e0b",
        "flea_market": "#6366f1",
    }
)

FILTERS = (
    ("all", "All Events"),
    ("farmers_market", "Farmers Markets"),
    ("craft_fair", "Craft Fairs"),
    ("festival", "Festivals"),
    ("flea_market", "Flea Markets"),
)

DEADLINE_COLORS = MappingProxyType(
    {
        DeadlineSeverity.CLOSED: "#ef4444",
        DeadlineSeverity.URGENT: "#f59e0b",
        DeadlineSeverity.OPEN: "#22c55e",
    }
)


class RequirementBadge(NamedTuple):
    icon: str
    label: str
    style: str


# keyed by Event attribute; rendered in this order
REQUIREMENT_BADGES = MappingProxyType(
    {
        "handmade_only": RequirementBadge(
            "🎨", "Handmade Only", "color: #c4b5fd; border-color: #8b5cf6"
        ),
        "requires_insurance": RequirementBadge(
            "🛡️", "Insurance Required", "color: #fca5a5; border-color: #ef4444"
        ),
        "requires_tent": RequirementBadge(
            "⛺", "Bring a Tent", "color: #fcd34d; border-color: #f59e0b"
        ),
        "is_indoor": RequirementBadge(
            "🏠", "Indoor", "color: #93c5fd; border-color: #3b82f6"
        ),
        "has_shelter": RequirementBadge(
            "☂️", "Covered", "color: #5eead4; border-color: #14b8a6"
        ),
        "is_juried": RequirementBadge(
            "🏆", "Juried", "color: #fde68a; border-color: #eab308"
        ),
    }
)


def _e(value) -> str:
    return escape("" if value is None else str(value), quote=True)


def category_color(category: Optional[str]) -> str:
    return CATEGORY_COLORS.get(category or "", NEUTRAL_COLOR)


def category_label(category: Optional[str]) -> str:
    return (category or "event").replace("_", " ")


def _deadline_badge(event: Event, now: Optional[datetime]) -> str:
    text = format_deadline(event.application_deadline, now)
    severity = deadline_severity(event.application_deadline, now)
    if text is None or severity is None:
        return ""
    return templates.DEADLINE_BADGE.format(
        severity=severity.value,
        color=DEADLINE_COLORS[severity],
        text=_e(text),
    )


def _meta(event: Event) -> str:
    place = f"{event.city}, {event.state}"
    if event.venue_name:
        place = f"{event.venue_name} · {place}"
    items = [
        ("📍", place),
        ("📅", format_date(event.start_date)),
    ]
    if event.expected_attendance is not None:
        items.append(("👥", f"{format_count(event.expected_attendance)} expected"))
    return "\n".join(
        templates.META_ITEM.format(icon=icon, text=_e(text)) for icon, text in items
    )


def _requirements(event: Event) -> str:
    badges = [
        templates.REQUIREMENT.format(
            style=badge.style, icon=badge.icon, label=_e(badge.label)
        )
        for field, badge in REQUIREMENT_BADGES.items()
        if getattr(event, field)
    ]
    if not badges:
        return ""
    return '\n        <div class="requirements">' + "".join(badges) + "</div>"


def _tags(event: Event) -> str:
    shown = event.tags[:MAX_TAGS]
    if not shown:
        return ""
    return (
        '\n        <div class="tags">'
        + "".join(templates.TAG.format(tag=_e(tag)) for tag in shown)
        + "</div>"
    )


def _spots(event: Event) -> str:
    spots = "?" if event.vendor_spots is None else format_count(event.vendor_spots)
    text = f"{spots} vendor spots"
    if event.organizer_name:
        text += f" · by {event.organizer_name}"
    return _e(text)


def _actions(event: Event) -> str:
    links = []
    if event.application_url:
        links.append(
            templates.ACTION_LINK.format(
                href=_e(event.application_url), css="event-link", label="Apply Now"
            )
        )
    if event.website:
        links.append(
            templates.ACTION_LINK.format(
                href=_e(event.website), css="event-link secondary", label="Info"
            )
        )
    if not links:
        return ""
    return '\n          <div class="event-actions">' + "".join(links) + "</div>"


def render_event_card(event: Event, now: Optional[datetime] = None) -> str:
    return templates.EVENT_CARD.format(
        category=_e(event.category),
        name=_e(event.name),
        deadline_badge=_deadline_badge(event, now),
        category_color=category_color(event.category),
        category_label=_e(category_label(event.category)),
        meta=_meta(event),
        requirements=_requirements(event),
        tags=_tags(event),
        description=_e(event.description or "No description provided."),
        fee=_e(format_fee_range(event.booth_fee_min, event.booth_fee_max)),
        spots=_spots(event),
        actions=_actions(event),
    )


def _filters() -> str:
    return "\n".join(
        templates.FILTER_BUTTON.format(
            css="filter-btn active" if value == "all" else "filter-btn",
            value=value,
            label=label,
        )
        for value, label in FILTERS
    )


def render_events_page(
    events: Sequence[Event],
    location: Location,
    now: Optional[datetime] = None,
) -> str:
    """Full listing document; events keep the order they were given in."""
    if events:
        body = "\n".join(render_event_card(event, now) for event in events)
    else:
        body = templates.EMPTY_STATE
    subtitle = (
        f"Find vendor events within {format_number(location.radius)} miles of "
        f"{format_number(location.latitude)}, {format_number(location.longitude)}"
    )
    return templates.EVENTS_PAGE.format(
        app_name=_e(settings.app_name),
        styles=templates.STYLES,
        subtitle=_e(subtitle),
        filters=_filters(),
        events=body,
        script=templates.FILTER_SCRIPT,
    )


def render_error_page(message: str) -> str:
    return templates.ERROR_PAGE.format(
        app_name=_e(settings.app_name), message=_e(message)
    )
