"""
Renderer Tests
==============
Listing page structure and per-card content.
"""
import re
from datetime import datetime, timedelta, timezone

from core.events import Event, Location, render_error_page, render_events_page
from core.events.render import (
    CATEGORY_COLORS,
    NEUTRAL_COLOR,
    REQUIREMENT_BADGES,
    render_event_card,
)

LOCATION = Location(latitude=35.7796, longitude=-78.6382, radius=50)
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _event(event_payload, **overrides) -> Event:
    return Event.model_validate(event_payload(**overrides))


def _card_count(page: str) -> int:
    return page.count('class="event-card"')


class TestPage:
    def test_empty_list_shows_placeholder(self):
        page = render_events_page([], LOCATION)
        assert 'class="empty"' in page
        assert "No events found in your area" in page
        assert _card_count(page) == 0

    def test_document_is_self_contained(self, event_payload):
        page = render_events_page([_event(event_payload)], LOCATION)
        assert page.startswith("<!DOCTYPE html>")
        assert "<style>" in page and "<script>" in page
        assert "<link" not in page
        assert "src=" not in page

    def test_one_card_per_event_in_order(self, event_payload):
        events = [
            _event(event_payload, id=str(i), name=f"Market {i}") for i in (3, 1, 2)
        ]
        page = render_events_page(events, LOCATION)
        assert _card_count(page) == 3
        positions = [page.index(f"Market {i}") for i in (3, 1, 2)]
        assert positions == sorted(positions)

    def test_filters_default_to_all(self):
        page = render_events_page([], LOCATION)
        active = re.findall(r'class="filter-btn active" data-filter="(\w+)"', page)
        assert active == ["all"]
        for value in ("farmers_market", "craft_fair", "festival", "flea_market"):
            assert f'data-filter="{value}"' in page

    def test_filter_script_toggles_by_category(self):
        page = render_events_page([], LOCATION)
        assert "card.dataset.category === filter" in page
        assert "classList.remove('active')" in page

    def test_subtitle_shows_location(self):
        page = render_events_page([], LOCATION)
        assert "within 50 miles of 35.7796, -78.6382" in page


class TestCard:
    def test_basic_fields(self, event_payload):
        card = render_event_card(_event(event_payload), now=NOW)
        assert "Downtown Raleigh Farmers Market" in card
        assert "City Plaza · Raleigh, NC" in card
        assert "Sat, Mar 14, 9:00 AM" in card
        assert "12,000 expected" in card
        assert "$25 - $50" in card
        assert "80 vendor spots · by Raleigh Markets Co" in card
        assert 'data-category="farmers_market"' in card

    def test_location_without_venue(self, event_payload):
        card = render_event_card(_event(event_payload, venueName=None))
        assert "📍 Raleigh, NC" in card
        assert " · Raleigh, NC" not in card

    def test_missing_attendance_omits_line(self, event_payload):
        card = render_event_card(_event(event_payload, expectedAttendance=None))
        assert "expected" not in card
        assert "👥" not in card

    def test_only_first_five_tags(self, event_payload):
        tags = [f"tag{i}" for i in range(1, 8)]
        card = render_event_card(_event(event_payload, tags=tags))
        assert card.count('class="tag"') == 5
        assert "#tag5" in card
        assert "#tag6" not in card and "#tag7" not in card

    def test_no_tags_no_tag_row(self, event_payload):
        card = render_event_card(_event(event_payload, tags=[]))
        assert 'class="tags"' not in card

    def test_category_badge_color_and_label(self, event_payload):
        card = render_event_card(_event(event_payload, category="craft_fair"))
        assert CATEGORY_COLORS["craft_fair"] in card
        assert ">craft fair</span>" in card

    def test_unknown_category_is_neutral(self, event_payload):
        card = render_event_card(_event(event_payload, category="art_walk_night"))
        assert NEUTRAL_COLOR in card
        assert ">art walk night</span>" in card

    def test_missing_category(self, event_payload):
        card = render_event_card(_event(event_payload, category=None))
        assert NEUTRAL_COLOR in card
        assert ">event</span>" in card
        assert 'data-category=""' in card

    def test_requirement_badges_only_for_true_flags(self, event_payload):
        card = render_event_card(
            _event(event_payload, handmadeOnly=True, isJuried=True)
        )
        assert card.count('class="requirement"') == 2
        assert REQUIREMENT_BADGES["handmade_only"].label in card
        assert REQUIREMENT_BADGES["is_juried"].label in card
        assert REQUIREMENT_BADGES["requires_tent"].label not in card

    def test_no_flags_no_requirement_row(self, event_payload):
        card = render_event_card(_event(event_payload))
        assert 'class="requirements"' not in card

    def test_urgent_deadline_badge(self, event_payload):
        deadline = (NOW + timedelta(days=3)).isoformat()
        card = render_event_card(
            _event(event_payload, applicationDeadline=deadline), now=NOW
        )
        assert "deadline-urgent" in card
        assert "3 days left" in card

    def test_closed_deadline_badge(self, event_payload):
        deadline = (NOW - timedelta(days=1)).isoformat()
        card = render_event_card(
            _event(event_payload, applicationDeadline=deadline), now=NOW
        )
        assert "deadline-closed" in card
        assert "Closed" in card

    def test_no_deadline_no_badge(self, event_payload):
        card = render_event_card(_event(event_payload), now=NOW)
        assert "deadline-badge" not in card

    def test_description_fallback(self, event_payload):
        card = render_event_card(_event(event_payload, description=None))
        assert "No description provided." in card

    def test_fee_tbd_and_unknown_spots(self, event_payload):
        card = render_event_card(
            _event(
                event_payload,
                boothFeeMin=None,
                boothFeeMax=None,
                vendorSpots=None,
                organizerName=None,
            )
        )
        assert "Fee TBD" in card
        assert "? vendor spots</div>" in card

    def test_action_links(self, event_payload):
        card = render_event_card(_event(event_payload))
        assert 'href="https://example.com/market/apply"' in card
        assert "Apply Now" in card
        assert ">Info</a>" in card

    def test_only_info_link(self, event_payload):
        card = render_event_card(_event(event_payload, applicationUrl=None))
        assert "Apply Now" not in card
        assert ">Info</a>" in card

    def test_no_links(self, event_payload):
        card = render_event_card(
            _event(event_payload, applicationUrl=None, website=None)
        )
        assert "<a " not in card
        assert "event-actions" not in card

    def test_values_are_escaped(self, event_payload):
        card = render_event_card(
            _event(event_payload, name="<script>alert(1)</script>", tags=['"x"'])
        )
        assert "<script>" not in card
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in card
        assert "#&quot;x&quot;" in card


class TestErrorPage:
    def test_message_is_shown(self):
        page = render_error_page("Failed to load events. Please try again later.")
        assert "Something went wrong" in page
        assert "Failed to load events. Please try again later." in page

    def test_message_is_escaped(self):
        page = render_error_page("<b>bad</b>")
        assert "<b>bad</b>" not in page
        assert "&lt;b&gt;bad&lt;/b&gt;" in page
