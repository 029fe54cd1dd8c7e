"""Display formatting for event fields.

Every function here is total: bad or missing input yields a fallback
string (or ``None``), never an exception.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.common.app_settings import settings
from core.common.log import logger

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

SECONDS_PER_DAY = 86400
URGENT_DAYS = 7


class DeadlineSeverity(str, Enum):
    CLOSED = "closed"
    URGENT = "urgent"
    OPEN = "open"


def _display_tz() -> tzinfo:
    try:
        return ZoneInfo(settings.display_timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            f"unknown DISPLAY_TIMEZONE={settings.display_timezone!r}, using UTC"
        )
        return timezone.utc


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except (TypeError, ValueError):
        logger.debug(f"unparseable timestamp {value!r}")
        return None


def fee_amount(cents: Optional[int]) -> Optional[str]:
    """``$`` plus whole dollars, or ``None`` for a missing or zero fee."""
    if not cents:
        return None
    dollars = (Decimal(cents) / 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${dollars}"


def format_fee(cents: Optional[int]) -> str:
    return fee_amount(cents) or "Free"


def format_fee_range(min_cents: Optional[int], max_cents: Optional[int]) -> str:
    low = fee_amount(min_cents)
    high = fee_amount(max_cents)
    if low is None and high is None:
        return "Fee TBD"
    if low is None:
        return high
    if high is None or low == high:
        return low
    return f"{low} - {high}"


def _local(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    # naive timestamps are taken as already in display time
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(tz or _display_tz())


def format_date(value: Optional[str], tz: Optional[tzinfo] = None) -> str:
    """Render e.g. ``Sat, Mar 15, 9:00 AM``."""
    dt = parse_timestamp(value)
    if dt is None:
        return value or ""
    dt = _local(dt, tz)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{WEEKDAYS[dt.weekday()]}, {MONTHS[dt.month - 1]} {dt.day}, "
        f"{hour}:{dt.minute:02d} {meridiem}"
    )


def format_short_date(dt: datetime) -> str:
    return f"{MONTHS[dt.month - 1]} {dt.day}"


def days_until(
    value: Optional[str],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> Optional[int]:
    """Whole days (rounded up) from now until the timestamp.

    Naive timestamps, including a naive ``now``, are read as display-local
    time, the same rule format_date applies.
    """
    deadline = parse_timestamp(value)
    if deadline is None:
        return None
    zone = tz or _display_tz()
    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=zone)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=zone)
    delta = (deadline - now).total_seconds() / SECONDS_PER_DAY
    return math.ceil(delta)


def deadline_severity(
    value: Optional[str],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> Optional[DeadlineSeverity]:
    days = days_until(value, now, tz)
    if days is None:
        return None
    if days < 0:
        return DeadlineSeverity.CLOSED
    if days <= URGENT_DAYS:
        return DeadlineSeverity.URGENT
    return DeadlineSeverity.OPEN


def format_deadline(
    value: Optional[str],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> Optional[str]:
    days = days_until(value, now, tz)
    if days is None:
        return None
    if days < 0:
        return "Closed"
    if days == 0:
        return "Today!"
    if days <= URGENT_DAYS:
        return f"{days} days left"
    return format_short_date(_local(parse_timestamp(value), tz))


def format_count(value: Optional[int]) -> str:
    if value is None:
        return "?"
    return f"{value:,}"


def format_number(value: float) -> str:
    """Print a float the way the API expects it: ``50`` rather than ``50.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)
