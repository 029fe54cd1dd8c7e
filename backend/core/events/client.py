from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from core.common.base import EVENTS_NEAR_PATH
from core.common.log import logger
from core.events.format import format_number
from core.events.model import Event, EventsNearResponse, Location


class EventsApiError(Exception):
    """The events API could not be reached or returned an unusable answer."""


def _record_id(record: Any) -> Any:
    return record.get("id") if isinstance(record, dict) else None


class EventsApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def near_url(self) -> str:
        return f"{self.base_url}{EVENTS_NEAR_PATH}"

    @staticmethod
    def near_params(location: Location) -> dict[str, str]:
        return {
            "lat": format_number(location.latitude),
            "lng": format_number(location.longitude),
            "radius": format_number(location.radius),
        }

    async def fetch_events_near(self, location: Location) -> List[Event]:
        """Single GET against /api/events/near, no retry."""
        url = self.near_url()
        params = self.near_params(location)
        logger.debug(f"[events.api] GET {url} params={params}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise EventsApiError(
                f"events API returned {e.response.status_code}: {e.response.text[:200]!r}"
            ) from e
        except httpx.HTTPError as e:
            raise EventsApiError(f"events API request failed: {e!r}") from e
        except ValueError as e:
            raise EventsApiError(f"events API returned invalid JSON: {e}") from e

        try:
            records = EventsNearResponse.model_validate(payload).events
        except ValidationError as e:
            raise EventsApiError(
                f"events API payload has unexpected shape: {e.error_count()} errors"
            ) from e

        events = []
        for index, record in enumerate(records):
            try:
                events.append(Event.model_validate(record))
            except ValidationError as e:
                # one malformed record must not hide the rest of the listing
                logger.warning(
                    f"[events.api] skipping record #{index} "
                    f"id={_record_id(record)!r}: {e.error_count()} invalid fields"
                )

        logger.debug(f"[events.api] received {len(events)} events")
        return events
