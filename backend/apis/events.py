import math
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from core.common.app_settings import settings
from core.common.base import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_RADIUS,
    FETCH_FAILED_MESSAGE,
)
from core.common.log import logger
from core.events import (
    EventsApiClient,
    EventsApiError,
    Location,
    render_error_page,
    render_events_page,
)


router = APIRouter(tags=["Events"])


def get_events_client() -> EventsApiClient:
    return EventsApiClient(settings.api_url, timeout=settings.api_timeout)


def _query_float(raw: Optional[str], default: float) -> float:
    # absent, unparseable or non-finite values all fall back to the default
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if math.isfinite(value) else default


def location_from_query(request: Request) -> Location:
    params = request.query_params
    return Location(
        latitude=_query_float(params.get("lat"), DEFAULT_LATITUDE),
        longitude=_query_float(params.get("lng"), DEFAULT_LONGITUDE),
        radius=_query_float(params.get("radius"), DEFAULT_RADIUS),
    )


@router.get("/", response_class=HTMLResponse, summary="Vendor events near a location")
async def list_events(
    location: Location = Depends(location_from_query),
    client: EventsApiClient = Depends(get_events_client),
):
    try:
        events = await client.fetch_events_near(location)
    except EventsApiError as e:
        logger.opt(exception=e).error(f"[events.list] failed to fetch events: {e}")
        return HTMLResponse(render_error_page(FETCH_FAILED_MESSAGE))

    logger.info(
        f"[events.list] lat={location.latitude}, lng={location.longitude}, "
        f"radius={location.radius}, events={len(events)}"
    )
    return HTMLResponse(render_events_page(events, location))
