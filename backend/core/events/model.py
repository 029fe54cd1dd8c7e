import math
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Event(BaseModel):
    """One vendor-event listing as returned by the events API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    venue_name: Optional[str] = None
    address: Optional[str] = None
    city: str
    state: str
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    start_date: str
    end_date: str
    application_deadline: Optional[str] = None

    booth_fee_min: Optional[int] = None
    booth_fee_max: Optional[int] = None
    vendor_spots: Optional[int] = None
    expected_attendance: Optional[int] = None

    organizer_name: Optional[str] = None
    organizer_email: Optional[str] = None
    website: Optional[str] = None
    application_url: Optional[str] = None
    application_method: Optional[str] = None

    handmade_only: bool = False
    requires_insurance: bool = False
    requires_tent: bool = False
    is_indoor: bool = False
    has_shelter: bool = False
    is_juried: bool = False

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _lenient_coordinate(cls, value):
        # coordinates are informational only; junk becomes None
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return number if math.isfinite(number) else None

    @field_validator(
        "booth_fee_min",
        "booth_fee_max",
        "vendor_spots",
        "expected_attendance",
        mode="before",
    )
    @classmethod
    def _lenient_count(cls, value):
        # fractional numbers are truncated, anything non-numeric becomes None
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return int(number) if math.isfinite(number) else None

    @model_validator(mode="before")
    @classmethod
    def _legacy_booth_fee(cls, data):
        # older API versions send a single "boothFee"
        if not isinstance(data, dict) or "boothFee" not in data:
            return data
        if data.get("boothFeeMin") is None and data.get("boothFeeMax") is None:
            data = {**data, "boothFeeMin": data["boothFee"]}
        return data

    @model_validator(mode="before")
    @classmethod
    def _null_collections(cls, data):
        # upstream sends explicit nulls for empty tags and unset flags
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        if cleaned.get("tags") is None:
            cleaned.pop("tags", None)
        for key in (
            "handmadeOnly",
            "requiresInsurance",
            "requiresTent",
            "isIndoor",
            "hasShelter",
            "isJuried",
        ):
            if key in cleaned and cleaned[key] is None:
                cleaned.pop(key)
        return cleaned


class Location(BaseModel):
    """Search origin and radius (miles) taken from the listing query."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    radius: float


class EventsNearResponse(BaseModel):
    # records are validated one by one by the client
    events: List[Any]
