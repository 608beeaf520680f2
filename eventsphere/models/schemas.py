"""Pydantic models for EventSphere domain resources.

The backend speaks camelCase JSON; models accept both camelCase and
snake_case input and dump camelCase with ``by_alias=True``. Online payloads
are passed through as parsed JSON; these models validate the offline dataset
so that offline results have the same shape as server results.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventCategory(str, Enum):
    """Event categories offered by the backend."""

    MUSIC = "Music"
    TECHNOLOGY = "Technology"
    BUSINESS = "Business"
    ARTS = "Arts"
    SPORTS = "Sports"
    FOOD = "Food"
    HEALTH = "Health"
    EDUCATION = "Education"
    ENTERTAINMENT = "Entertainment"
    COMEDY = "Comedy"
    THEATRE = "Theatre"
    WORKSHOP = "Workshop"


class EventStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Venue(CamelModel):
    name: str
    address: str
    city: str
    state: str
    pincode: str
    latitude: float | None = None
    longitude: float | None = None


class PriceRange(CamelModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str = "INR"


class Organizer(CamelModel):
    id: str
    name: str
    avatar: str | None = None


class Event(CamelModel):
    """A bookable event as returned by GET /GetEvents."""

    id: str = Field(..., min_length=1)
    title: str
    description: str
    short_description: str = ""
    images: list[str] = []
    date: datetime
    time: str
    venue: Venue
    category: EventCategory
    price: PriceRange
    is_free: bool = False
    organizer: Organizer
    capacity: int = Field(ge=0)
    booked_count: int = Field(default=0, ge=0)
    status: EventStatus = EventStatus.ACTIVE
    tags: list[str] = []
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    created_at: datetime | None = None

    def to_wire(self) -> dict:
        """camelCase JSON-compatible dict, the shape the backend returns."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
