"""Request descriptor and request payload models.

A RequestDescriptor fully describes one HTTP exchange and is immutable once
built. Query parameters whose value is falsy ("" or None) are always omitted:
callers drop a filter by passing an empty value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eventsphere.models.schemas import CamelModel, EventCategory


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


_BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT})


class RequestDescriptor(BaseModel):
    """One outbound HTTP request."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str = Field(..., min_length=1)
    params: dict[str, str | None] | None = None
    body: Any = None
    headers: dict[str, str] | None = None

    def query_items(self) -> list[tuple[str, str]]:
        """Query parameters in insertion order, falsy values dropped."""
        if not self.params:
            return []
        return [(key, value) for key, value in self.params.items() if value]

    def query_string(self) -> str:
        return urlencode(self.query_items())

    def target(self) -> str:
        """Path plus encoded query string, relative to the base URL."""
        query = self.query_string()
        return f"{self.path}?{query}" if query else self.path

    @property
    def sends_body(self) -> bool:
        return self.method in _BODY_METHODS and self.body is not None


class EventFilters(BaseModel):
    """Optional filters for GET /GetEvents. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    category: EventCategory | None = None
    search: str | None = None
    city: str | None = None

    @field_validator("category", "search", "city", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        return value or None

    def as_params(self) -> dict[str, str | None]:
        return {
            "category": self.category.value if self.category else None,
            "search": self.search,
            "city": self.city,
        }


def coerce_filters(filters: EventFilters | dict | None) -> EventFilters:
    """Accept a filters model or mapping; a malformed mapping raises ValidationError."""
    if filters is None:
        return EventFilters()
    if isinstance(filters, EventFilters):
        return filters
    return EventFilters.model_validate(filters)


class TicketType(str, Enum):
    GENERAL = "general"
    VIP = "vip"


class UserDetails(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)


class CreateBookingRequest(CamelModel):
    """Payload for POST /CreateBooking."""

    user_id: str = Field(..., min_length=1)
    event_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    user_details: UserDetails
    ticket_type: TicketType | None = None


class CancelBookingRequest(CamelModel):
    """Payload for POST /CancelBooking."""

    booking_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    reason: str | None = None


def to_wire(payload: BaseModel) -> dict[str, Any]:
    """camelCase JSON body for a request payload model."""
    return payload.model_dump(by_alias=True, mode="json", exclude_none=True)
