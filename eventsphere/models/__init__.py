"""Public models for the EventSphere client."""

from eventsphere.models.requests import (
    CancelBookingRequest,
    CreateBookingRequest,
    EventFilters,
    HttpMethod,
    RequestDescriptor,
    TicketType,
    UserDetails,
)
from eventsphere.models.responses import ApiResponse
from eventsphere.models.schemas import (
    Event,
    EventCategory,
    EventStatus,
    Organizer,
    PriceRange,
    Venue,
)

__all__ = [
    "ApiResponse",
    "CancelBookingRequest",
    "CreateBookingRequest",
    "Event",
    "EventCategory",
    "EventFilters",
    "EventStatus",
    "HttpMethod",
    "Organizer",
    "PriceRange",
    "RequestDescriptor",
    "TicketType",
    "UserDetails",
    "Venue",
]
