"""Offline implementations of the resource operations.

Event reads are answered from the offline dataset with the backend's filter
semantics and response shape. Booking operations are inherently online-only
and always return a failure envelope.
"""

from __future__ import annotations

import logging

from eventsphere.errors import OfflineDatasetError
from eventsphere.models.requests import EventFilters, coerce_filters
from eventsphere.models.responses import ApiResponse
from eventsphere.offline.dataset import OfflineEventSource
from eventsphere.offline.filters import filter_events

logger = logging.getLogger(__name__)

OFFLINE_DATA_ERROR = "Failed to load offline data"
EVENT_NOT_FOUND = "Event not found"
BOOKINGS_OFFLINE = "User bookings not available offline"
BOOKING_DETAILS_OFFLINE = "Booking details not available offline"
BOOKING_CREATE_OFFLINE = "Booking creation not available offline"


class OfflineApiService:
    """Serves event reads from an OfflineEventSource."""

    def __init__(self, source: OfflineEventSource) -> None:
        self._source = source

    async def get_events(self, filters: EventFilters | dict | None = None) -> ApiResponse:
        criteria = coerce_filters(filters)
        try:
            events = self._source.list_events()
        except OfflineDatasetError as exc:
            logger.error("Offline dataset unavailable: %s", exc.message)
            return ApiResponse.fail(OFFLINE_DATA_ERROR)

        matched = filter_events(events, criteria)
        return ApiResponse.ok(
            {"events": [event.to_wire() for event in matched], "count": len(matched)}
        )

    async def get_event_by_id(self, event_id: str) -> ApiResponse:
        try:
            events = self._source.list_events()
        except OfflineDatasetError as exc:
            logger.error("Offline dataset unavailable: %s", exc.message)
            return ApiResponse.fail(OFFLINE_DATA_ERROR)

        for event in events:
            if event.id == event_id:
                return ApiResponse.ok({"event": event.to_wire()})
        return ApiResponse.fail(EVENT_NOT_FOUND)

    async def get_user_bookings(self, user_id: str | None = None) -> ApiResponse:
        return ApiResponse.fail(BOOKINGS_OFFLINE)

    async def get_booking_by_id(self, booking_id: str | None = None) -> ApiResponse:
        return ApiResponse.fail(BOOKING_DETAILS_OFFLINE)

    async def create_booking(self, booking: object = None) -> ApiResponse:
        return ApiResponse.fail(BOOKING_CREATE_OFFLINE)
