"""Online EventSphere service: typed resource calls over the retrying client."""

from __future__ import annotations

from eventsphere.config.endpoints import Endpoints
from eventsphere.integration.api_client import ApiClient
from eventsphere.models.requests import (
    CancelBookingRequest,
    CreateBookingRequest,
    EventFilters,
    coerce_filters,
    to_wire,
)
from eventsphere.models.responses import ApiResponse
from eventsphere.models.schemas import EventCategory


class EventSphereApiService:
    """Maps resource operations onto backend endpoints.

    Response data is the backend's parsed JSON:
    events ``{events, count}``, single event ``{event}``, bookings
    ``{bookings, upcomingBookings, pastBookings, totalBookings}``, booking
    creation ``{success, booking, message}``, health ``{status, timestamp}``.
    """

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_events(self, filters: EventFilters | dict | None = None) -> ApiResponse:
        params = coerce_filters(filters).as_params()
        return await self._client.get(Endpoints.GET_EVENTS, params)

    async def get_event_by_id(self, event_id: str) -> ApiResponse:
        return await self._client.get(Endpoints.GET_EVENT_BY_ID, {"id": event_id})

    async def get_featured_events(self) -> ApiResponse:
        # No dedicated featured endpoint; the unfiltered listing is used.
        return await self.get_events()

    async def search_events(self, query: str) -> ApiResponse:
        return await self.get_events(EventFilters(search=query))

    async def get_events_by_category(self, category: EventCategory | str) -> ApiResponse:
        return await self.get_events(EventFilters(category=category))

    async def get_events_by_city(self, city: str) -> ApiResponse:
        return await self.get_events(EventFilters(city=city))

    async def get_user_bookings(self, user_id: str) -> ApiResponse:
        return await self._client.get(Endpoints.GET_USER_BOOKINGS, {"userId": user_id})

    async def get_booking_by_id(self, booking_id: str) -> ApiResponse:
        return await self._client.get(Endpoints.GET_BOOKING_BY_ID, {"id": booking_id})

    async def create_booking(self, booking: CreateBookingRequest | dict) -> ApiResponse:
        payload = CreateBookingRequest.model_validate(booking)
        return await self._client.post(Endpoints.CREATE_BOOKING, to_wire(payload))

    async def cancel_booking(self, cancellation: CancelBookingRequest | dict) -> ApiResponse:
        payload = CancelBookingRequest.model_validate(cancellation)
        return await self._client.post(Endpoints.CANCEL_BOOKING, to_wire(payload))

    async def check_api_health(self) -> ApiResponse:
        return await self._client.get(Endpoints.HEALTH)

    def update_base_url(self, base_url: str) -> None:
        self._client.update_base_url(base_url)
