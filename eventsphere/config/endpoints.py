"""Backend endpoint paths, relative to the configured base URL."""

from __future__ import annotations


class Endpoints:
    """Azure Functions routes exposed by the EventSphere backend."""

    # Events
    GET_EVENTS = "/GetEvents"
    GET_EVENT_BY_ID = "/GetEventById"

    # Bookings
    CREATE_BOOKING = "/CreateBooking"
    GET_USER_BOOKINGS = "/GetUserBookings"
    CANCEL_BOOKING = "/CancelBooking"
    GET_BOOKING_BY_ID = "/GetBookingById"

    HEALTH = "/health"
