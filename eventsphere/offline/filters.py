"""Client-side event filtering for the offline path.

Mirrors the backend's GET /GetEvents semantics; filters combine with AND:
- category: exact match
- search: case-insensitive substring of title, description or venue city
- city: case-insensitive exact match on venue city
"""

from __future__ import annotations

from eventsphere.models.requests import EventFilters
from eventsphere.models.schemas import Event


def matches_search(event: Event, search: str) -> bool:
    needle = search.lower()
    return (
        needle in event.title.lower()
        or needle in event.description.lower()
        or needle in event.venue.city.lower()
    )


def filter_events(events: list[Event], filters: EventFilters) -> list[Event]:
    if filters.category:
        events = [event for event in events if event.category == filters.category]

    if filters.search:
        events = [event for event in events if matches_search(event, filters.search)]

    if filters.city:
        city = filters.city.lower()
        events = [event for event in events if event.venue.city.lower() == city]

    return events
