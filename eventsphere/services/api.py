"""Fallback orchestrator: the caller-facing EventSphere API.

Every read operation goes through ``_with_fallback``:
1. Already offline and an offline implementation exists: answer offline.
2. Otherwise call the backend.
3. Backend failed and an offline implementation exists: switch to offline for
   the rest of the session and return the offline result instead.
4. Otherwise return the backend result unchanged.

Booking writes are online-only and never fall back. No public operation
raises for network conditions; each resolves to an ApiResponse.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

import httpx

from eventsphere.config.settings import ClientConfig, EventSphereSettings
from eventsphere.integration.api_client import ApiClient
from eventsphere.integration.transport import HttpTransport
from eventsphere.logging_config import configure_logging
from eventsphere.models.requests import (
    CancelBookingRequest,
    CreateBookingRequest,
    EventFilters,
    coerce_filters,
)
from eventsphere.models.responses import ApiResponse
from eventsphere.models.schemas import EventCategory
from eventsphere.offline.dataset import DEFAULT_DATASET_PATH, OfflineEventSource, YamlEventSource
from eventsphere.services.event_service import EventSphereApiService
from eventsphere.services.offline_service import OfflineApiService

logger = logging.getLogger(__name__)

Operation = Callable[[], Awaitable[ApiResponse]]


class EventSphereApi:
    """Resource API with transparent, session-sticky offline fallback.

    Parameters
    ----------
    online_service:
        Backend-backed implementation.
    offline_service:
        Dataset-backed implementation used when the backend is unavailable.
    enable_logging:
        Log online/offline switches at INFO level.
    """

    def __init__(
        self,
        online_service: EventSphereApiService,
        offline_service: OfflineApiService,
        enable_logging: bool = False,
    ) -> None:
        self._online = online_service
        self._offline = offline_service
        self._enable_logging = enable_logging
        self._is_online = True

    # ------------------------------------------------------------------
    # Online/offline state
    # ------------------------------------------------------------------

    def set_online_status(self, status: bool) -> None:
        self._is_online = status

    def get_online_status(self) -> bool:
        return self._is_online

    async def _with_fallback(
        self, online_operation: Operation, offline_operation: Operation | None = None
    ) -> ApiResponse:
        if not self._is_online and offline_operation is not None:
            if self._enable_logging:
                logger.info("Using offline mode", extra={"online": False})
            return await offline_operation()

        result = await online_operation()

        if not result.success and offline_operation is not None:
            if self._enable_logging:
                logger.info(
                    "API unavailable, using offline fallback",
                    extra={"online": False, "error_reason": result.error},
                )
            self._is_online = False
            return await offline_operation()

        return result

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def get_events(self, filters: EventFilters | dict | None = None) -> ApiResponse:
        criteria = coerce_filters(filters)
        return await self._with_fallback(
            lambda: self._online.get_events(criteria),
            lambda: self._offline.get_events(criteria),
        )

    async def get_event_by_id(self, event_id: str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.get_event_by_id(event_id),
            lambda: self._offline.get_event_by_id(event_id),
        )

    async def get_featured_events(self) -> ApiResponse:
        return await self._with_fallback(
            self._online.get_featured_events,
            self._offline.get_events,
        )

    async def search_events(self, query: str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.search_events(query),
            lambda: self._offline.get_events(EventFilters(search=query)),
        )

    async def get_events_by_category(self, category: EventCategory | str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.get_events_by_category(category),
            lambda: self._offline.get_events(EventFilters(category=category)),
        )

    async def get_events_by_city(self, city: str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.get_events_by_city(city),
            lambda: self._offline.get_events(EventFilters(city=city)),
        )

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------

    async def get_user_bookings(self, user_id: str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.get_user_bookings(user_id),
            lambda: self._offline.get_user_bookings(user_id),
        )

    async def get_booking_by_id(self, booking_id: str) -> ApiResponse:
        return await self._with_fallback(
            lambda: self._online.get_booking_by_id(booking_id),
            lambda: self._offline.get_booking_by_id(booking_id),
        )

    async def create_booking(self, booking: CreateBookingRequest | dict) -> ApiResponse:
        # Side-effecting: never simulated offline.
        return await self._online.create_booking(booking)

    async def cancel_booking(self, cancellation: CancelBookingRequest | dict) -> ApiResponse:
        return await self._online.cancel_booking(cancellation)

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    async def check_api_health(self) -> ApiResponse:
        return await self._online.check_api_health()

    def update_base_url(self, base_url: str) -> None:
        """Switch backends; the online flag is left as is."""
        self._online.update_base_url(base_url)


def create_api(
    settings: EventSphereSettings | None = None,
    *,
    config: ClientConfig | None = None,
    event_source: OfflineEventSource | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> EventSphereApi:
    """Wire transport, retrying client, online/offline services and orchestrator.

    ``config`` overrides the ClientConfig resolved from ``settings``;
    ``event_source`` overrides the YAML dataset; ``http_transport`` replaces
    the network (tests, embedded backends).
    """
    settings = settings or EventSphereSettings()  # type: ignore[call-arg]
    config = config or settings.client_config()

    transport = HttpTransport(
        base_url=config.base_url,
        timeout_seconds=config.timeout_seconds,
        log_api_calls=config.log_api_calls,
        http_transport=http_transport,
    )
    client = ApiClient(transport, config)

    if event_source is None:
        dataset_path = (
            Path(settings.offline_dataset_path)
            if settings.offline_dataset_path
            else DEFAULT_DATASET_PATH
        )
        event_source = YamlEventSource(dataset_path)

    if config.enable_logging:
        logger.info(
            "EventSphere API targeting %s (local=%s, fallback=%s, attempts=%d)",
            config.base_url,
            config.is_local_target,
            config.fallback_enabled,
            client.policy.max_attempts,
        )

    return EventSphereApi(
        online_service=EventSphereApiService(client),
        offline_service=OfflineApiService(event_source),
        enable_logging=config.enable_logging,
    )


@functools.lru_cache(maxsize=1)
def get_api() -> EventSphereApi:
    """Process-wide API instance built from environment settings.

    Also installs JSON logging at the configured level.
    """
    settings = EventSphereSettings()  # type: ignore[call-arg]
    configure_logging(settings.log_level)
    return create_api(settings)
