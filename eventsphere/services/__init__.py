"""Resource services: online, offline and the fallback orchestrator."""

from eventsphere.services.api import EventSphereApi, create_api, get_api
from eventsphere.services.event_service import EventSphereApiService
from eventsphere.services.offline_service import OfflineApiService

__all__ = [
    "EventSphereApi",
    "EventSphereApiService",
    "OfflineApiService",
    "create_api",
    "get_api",
]
