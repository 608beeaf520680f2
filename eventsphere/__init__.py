"""EventSphere client network access layer."""

from eventsphere.services.api import EventSphereApi, create_api, get_api

__all__ = ["EventSphereApi", "create_api", "get_api"]
