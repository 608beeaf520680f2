"""Configuration module: settings, resolved client config and endpoints."""

from eventsphere.config.endpoints import Endpoints
from eventsphere.config.settings import (
    ClientConfig,
    ConfigValidation,
    Environment,
    EventSphereSettings,
    is_local_host,
    validate_api_config,
)

__all__ = [
    "ClientConfig",
    "ConfigValidation",
    "Endpoints",
    "Environment",
    "EventSphereSettings",
    "is_local_host",
    "validate_api_config",
]
