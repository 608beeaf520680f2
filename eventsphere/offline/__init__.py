"""Offline event dataset and client-side filtering."""

from eventsphere.offline.dataset import (
    DEFAULT_DATASET_PATH,
    OfflineEventSource,
    StaticEventSource,
    YamlEventSource,
    load_offline_events,
)
from eventsphere.offline.filters import filter_events

__all__ = [
    "DEFAULT_DATASET_PATH",
    "OfflineEventSource",
    "StaticEventSource",
    "YamlEventSource",
    "filter_events",
    "load_offline_events",
]
