"""Offline event sources and YAML dataset loader.

The fallback orchestrator depends only on the OfflineEventSource protocol.
YamlEventSource loads the bundled (or a configured) YAML dataset lazily and
validates every entry into an Event; invalid entries are logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from eventsphere.errors import OfflineDatasetError
from eventsphere.models.schemas import Event

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).with_name("events.yaml")


class OfflineEventSource(Protocol):
    """Read-only, in-process list of events used when the backend is unavailable."""

    def list_events(self) -> list[Event]: ...


class StaticEventSource:
    """In-memory event source."""

    def __init__(self, events: Iterable[Event | dict]) -> None:
        self._events = [
            event if isinstance(event, Event) else Event.model_validate(event)
            for event in events
        ]

    def list_events(self) -> list[Event]:
        return list(self._events)


class YamlEventSource:
    """Event source backed by a YAML file, loaded on first use and cached."""

    def __init__(self, yaml_path: str | Path = DEFAULT_DATASET_PATH) -> None:
        self._path = Path(yaml_path)
        self._events: list[Event] | None = None

    def list_events(self) -> list[Event]:
        if self._events is None:
            self._events = load_offline_events(self._path)
        return list(self._events)


def load_offline_events(yaml_path: str | Path) -> list[Event]:
    """Parse an offline events YAML file into validated Event objects.

    Args:
        yaml_path: Path to a YAML document with a top-level ``events`` list.

    Returns:
        The valid events, in file order.

    Raises:
        OfflineDatasetError: The file is missing, unparsable, or has no
            ``events`` list.
    """
    path = Path(yaml_path)

    if not path.exists():
        raise OfflineDatasetError(f"Offline dataset not found at {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise OfflineDatasetError(f"Failed to parse offline dataset at {path}: {exc}") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("events"), list):
        raise OfflineDatasetError(f"Offline dataset at {path} has no 'events' list")

    events: list[Event] = []
    for index, entry in enumerate(raw["events"]):
        try:
            events.append(Event.model_validate(entry))
        except ValidationError as exc:
            logger.error("Invalid offline event at index %d: %s, skipping", index, exc)

    logger.debug("Loaded %d offline events from %s", len(events), path)
    return events
