"""Client error hierarchy.

All client-specific errors extend EventSphereError. Transport errors carry a
``kind`` tag so the retrying client can branch on the failure class instead of
inspecting message text. They are raised only by the transport and converted
into ``{ success: False, error }`` envelopes by the retrying client.
"""

from __future__ import annotations

from enum import Enum


class TransportErrorKind(str, Enum):
    """Failure classes produced by the HTTP transport."""

    NETWORK_UNREACHABLE = "network_unreachable"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"


class EventSphereError(Exception):
    """Base error for all client-specific errors."""

    message: str = "EventSphere client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(EventSphereError):
    """A single HTTP exchange could not be completed successfully."""

    kind: TransportErrorKind = TransportErrorKind.NETWORK_ERROR
    message = "Network error"


class NetworkUnreachableError(TransportError):
    """The request never reached the server (DNS failure, connection refused)."""

    kind = TransportErrorKind.NETWORK_UNREACHABLE
    message = "Network request failed"


class RequestTimeoutError(TransportError):
    """The server accepted the connection but did not answer in time."""

    kind = TransportErrorKind.TIMEOUT
    message = "Request timed out"


class HttpStatusError(TransportError):
    """The server answered with a non-2xx status."""

    kind = TransportErrorKind.HTTP_ERROR

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}", status_code=status_code)


class ResponseParseError(TransportError):
    """A 2xx response body was not a usable JSON document."""

    kind = TransportErrorKind.PARSE_ERROR
    message = "Invalid JSON response"


class OfflineDatasetError(EventSphereError):
    """The offline event dataset could not be loaded."""

    message = "Failed to load offline data"
