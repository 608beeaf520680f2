"""Retry policy for calls to the EventSphere backend.

Normal targets get ``retry_attempts`` tries with a linear backoff of
``retry_delay_ms * attempt`` between them. A local development target with
offline fallback enabled fails fast: a single attempt, because a missing local
backend is expected and the offline dataset will answer instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from eventsphere.config.settings import ClientConfig
from eventsphere.errors import TransportError, TransportErrorKind


@dataclass(frozen=True)
class RetryPolicy:
    """Attempt bound and backoff schedule derived from a ClientConfig."""

    retry_attempts: int = 3
    retry_delay_ms: int = 1000
    is_local_target: bool = False
    fallback_enabled: bool = False

    @classmethod
    def from_config(cls, config: ClientConfig) -> RetryPolicy:
        return cls(
            retry_attempts=config.retry_attempts,
            retry_delay_ms=config.retry_delay_ms,
            is_local_target=config.is_local_target,
            fallback_enabled=config.fallback_enabled,
        )

    @property
    def fast_fail(self) -> bool:
        return self.is_local_target and self.fallback_enabled

    @property
    def max_attempts(self) -> int:
        return 1 if self.fast_fail else self.retry_attempts

    def delay_seconds(self, attempt: int) -> float:
        """Backoff before the attempt following *attempt* (1-based)."""
        return self.retry_delay_ms * attempt / 1000

    def is_quiet_failure(self, exc: TransportError) -> bool:
        """A known-absent local backend: log once, tersely."""
        return self.fast_fail and exc.kind is TransportErrorKind.NETWORK_UNREACHABLE

    def should_delay(self, exc: TransportError) -> bool:
        return not (
            self.is_local_target and exc.kind is TransportErrorKind.NETWORK_UNREACHABLE
        )
