"""Retrying HTTP client for the EventSphere backend.

Wraps HttpTransport with a bounded retry loop and linear backoff, and
translates every transport failure into a ``{ success: False, error }``
envelope. Callers branch on ``response.success`` and never need try/except
for network conditions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from eventsphere.config.settings import ClientConfig
from eventsphere.errors import TransportError
from eventsphere.integration.transport import HttpTransport
from eventsphere.models.requests import HttpMethod, RequestDescriptor
from eventsphere.models.responses import ApiResponse
from eventsphere.resilience.retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


class ApiClient:
    """HTTP client with retry policy and envelope translation.

    Parameters
    ----------
    transport:
        Single-shot transport used for every attempt.
    config:
        Resolved client configuration; the retry policy is derived from it.
    """

    def __init__(self, transport: HttpTransport, config: ClientConfig) -> None:
        self._transport = transport
        self._config = config
        self._policy = RetryPolicy.from_config(config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def update_base_url(self, base_url: str) -> None:
        """Retarget the client; the fast-fail rule is re-derived for the new host."""
        self._config = self._config.with_base_url(base_url)
        self._policy = RetryPolicy.from_config(self._config)
        self._transport.update_base_url(base_url)

    async def request(self, descriptor: RequestDescriptor) -> ApiResponse:
        """Send *descriptor*, retrying per policy. Never raises for transport failures."""
        max_attempts = self._policy.max_attempts
        url = self._transport.build_url(descriptor)

        for attempt in range(1, max_attempts + 1):
            if self._config.log_api_calls:
                logger.info(
                    "API request (attempt %d): %s %s",
                    attempt,
                    descriptor.method.value,
                    url,
                    extra={
                        "method": descriptor.method.value,
                        "url": url,
                        "attempt": attempt,
                        "max_attempts": max_attempts,
                    },
                )

            try:
                return await self._transport.send(descriptor)
            except TransportError as exc:
                if self._policy.is_quiet_failure(exc):
                    if attempt == 1:
                        logger.info("Local API unavailable, will use offline fallback")
                else:
                    logger.error(
                        "API error (attempt %d/%d) for %s %s: %s",
                        attempt,
                        max_attempts,
                        descriptor.method.value,
                        url,
                        exc.message,
                        extra={
                            "attempt": attempt,
                            "max_attempts": max_attempts,
                            "error_kind": exc.kind.value,
                        },
                    )

                if attempt == max_attempts:
                    return ApiResponse.fail(exc.message or "Network error")

                if self._policy.should_delay(exc):
                    await asyncio.sleep(self._policy.delay_seconds(attempt))

        return ApiResponse.fail("Max retry attempts reached")

    async def get(self, path: str, params: dict[str, str | None] | None = None) -> ApiResponse:
        return await self.request(
            RequestDescriptor(method=HttpMethod.GET, path=path, params=params)
        )

    async def post(self, path: str, data: Any = None) -> ApiResponse:
        return await self.request(
            RequestDescriptor(method=HttpMethod.POST, path=path, body=data)
        )

    async def put(self, path: str, data: Any = None) -> ApiResponse:
        return await self.request(
            RequestDescriptor(method=HttpMethod.PUT, path=path, body=data)
        )

    async def delete(self, path: str) -> ApiResponse:
        return await self.request(RequestDescriptor(method=HttpMethod.DELETE, path=path))
