"""Single-shot JSON-over-HTTP transport for the EventSphere backend.

Performs exactly one HTTP exchange per call and normalizes the outcome:
a 2xx JSON body becomes a successful ApiResponse, anything else is raised as
a tagged TransportError. This layer never retries and never catches its own
failures; recovery is the retrying client's job.
"""

from __future__ import annotations

import json
import logging
import time

import httpx

from eventsphere.errors import (
    HttpStatusError,
    NetworkUnreachableError,
    RequestTimeoutError,
    ResponseParseError,
    TransportError,
)
from eventsphere.models.requests import RequestDescriptor
from eventsphere.models.responses import ApiResponse

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {"Content-Type": "application/json"}


class HttpTransport:
    """Issues one HTTP request against a base URL.

    Parameters
    ----------
    base_url:
        Backend base URL (e.g. "https://eventsphereindia-api.azurewebsites.net/api").
    timeout_seconds:
        Per-request timeout enforced by the httpx client (default 10).
    default_headers:
        Headers applied to every request, after ``Content-Type``.
    log_api_calls:
        Log every request and response at INFO level.
    http_transport:
        Optional httpx transport (e.g. ``httpx.MockTransport`` or
        ``httpx.ASGITransport``) used instead of the network.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        default_headers: dict[str, str] | None = None,
        log_api_calls: bool = False,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._default_headers = dict(default_headers or {})
        self._log_api_calls = log_api_calls
        self._http_transport = http_transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def update_base_url(self, base_url: str) -> None:
        """Point subsequent requests at a different backend."""
        self._base_url = base_url.rstrip("/")
        logger.info("Base URL updated to %s", self._base_url)

    def build_url(self, descriptor: RequestDescriptor) -> str:
        target = descriptor.target()
        if not target.startswith("/"):
            target = f"/{target}"
        return f"{self._base_url}{target}"

    def build_headers(self, descriptor: RequestDescriptor) -> dict[str, str]:
        return {**_DEFAULT_HEADERS, **self._default_headers, **(descriptor.headers or {})}

    async def send(self, descriptor: RequestDescriptor) -> ApiResponse:
        """Perform the request and return a successful envelope.

        Raises
        ------
        NetworkUnreachableError
            The server could not be reached (connection refused, DNS failure).
        RequestTimeoutError
            The request did not complete within the timeout.
        HttpStatusError
            The server answered with a non-2xx status.
        ResponseParseError
            A 2xx body was empty, not JSON, or JSON ``null``.
        TransportError
            Any other request-level failure, including undecodable bodies.
        """
        url = self.build_url(descriptor)
        headers = self.build_headers(descriptor)
        content = json.dumps(descriptor.body).encode("utf-8") if descriptor.sends_body else None
        method = descriptor.method.value

        started = time.monotonic()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._http_transport
            ) as client:
                response = await client.request(method, url, headers=headers, content=content)
        except (httpx.ConnectError, httpx.ConnectTimeout) as exc:
            raise NetworkUnreachableError(_describe("Network request failed", exc)) from exc
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(_describe("Request timed out", exc)) from exc
        except httpx.TransportError as exc:
            raise TransportError(_describe("Network error", exc)) from exc
        except httpx.RequestError as exc:
            # Undecodable bodies and other request-level failures.
            raise TransportError(_describe("Network error", exc)) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 1)

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseParseError(f"Invalid JSON response from {url}") from exc

        if data is None:
            raise ResponseParseError(f"Empty JSON response from {url}")

        if self._log_api_calls:
            logger.info(
                "API response: %s %s -> %d",
                method,
                url,
                response.status_code,
                extra={
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )

        return ApiResponse.ok(data)


def _describe(prefix: str, exc: Exception) -> str:
    detail = str(exc)
    return f"{prefix}: {detail}" if detail else prefix
