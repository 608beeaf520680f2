"""Pydantic Settings for the EventSphere client.

All environment variables use the EVENTSPHERE_ prefix.
Example: EVENTSPHERE_ENVIRONMENT=development, EVENTSPHERE_BASE_URL=http://localhost:7071/api

Settings are resolved once at startup into a frozen ClientConfig; the transport,
retry policy and fallback orchestrator read only that object.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

_LOCAL_HOSTNAMES = frozenset({"localhost", "127.0.0.1", "::1"})


class Environment(str, Enum):
    """Deployment environment of the host application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class EnvironmentFlags(BaseModel):
    """Per-environment switches for logging and offline fallback."""

    enable_logging: bool
    enable_mock_fallback: bool
    log_api_calls: bool


ENVIRONMENT_DEFAULTS: dict[Environment, EnvironmentFlags] = {
    Environment.DEVELOPMENT: EnvironmentFlags(
        enable_logging=True, enable_mock_fallback=True, log_api_calls=True
    ),
    Environment.PRODUCTION: EnvironmentFlags(
        enable_logging=False, enable_mock_fallback=False, log_api_calls=False
    ),
}


def is_local_host(url: str) -> bool:
    """Return True when *url* points at a local development host."""
    hostname = urlparse(url).hostname or ""
    return hostname.lower() in _LOCAL_HOSTNAMES


class ClientConfig(BaseModel):
    """Resolved, immutable configuration consumed by the network layer."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    is_local_target: bool = False
    fallback_enabled: bool = False
    retry_attempts: int = Field(default=3, ge=0)
    retry_delay_ms: int = Field(default=1000, ge=0)
    timeout_ms: int = Field(default=10000, ge=1)
    log_api_calls: bool = False
    enable_logging: bool = False

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def with_base_url(self, base_url: str) -> ClientConfig:
        """Return a copy targeting *base_url*, re-deriving ``is_local_target``."""
        return self.model_copy(
            update={"base_url": base_url, "is_local_target": is_local_host(base_url)}
        )


class EventSphereSettings(BaseSettings):
    """EventSphere client configuration validated from environment variables."""

    environment: Environment = Environment.PRODUCTION
    log_level: str = "INFO"

    # Backend
    base_url: str | None = None  # Explicit override, else production_url
    local_url: str = "http://localhost:7071/api"
    production_url: str = "https://eventsphereindia-api.azurewebsites.net/api"

    # Requests
    request_timeout_ms: int = Field(default=10000, ge=1)
    retry_attempts: int = Field(default=3, ge=0)
    retry_delay_ms: int = Field(default=1000, ge=0)  # Linear: delay * attempt

    # Environment overrides (None = environment default)
    enable_logging: bool | None = None
    enable_mock_fallback: bool | None = None
    log_api_calls: bool | None = None

    # Offline dataset
    offline_dataset_path: str | None = None  # None = bundled events.yaml

    model_config = {"env_prefix": "EVENTSPHERE_"}

    @property
    def resolved_base_url(self) -> str:
        return self.base_url or self.production_url

    @property
    def is_local_development(self) -> bool:
        """Development environment pointed at the local Functions host."""
        return (
            self.environment is Environment.DEVELOPMENT
            and self.resolved_base_url.rstrip("/") == self.local_url.rstrip("/")
        )

    def flags(self) -> EnvironmentFlags:
        """Environment defaults with any explicit overrides applied."""
        defaults = ENVIRONMENT_DEFAULTS[self.environment]
        return EnvironmentFlags(
            enable_logging=_pick(self.enable_logging, defaults.enable_logging),
            enable_mock_fallback=_pick(
                self.enable_mock_fallback, defaults.enable_mock_fallback
            ),
            log_api_calls=_pick(self.log_api_calls, defaults.log_api_calls),
        )

    def client_config(self) -> ClientConfig:
        """Resolve the immutable ClientConfig used by the network layer."""
        flags = self.flags()
        base_url = self.resolved_base_url
        return ClientConfig(
            base_url=base_url,
            is_local_target=is_local_host(base_url),
            fallback_enabled=flags.enable_mock_fallback,
            retry_attempts=self.retry_attempts,
            retry_delay_ms=self.retry_delay_ms,
            timeout_ms=self.request_timeout_ms,
            log_api_calls=flags.log_api_calls,
            enable_logging=flags.enable_logging,
        )


def _pick(override: bool | None, default: bool) -> bool:
    return default if override is None else override


class ConfigValidation(BaseModel):
    """Outcome of validate_api_config."""

    valid: bool
    issues: list[str] = []


def validate_api_config(settings: EventSphereSettings) -> ConfigValidation:
    """Check the settings against the backend's deployment expectations."""
    issues: list[str] = []

    if "azurewebsites.net" not in (urlparse(settings.production_url).hostname or ""):
        issues.append(
            "Production URL should point to Azure Functions (.azurewebsites.net)"
        )

    if settings.request_timeout_ms < 5000:
        issues.append("Timeout should be at least 5 seconds for Azure Functions")

    if settings.retry_attempts < 1:
        issues.append("Should have at least 1 retry attempt")

    return ConfigValidation(valid=not issues, issues=issues)
