"""Structured JSON logging configuration.

Emits JSON-formatted log entries for the eventsphere loggers with required
fields: level, timestamp, logger, message. Request fields are added
contextually through ``extra`` (method, url, attempt, max_attempts for
requests; status_code, duration_ms for responses; error_kind for failures;
online for fallback switches).

SECURITY: Never logs credential values, auth tokens or booking contact details.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import IO

_PACKAGE_LOGGER = "eventsphere"
_HANDLER_MARKER = "_eventsphere_json"

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|authorization|phone)"
    r"[\s\"']*[=:]\s*\S+",
    re.IGNORECASE,
)
_EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")

_REQUEST_FIELDS = (
    "method",
    "url",
    "attempt",
    "max_attempts",
    "status_code",
    "duration_ms",
    "online",
)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: level, timestamp, logger, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _REQUEST_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        # Failure fields
        if hasattr(record, "error_kind"):
            entry["error_kind"] = str(getattr(record, "error_kind"))
        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(
                str(getattr(record, "error_reason"))
            )

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        text = _SENSITIVE_PATTERNS.sub("[REDACTED]", text)
        return _EMAIL_PATTERN.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> logging.Handler:
    """Install a JSON handler for the eventsphere loggers.

    Calling it again replaces the handler it installed before; handlers owned
    by the host application are left alone.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    stream:
        Destination stream, stderr when omitted.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(package_logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    setattr(handler, _HANDLER_MARKER, True)
    package_logger.addHandler(handler)
    return handler
