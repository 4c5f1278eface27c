"""Logging configuration for the expense client.

Plain-text logging by default; ``json_output=True`` switches the root handler
to JSON entries with required fields: timestamp, level, logger, message.
Request-specific fields are added contextually (method, url, status_code,
duration_ms) through the ``extra`` dict on log calls.

SECURITY: Never logs bearer tokens, passwords, or Authorization headers.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone


# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(password|access.token|token|secret|authorization)"
    r"[\"']?[\s]*[=:]\s*[\"']?\S+",
    re.IGNORECASE,
)
_BEARER_PATTERN = re.compile(r"Bearer\s+[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE)

_REQUEST_FIELDS = ("method", "url", "status_code", "duration_ms")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def sanitize(text: str) -> str:
    """Remove sensitive values from log text."""
    text = _BEARER_PATTERN.sub("Bearer [REDACTED]", text)
    return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: timestamp, level, logger, message.
    Request fields are copied when present on the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize(record.getMessage()),
        }

        for name in _REQUEST_FIELDS:
            if hasattr(record, name):
                value = getattr(record, name)
                entry[name] = sanitize(value) if isinstance(value, str) else value

        if hasattr(record, "error_reason"):
            entry["error_reason"] = sanitize(str(getattr(record, "error_reason")))

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = sanitize(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)


class RedactingFormatter(logging.Formatter):
    """Plain-text formatter that applies the same redaction as JsonFormatter."""

    def format(self, record: logging.LogRecord) -> str:
        return sanitize(super().format(record))


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_output:
        Emit one JSON object per line instead of plain text.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else RedactingFormatter(_TEXT_FORMAT))
    root.addHandler(handler)
