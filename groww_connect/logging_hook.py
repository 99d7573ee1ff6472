"""Pluggable request/response log sink with secret redaction."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

logger = logging.getLogger("groww_connect.transport")

MASK = "********"

SENSITIVE_FIELDS = frozenset(
    name.lower()
    for name in (
        "apiKey", "api_key", "password", "secret", "Authorization", "auth", "token",
        "access_token", "refresh_token", "private_key", "secret_key",
    )
)


class LogSink(Protocol):
    """Callable receiving already-redacted request diagnostics."""

    def __call__(self, level: str, message: str, context: dict[str, Any]) -> None: ...


def redact(data: Any) -> Any:
    """Return a copy of `data` with every sensitive key's value masked."""
    if isinstance(data, dict):
        return {
            key: MASK if isinstance(key, str) and key.lower() in SENSITIVE_FIELDS else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


def default_sink(level: str, message: str, context: dict[str, Any]) -> None:
    """Write to the ``groww_connect.transport`` stdlib logger."""
    levelno = logging.getLevelName(level.upper())
    if not isinstance(levelno, int):
        levelno = logging.INFO
    logger.log(levelno, f"{message} {json.dumps(context, default=str)}")


class RequestLogger:
    """Holds the logging switch and sink for one client."""

    def __init__(self) -> None:
        self.enabled = False
        self._sink: LogSink | None = None

    def configure(self, enabled: bool, sink: LogSink | None = None) -> None:
        self.enabled = enabled
        self._sink = sink

    def emit(self, level: str, message: str, context: dict[str, Any] | None = None) -> None:
        """Send a redacted record to the sink; sink failures never propagate."""
        if not self.enabled:
            return
        sink = self._sink or default_sink
        try:
            sink(level, message, redact(context or {}))
        except Exception as exc:
            logger.warning(f"Log sink failed: {exc!r}")
