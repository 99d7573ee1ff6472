"""Response envelope unwrapping and error classification.

Groww answers in several envelope shapes. :func:`interpret` picks exactly one
reading per response, in this order:

1. ``status`` is ``FAILURE``/``ERROR``: a typed failure.
2. No ``status``, ``payload`` or ``data`` key: the body is the payload.
3. ``status == "SUCCESS"`` with ``data``: ``data``.
4. ``status`` absent or ``SUCCESS`` with ``payload``: ``payload``.
5. Anything else: the body unchanged.

A key only counts as present when its value is not ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from groww_connect.exceptions import (
    DEFAULT_ERROR_CODE,
    DEFAULT_WAIT_TIME,
    GrowwApiError,
    GrowwRateLimitError,
)

RATE_LIMIT_CODES = frozenset({"GA003", "RL001"})
FAILURE_STATUSES = frozenset({"FAILURE", "ERROR"})
_ENVELOPE_KEYS = ("status", "payload", "data")


@dataclass(frozen=True)
class Success:
    """Payload extracted from a successful envelope."""

    payload: Any

    def unwrap(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class Failure:
    """Typed error decoded from a failure envelope."""

    error: GrowwApiError

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success, Failure]


def _get(raw: dict[str, Any], *path: str) -> Any:
    """Walk nested keys, returning None as soon as one is missing."""
    node: Any = raw
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _first(raw: dict[str, Any], *paths: tuple[str, ...]) -> Any:
    for path in paths:
        value = _get(raw, *path)
        if value is not None:
            return value
    return None


def _as_wait_time(value: Any, default: int = DEFAULT_WAIT_TIME) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def error_details(
    raw: Any,
    default_code: str = DEFAULT_ERROR_CODE,
    default_message: str = "Unknown error",
) -> tuple[str, str, int]:
    """Return ``(code, message, wait_time)`` from a top-level or nested error body."""
    if not isinstance(raw, dict):
        return default_code, default_message, DEFAULT_WAIT_TIME
    code = _first(raw, ("error_code",), ("error", "code"))
    message = _first(raw, ("message",), ("error", "message"))
    wait_time = _first(raw, ("rate_limit", "wait_time"), ("error", "rate_limit", "wait_time"))
    return (
        str(code) if code is not None else default_code,
        str(message) if message is not None else default_message,
        _as_wait_time(wait_time),
    )


def is_rate_limited(code: str, message: str, status_code: int | None) -> bool:
    """Rate-limit codes only count when the message or HTTP status agrees."""
    return code in RATE_LIMIT_CODES and ("rate limit" in message or status_code == 429)


def build_error(raw: Any, status_code: int | None) -> GrowwApiError:
    """Classify a failure envelope into an API or rate-limit error."""
    code, message, wait_time = error_details(raw)
    if is_rate_limited(code, message, status_code):
        return GrowwRateLimitError(message, code, wait_time, status_code=status_code)
    return GrowwApiError(message, code, status_code=status_code)


def is_failure(raw: Any) -> bool:
    return isinstance(raw, dict) and raw.get("status") in FAILURE_STATUSES


def interpret(raw: Any, status_code: int | None = None) -> Result:
    """Choose one interpretation of a decoded response body."""
    if is_failure(raw):
        return Failure(build_error(raw, status_code))

    if not isinstance(raw, dict) or all(raw.get(k) is None for k in _ENVELOPE_KEYS):
        return Success(raw)

    status = raw.get("status")
    if status == "SUCCESS" and raw.get("data") is not None:
        return Success(raw["data"])

    if status in (None, "SUCCESS") and raw.get("payload") is not None:
        return Success(raw["payload"])

    return Success(raw)


def normalize(raw: Any, status_code: int | None = None) -> Any:
    """Return the payload of `raw` or raise the error it describes."""
    return interpret(raw, status_code).unwrap()
