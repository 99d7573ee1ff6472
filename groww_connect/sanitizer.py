"""Outbound request cleaning: path encoding and control-character stripping."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def sanitize_string(value: str) -> str:
    """Strip ASCII control characters (0x00-0x1F, 0x7F)."""
    return _CONTROL_CHARS.sub("", value)


def sanitize_path(path: str) -> str:
    """Drop null bytes and percent-encode each ``/``-delimited segment."""
    path = path.replace("\x00", "")
    return "/".join(quote(part, safe="") for part in path.split("/"))


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return sanitize_params(value)
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(item) for item in value]
    if isinstance(value, str):
        return sanitize_string(value)
    return value


def sanitize_params(params: dict[str, Any]) -> dict[str, Any]:
    """Recursively clean string keys and string values.

    Nested mappings keep their shape and list items are cleaned one by one;
    anything that is not a string, mapping or list is passed through untouched.
    """
    sanitized: dict[Any, Any] = {}
    for key, value in params.items():
        if isinstance(key, str):
            key = sanitize_string(key)
        sanitized[key] = _sanitize_value(value)
    return sanitized


def flatten_query(params: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested query mappings into bracket keys (``a[b]=1``)."""
    flat: dict[str, Any] = {}
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten_query(value, name))
        else:
            flat[name] = value
    return flat
