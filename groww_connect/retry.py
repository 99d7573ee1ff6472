"""Retry decision and exponential backoff for transport attempts."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

MAX_RETRIES = 3
RETRY_BACKOFF = 1.0  # seconds; doubled on each retry


@dataclass(frozen=True)
class RetryPolicy:
    """Decides whether a failed attempt is sent again and how long to wait.

    Retryable outcomes:
    - HTTP 429 and any HTTP 5xx response
    - connection-level failures (`httpx.TimeoutException`, `httpx.NetworkError`)

    Everything else (other 4xx, malformed bodies, protocol errors) is terminal.
    """

    max_retries: int = MAX_RETRIES
    backoff: float = RETRY_BACKOFF

    def should_retry(
        self,
        retries: int,
        status_code: int | None = None,
        exc: Exception | None = None,
    ) -> bool:
        """Return True if another attempt is allowed after `retries` retries."""
        if retries >= self.max_retries:
            return False
        if status_code is not None:
            return status_code == 429 or status_code >= 500
        return isinstance(exc, (httpx.TimeoutException, httpx.NetworkError))

    def delay(self, retry: int) -> float:
        """Seconds to wait before the `retry`-th retry (1-based)."""
        return self.backoff * (2 ** (retry - 1))
