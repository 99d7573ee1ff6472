"""Client-side request pacing."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable

REQUEST_DELAY = 0.1  # seconds between the start of two requests

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class RequestPacer:
    """Keeps consecutive sends from one client at least ``min_interval`` apart.

    A single-instance spacing guard: no bursts, no token bucket, and no
    coordination between separate clients.
    """

    def __init__(
        self,
        min_interval: float = REQUEST_DELAY,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None
        self._lock = asyncio.Lock()

    @property
    def last_request(self) -> float | None:
        """Clock reading taken when the previous send was released."""
        return self._last_request

    async def throttle(self) -> None:
        """Wait until the minimum spacing has passed, then stamp the send."""
        async with self._lock:
            if self._last_request is not None:
                elapsed = self._clock() - self._last_request
                if elapsed < self._min_interval:
                    await self._sleep(self._min_interval - elapsed)
            self._last_request = self._clock()
