from __future__ import annotations

import asyncio
import functools
import inspect
import threading
from typing import Any, Callable, Coroutine

import httpx

from groww_connect.config import ClientOptions
from groww_connect.exceptions import GrowwConnectError
from groww_connect.logging_hook import LogSink
from groww_connect.resources import HistoricalData, Instruments, LiveData, Margin, Orders, Portfolio
from groww_connect.resources.base import Resource
from groww_connect.transport import JsonDict, Transport

Runner = Callable[[Coroutine[Any, Any, Any]], Any]


class AsyncGrowwClient:
    """Async-first public client for the Groww trading API.

    Lifecycle:
    1. Construct with an API key (and optional transport options).
    2. Call resource methods, e.g. ``await groww.portfolio.holdings()``.
    3. Call :meth:`aclose` (or use ``async with``) to release the HTTP client.
    """

    def __init__(
        self,
        api_key: str,
        options: ClientOptions | JsonDict | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._transport = Transport(api_key, options, http_client=http_client)
        self.instruments = Instruments(self._transport)
        self.orders = Orders(self._transport)
        self.portfolio = Portfolio(self._transport)
        self.margin = Margin(self._transport)
        self.live_data = LiveData(self._transport)
        self.historical_data = HistoricalData(self._transport)

    async def __aenter__(self) -> AsyncGrowwClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.aclose()

    def set_logging(self, enabled: bool, sink: LogSink | None = None) -> AsyncGrowwClient:
        """Toggle request/response logging; secrets are masked before the sink sees them."""
        self._transport.set_logging(enabled, sink)
        return self

    # --- Raw access ---

    async def get(self, path: str, query: JsonDict | None = None) -> Any:
        return await self._transport.get(path, query)

    async def post(self, path: str, body: JsonDict | None = None) -> Any:
        return await self._transport.post(path, body)


class _SyncResource:
    """Blocking view over an async resource group."""

    def __init__(self, resource: Resource, run: Runner):
        self._resource = resource
        self._run = run

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._resource, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        @functools.wraps(attr)
        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))

        return call


class GrowwClient:
    """Threaded synchronous wrapper over :class:`AsyncGrowwClient`."""

    def __init__(
        self,
        api_key: str,
        options: ClientOptions | JsonDict | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Validate config, then start a dedicated event loop thread."""
        self._async = AsyncGrowwClient(api_key, options, http_client=http_client)
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._thread.start()
        self.instruments = _SyncResource(self._async.instruments, self._run)
        self.orders = _SyncResource(self._async.orders, self._run)
        self.portfolio = _SyncResource(self._async.portfolio, self._run)
        self.margin = _SyncResource(self._async.margin, self._run)
        self.live_data = _SyncResource(self._async.live_data, self._run)
        self.historical_data = _SyncResource(self._async.historical_data, self._run)

    def _run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """Execute a coroutine on the internal loop and block for result."""
        if self._loop.is_closed():
            coro.close()
            raise GrowwConnectError("GrowwClient is closed")
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result()

    def __enter__(self) -> GrowwClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client and stop the loop thread."""
        if self._loop.is_closed():
            return
        self._run(self._async.aclose())
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()

    def set_logging(self, enabled: bool, sink: LogSink | None = None) -> GrowwClient:
        self._async.set_logging(enabled, sink)
        return self

    def get(self, path: str, query: JsonDict | None = None) -> Any:
        return self._run(self._async.get(path, query))

    def post(self, path: str, body: JsonDict | None = None) -> Any:
        return self._run(self._async.post(path, body))
