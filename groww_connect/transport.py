"""Authenticated HTTP dispatch shared by every Groww resource."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from groww_connect.config import ClientOptions
from groww_connect.exceptions import (
    DEFAULT_ERROR_CODE,
    GrowwApiError,
    GrowwRateLimitError,
    InvalidArgumentError,
)
from groww_connect.logging_hook import LogSink, RequestLogger
from groww_connect.normalizer import build_error, error_details, is_failure, normalize
from groww_connect.rate_limiter import Clock, RequestPacer, Sleep
from groww_connect.retry import RetryPolicy
from groww_connect.sanitizer import flatten_query, sanitize_params, sanitize_path

logger = logging.getLogger(__name__)

JsonDict = dict[str, Any]


class Transport:
    """Sends requests to the Groww API and turns responses into payloads.

    Pipeline for every call: sanitize -> pace -> send -> retry -> normalize.
    Callers only ever see a payload, a `GrowwApiError` or a
    `GrowwRateLimitError`; httpx exceptions never escape.
    """

    def __init__(
        self,
        api_key: str,
        options: ClientOptions | JsonDict | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        retry: RetryPolicy | None = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if not api_key:
            raise InvalidArgumentError("API key cannot be empty")
        self._options = ClientOptions.from_config(options)
        # Applied per request; an injected client may carry none of these.
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._client = http_client or httpx.AsyncClient(
            base_url=self._options.base_url,
            headers=self._headers,
            timeout=self._options.httpx_timeout,
            verify=self._options.verify,
        )
        self._retry = retry or RetryPolicy()
        self._sleep = sleep
        self._pacer = RequestPacer(clock=clock, sleep=sleep)
        self._log = RequestLogger()

    @property
    def options(self) -> ClientOptions:
        return self._options

    def set_logging(self, enabled: bool, sink: LogSink | None = None) -> None:
        """Enable request/response logging, optionally through a custom sink."""
        self._log.configure(enabled, sink)

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Resource-facing primitives ---

    async def get(self, path: str, query: JsonDict | None = None) -> Any:
        """GET `path` with query parameters and return the unwrapped payload."""
        return await self.request("GET", path, query=query)

    async def post(self, path: str, body: JsonDict | None = None) -> Any:
        """POST a JSON body to `path` and return the unwrapped payload."""
        return await self.request("POST", path, body=body if body is not None else {})

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: JsonDict | None = None,
        body: JsonDict | None = None,
    ) -> Any:
        """Run the full request pipeline for one API call."""
        path = sanitize_path(path)
        kwargs: JsonDict = {}
        if query:
            kwargs["params"] = flatten_query(sanitize_params(query))
        if body is not None:
            kwargs["json"] = sanitize_params(body)

        try:
            response = await self._send(method, path, kwargs)
            return self._handle_response(path, response)
        except GrowwRateLimitError as exc:
            self._log.emit("warning", f"Rate limit exceeded: {exc.message}")
            raise
        except GrowwApiError as exc:
            self._log.emit("error", f"Request failed: {exc.message}")
            raise

    # --- Internal ---

    async def _send(self, method: str, path: str, kwargs: JsonDict) -> httpx.Response:
        """Send with retries; returns the last response received.

        Retry policy (see `RetryPolicy`):
        - retries HTTP 429 and 5xx responses
        - retries timeouts and network failures
        - waits 1s, 2s, 4s ... before each retry
        """
        retries = 0
        while True:
            await self._pacer.throttle()
            self._log.emit("debug", f"Sending {method} request to {path}", {
                "method": method,
                "endpoint": path,
                "headers": dict(self._headers),
                "options": dict(kwargs),
            })
            try:
                response = await self._client.request(
                    method, path,
                    headers=self._headers,
                    timeout=self._options.httpx_timeout,
                    **kwargs,
                )
            except httpx.HTTPError as exc:
                if not self._retry.should_retry(retries, exc=exc):
                    raise GrowwApiError(f"Request failed: {exc}", DEFAULT_ERROR_CODE) from exc
                retries += 1
                logger.warning(
                    f"Request error {exc!r} ({retries}/{self._retry.max_retries}): {method} {path}"
                )
                await self._sleep(self._retry.delay(retries))
                continue

            if not self._retry.should_retry(retries, status_code=response.status_code):
                return response
            retries += 1
            logger.warning(
                f"HTTP {response.status_code} ({retries}/{self._retry.max_retries}): {method} {path}"
            )
            await self._sleep(self._retry.delay(retries))

    def _handle_response(self, path: str, response: httpx.Response) -> Any:
        """Decode the final response and classify it."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        status = response.status_code

        self._log.emit("debug", f"Received response from {path}", {
            "status_code": status,
            "headers": dict(response.headers),
            "body": body,
        })

        if status == 429:
            code, message, wait_time = error_details(body, "RL001", "Rate limit exceeded")
            raise GrowwRateLimitError(message, code, wait_time, status_code=status)

        if status >= 400:
            if is_failure(body):
                raise build_error(body, status)
            code, message, _ = error_details(
                body, DEFAULT_ERROR_CODE,
                f"Request failed: HTTP {status} {response.reason_phrase}".rstrip(),
            )
            raise GrowwApiError(message, code, status_code=status)

        return normalize(body, status)
