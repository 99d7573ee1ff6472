"""Shared base for resource groups built on the transport primitives."""

from __future__ import annotations

from typing import Any, Protocol

JsonDict = dict[str, Any]


class Requester(Protocol):
    """The two primitives every resource needs from the transport."""

    async def get(self, path: str, query: JsonDict | None = None) -> Any: ...

    async def post(self, path: str, body: JsonDict | None = None) -> Any: ...


class Resource:
    """A group of endpoints sharing one transport.

    Payloads come back already unwrapped by the transport's normalizer, so
    resources return them as-is.
    """

    def __init__(self, transport: Requester) -> None:
        self._transport = transport
