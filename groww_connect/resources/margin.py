"""Margin endpoints."""

from __future__ import annotations

from typing import Any

from groww_connect.resources.base import JsonDict, Resource


class Margin(Resource):

    async def available(self) -> Any:
        return await self._transport.get("/margin/available")

    async def required(self, order: JsonDict) -> Any:
        """Margin needed to place `order` (same fields as an order create)."""
        return await self._transport.post("/margin/required", order)

    async def utilization(self) -> Any:
        return await self._transport.get("/margin/utilization")

    async def limits(self) -> Any:
        return await self._transport.get("/margin/limits")
