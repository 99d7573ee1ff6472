"""Holdings, positions and P&L endpoints."""

from __future__ import annotations

from typing import Any

from groww_connect.resources.base import JsonDict, Resource


class Portfolio(Resource):

    async def holdings(self) -> Any:
        """Fetch demat holdings."""
        return await self._transport.get("/portfolio/holdings")

    async def positions(self, **params: Any) -> Any:
        """Fetch positions, optionally filtered (e.g. ``segment="FNO"``)."""
        return await self._transport.get("/portfolio/positions", params)

    async def holding_details(self, symbol_isin: str) -> Any:
        return await self._transport.get("/portfolio/holding/detail", {"symbolIsin": symbol_isin})

    async def convert_position(self, conversion: JsonDict) -> Any:
        """Convert an open position between product types."""
        return await self._transport.post("/portfolio/position/convert", conversion)

    async def pnl_summary(self, **params: Any) -> Any:
        return await self._transport.get("/portfolio/pnl/summary", params)
