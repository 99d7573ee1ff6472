"""Instrument lookup endpoints."""

from __future__ import annotations

from typing import Any

from groww_connect.resources.base import Resource


class Instruments(Resource):

    async def search(self, query: str, **params: Any) -> Any:
        """Search instruments by free text; extra filters are passed through."""
        return await self._transport.get("/instruments/search", {"q": query, **params})

    async def details(self, trading_symbol: str, exchange: str = "NSE") -> Any:
        return await self._transport.get("/instruments/detail", {
            "trading_symbol": trading_symbol,
            "exchange": exchange,
        })

    async def details_by_isin(self, isin: str) -> Any:
        return await self._transport.get("/instruments/detail/isin", {"isin": isin})

    async def exchanges(self) -> Any:
        return await self._transport.get("/instruments/exchanges")

    async def segments(self) -> Any:
        return await self._transport.get("/instruments/segments")
