"""Live market data endpoints."""

from __future__ import annotations

from typing import Any, Iterable

from groww_connect.resources.base import Resource


class LiveData(Resource):

    async def market_depth(self, trading_symbol: str, exchange: str = "NSE") -> Any:
        """Order book depth for one symbol."""
        return await self._transport.get("/market/depth", {
            "trading_symbol": trading_symbol,
            "exchange": exchange,
        })

    async def quotes(self, symbols: Iterable[str], exchange: str = "NSE") -> Any:
        """Full quotes for several symbols in one call."""
        return await self._transport.get("/quotes", {
            "trading_symbols": ",".join(symbols),
            "exchange": exchange,
        })

    async def ltp(self, symbols: Iterable[str], exchange: str = "NSE") -> Any:
        """Last traded price for several symbols in one call."""
        return await self._transport.get("/ltp", {
            "trading_symbols": ",".join(symbols),
            "exchange": exchange,
        })

    async def indices(self, **params: Any) -> Any:
        return await self._transport.get("/indices", params)
