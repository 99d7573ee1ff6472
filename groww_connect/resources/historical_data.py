"""Historical candles, market data and trades."""

from __future__ import annotations

from datetime import date
from typing import Any

from groww_connect.resources.base import Resource

DateLike = date | str


def _iso(value: DateLike) -> str:
    """Format dates as YYYY-MM-DD; strings are passed through."""
    return value.isoformat() if isinstance(value, date) else value


class HistoricalData(Resource):

    async def candles(
        self,
        trading_symbol: str,
        interval: str,
        start: DateLike,
        end: DateLike,
        exchange: str = "NSE",
    ) -> Any:
        """OHLC candles between `start` and `end` (inclusive) at `interval` (1d, 1h, 15m ...)."""
        return await self._transport.get("/historical/candles", {
            "trading_symbol": trading_symbol,
            "interval": interval,
            "from": _iso(start),
            "to": _iso(end),
            "exchange": exchange,
        })

    async def market_data(self, trading_symbol: str, day: DateLike, exchange: str = "NSE") -> Any:
        return await self._transport.get("/historical/market", {
            "trading_symbol": trading_symbol,
            "date": _iso(day),
            "exchange": exchange,
        })

    async def trades(self, trading_symbol: str, day: DateLike, exchange: str = "NSE") -> Any:
        return await self._transport.get("/historical/trades", {
            "trading_symbol": trading_symbol,
            "date": _iso(day),
            "exchange": exchange,
        })

    async def price_history(self, trading_symbol: str, **params: Any) -> Any:
        return await self._transport.get("/historical/price", {
            "trading_symbol": trading_symbol,
            **params,
        })
