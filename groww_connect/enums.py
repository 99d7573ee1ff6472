"""Enumerated values accepted by the Groww order and market-data endpoints."""

from enum import StrEnum


class Exchange(StrEnum):
    """Exchanges addressed by trading symbol."""

    NSE = "NSE"
    BSE = "BSE"


class Segment(StrEnum):
    """Market segments an order belongs to."""

    CASH      = "CASH"
    FNO       = "FNO"
    CURRENCY  = "CURRENCY"
    COMMODITY = "COMMODITY"


class ProductType(StrEnum):
    """Broker product/margin categories."""

    CNC  = "CNC"   # Cash and carry (delivery)
    MIS  = "MIS"   # Margin intraday
    NRML = "NRML"  # Normal (F&O carry forward)


class OrderType(StrEnum):
    """Supported order execution types."""

    MARKET = "MARKET"
    LIMIT  = "LIMIT"
    SL     = "SL"    # Stop-loss limit
    SL_M   = "SL-M"  # Stop-loss market


class TransactionType(StrEnum):
    """Order direction."""

    BUY  = "BUY"
    SELL = "SELL"


class Validity(StrEnum):
    """How long an order stays live."""

    DAY = "DAY"
    IOC = "IOC"   # Immediate or cancel
    GTC = "GTC"   # Good till cancelled
