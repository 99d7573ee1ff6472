"""Order placement and management endpoints.

Order payloads are validated locally before anything is sent; validation
failures raise :class:`InvalidArgumentError`, never :class:`GrowwApiError`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from groww_connect.enums import OrderType, ProductType, Segment, TransactionType, Validity
from groww_connect.exceptions import InvalidArgumentError
from groww_connect.resources.base import JsonDict, Resource

REQUIRED_FIELDS = (
    "trading_symbol", "exchange", "transaction_type",
    "order_type", "quantity", "product", "validity", "segment",
)

_PRICED = frozenset({OrderType.LIMIT, OrderType.SL})
_TRIGGERED = frozenset({OrderType.SL, OrderType.SL_M})


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == 0


def _check_choice(value: Any, choices: type[StrEnum], label: str, noun: str) -> None:
    values = tuple(c.value for c in choices)
    if not isinstance(value, str) or value not in values:
        raise InvalidArgumentError(f"Invalid {label}: {value}. Valid {noun}: {', '.join(values)}")


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _check_price(value: Any, field: str = "price") -> None:
    number = _as_number(value)
    if number is None or number < 0:
        raise InvalidArgumentError(f"{field} must be a non-negative number")


def _check_quantity(value: Any) -> None:
    number = _as_number(value)
    if number is None or number <= 0 or not number.is_integer():
        raise InvalidArgumentError("Quantity must be a positive integer")


def _check_order_id(order_id: str) -> None:
    if not order_id:
        raise InvalidArgumentError("Order ID cannot be empty")


def validate_order(order: JsonDict) -> None:
    """Check a create-order payload: required fields, enumerations, prices."""
    for field in REQUIRED_FIELDS:
        if _is_blank(order.get(field)):
            raise InvalidArgumentError(f"Missing required field: {field}")

    _check_choice(order["order_type"], OrderType, "order type", "types")
    _check_choice(order["transaction_type"], TransactionType, "transaction type", "types")
    _check_choice(order["product"], ProductType, "product", "products")
    _check_choice(order["validity"], Validity, "validity", "types")
    _check_choice(order["segment"], Segment, "segment", "segments")
    _check_quantity(order["quantity"])

    order_type = order["order_type"]
    if order_type in _PRICED:
        if order.get("price") is None:
            raise InvalidArgumentError("Price is required for LIMIT and SL order types")
        _check_price(order["price"])
    if order_type in _TRIGGERED:
        if order.get("trigger_price") is None:
            raise InvalidArgumentError("Trigger price is required for SL and SL-M order types")
        _check_price(order["trigger_price"], "trigger_price")


def validate_modification(changes: JsonDict) -> None:
    """Check only the fields a modify request actually carries."""
    if changes.get("order_type") is not None:
        _check_choice(changes["order_type"], OrderType, "order type", "types")
    if changes.get("price") is not None:
        _check_price(changes["price"])
    if changes.get("quantity") is not None:
        _check_quantity(changes["quantity"])
    if changes.get("trigger_price") is not None:
        _check_price(changes["trigger_price"], "trigger_price")


class Orders(Resource):
    """Create, inspect, modify and cancel orders."""

    async def create(self, order: JsonDict) -> Any:
        """Validate and place a new order.

        Returns:
            The broker's order acknowledgement (contains ``groww_order_id``).
        """
        validate_order(order)
        return await self._transport.post("/order/create", order)

    async def details(self, groww_order_id: str, segment: str = Segment.CASH) -> Any:
        """Fetch one order by its Groww order id."""
        _check_order_id(groww_order_id)
        _check_choice(segment, Segment, "segment", "segments")
        return await self._transport.get(f"/order/detail/{groww_order_id}", {"segment": segment})

    async def list(self, **params: Any) -> Any:
        """Fetch the order book, optionally filtered."""
        return await self._transport.get("/orders", params)

    async def cancel(self, groww_order_id: str, segment: str = Segment.CASH) -> Any:
        _check_order_id(groww_order_id)
        _check_choice(segment, Segment, "segment", "segments")
        return await self._transport.post("/order/cancel", {
            "groww_order_id": groww_order_id,
            "segment": segment,
        })

    async def modify(self, groww_order_id: str, changes: JsonDict) -> Any:
        """Modify price, quantity, trigger price or type of an open order."""
        _check_order_id(groww_order_id)
        validate_modification(changes)
        return await self._transport.post("/order/modify", {
            "groww_order_id": groww_order_id,
            **changes,
        })
