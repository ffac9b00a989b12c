"""
Limit-order field preparation and display, on top of the core converters.

- LimitOrderEntry: the numeric fields a ledger limit order carries
  (ScaledRate, QuantityToFill in base units, operation/fill type).
- LimitOrderView: the same order rendered for a response payload.

Entries are built from the price as quoted for the order side (ASK prices are
inverted, see coinscale.core.rates) and the quantity in the coin the side
refers to. Views go the other way. Neither retains state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .core import (
    Asset,
    BaseUnitQuantity,
    ConversionError,
    DecimalValue,
    FillType,
    OperationType,
    ScaledRate,
    base_units_to_float,
    base_units_to_quantity,
    check_pair,
    price_from_rate,
    quantity_to_base_units,
    rate_from_price,
    rate_to_float,
)

# Debug printing control
DEBUG_ORDERS = False

def _dbg(msg: str) -> None:
    if DEBUG_ORDERS:
        print(msg)


# ---------------------------------------------------------------------------
# Ledger-facing entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LimitOrderEntry:
    """Numeric fields of a limit order as stored on the ledger.

    Fields:
    - scaled_rate: selling base units per buying base unit, times 1e38.
    - quantity_base_units: QuantityToFill in base units of the side's coin.
    - operation_type: BID or ASK.
    - fill_type: time-in-force.
    - order_id: ledger identifier, when the order is already on the book.
    """

    scaled_rate: ScaledRate
    quantity_base_units: BaseUnitQuantity
    operation_type: OperationType
    fill_type: FillType = FillType.GOOD_TILL_CANCELLED
    order_id: Optional[str] = None

    def ledger_codes(self) -> tuple[int, int]:
        """Return (operation type code, fill type code) as the ledger encodes them."""
        return self.operation_type.ledger_code, self.fill_type.ledger_code


# ---------------------------------------------------------------------------
# Display view
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LimitOrderView:
    """A ledger order rendered for humans.

    exchange_rate is the plain coin-level rate (selling coins per buying coin);
    price is the same rate as quoted for the order side (inverted for ASK).
    """

    buying: Asset
    selling: Asset
    exchange_rate: float
    price: str
    quantity: float
    quantity_text: str
    operation_type: str
    fill_type: str
    order_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_order_entry(
    buy: Asset,
    sell: Asset,
    op: Union[OperationType, str, int],
    price: DecimalValue,
    quantity: DecimalValue,
    fill_type: Union[FillType, str, int] = FillType.GOOD_TILL_CANCELLED,
) -> LimitOrderEntry:
    """Prepare the ledger fields of a new limit order from human values."""
    check_pair(buy, sell)
    op = OperationType.parse(op)
    fill_type = FillType.parse(fill_type)
    scaled_rate = rate_from_price(buy, sell, price, op)
    base_units = quantity_to_base_units(buy, sell, op, quantity)
    _dbg(f"build_order_entry: op={op.value}, price={price!r} -> {scaled_rate}, quantity={quantity!r} -> {base_units}")
    return LimitOrderEntry(
        scaled_rate=scaled_rate,
        quantity_base_units=base_units,
        operation_type=op,
        fill_type=fill_type,
    )


def build_order_view(buy: Asset, sell: Asset, entry: LimitOrderEntry) -> LimitOrderView:
    """Interpret a ledger entry for display. Conversion errors propagate."""
    op = entry.operation_type
    return LimitOrderView(
        buying=buy,
        selling=sell,
        exchange_rate=rate_to_float(buy, sell, entry.scaled_rate),
        price=price_from_rate(buy, sell, entry.scaled_rate, op),
        quantity=base_units_to_float(buy, sell, op, entry.quantity_base_units),
        quantity_text=base_units_to_quantity(buy, sell, op, entry.quantity_base_units),
        operation_type=op.value,
        fill_type=entry.fill_type.value,
        order_id=entry.order_id,
    )


def build_order_views(buy: Asset, sell: Asset, entries: Iterable[LimitOrderEntry]) -> List[LimitOrderView]:
    """Render a book listing, skipping entries whose numeric fields cannot be shown.

    Such entries should never have passed ledger validation; a listing still
    returns every order it can read.
    """
    check_pair(buy, sell)
    views: List[LimitOrderView] = []
    for entry in entries:
        try:
            views.append(build_order_view(buy, sell, entry))
        except ConversionError as e:
            _dbg(f"build_order_views: skipping order_id={entry.order_id}: {e}")
    return views


__all__ = [
    "LimitOrderEntry",
    "LimitOrderView",
    "build_order_entry",
    "build_order_view",
    "build_order_views",
]
