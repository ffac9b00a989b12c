"""
Quantity converter: human QuantityToFill <-> base units.

The quantity of an order is denominated in whichever coin quantity_asset_side
picks for (buy, sell, op); it is scaled by that coin's base units per coin
(1e9 for the reference asset, 1e18 otherwise). Zero is rejected both ways: an
order with nothing to fill is meaningless.
"""

from __future__ import annotations

from typing import Union

from .exc import RangeError
from .fmt import DecimalValue, _check_scaled, check_uint256, decimal_text, format_scaled, parse_decimal_to_scaled
from .units import Asset, OperationType, quantity_asset_side

# Debug printing control
DEBUG_QUANTITIES = False

def _dbg(msg: str) -> None:
    if DEBUG_QUANTITIES:
        print(msg)


BaseUnitQuantity = int


def _factor_for(buy: Asset, sell: Asset, op: Union[OperationType, str, int]) -> int:
    side = quantity_asset_side(buy, sell, OperationType.parse(op))
    return side.base_units_per_coin


def quantity_to_base_units(
    buy: Asset,
    sell: Asset,
    op: Union[OperationType, str, int],
    quantity: DecimalValue,
) -> BaseUnitQuantity:
    """Coin quantity -> base units of the coin the order side refers to."""
    factor = _factor_for(buy, sell, op)
    base_units = parse_decimal_to_scaled(decimal_text(quantity), factor)
    _dbg(f"quantity_to_base_units: quantity={quantity!r}, factor={factor}, base_units={base_units}")
    return base_units


def _checked_base_units(base_units: BaseUnitQuantity) -> BaseUnitQuantity:
    _check_scaled(base_units)
    if base_units == 0:
        raise RangeError("quantity to fill must be > 0 base units")
    return check_uint256(base_units, "quantity to fill")


def base_units_to_quantity(
    buy: Asset,
    sell: Asset,
    op: Union[OperationType, str, int],
    base_units: BaseUnitQuantity,
) -> str:
    """Base units -> coin quantity as a decimal string, e.g. 10**18 GENERIC -> '1.0'."""
    factor = _factor_for(buy, sell, op)
    return format_scaled(_checked_base_units(base_units), factor)


def base_units_to_float(
    buy: Asset,
    sell: Asset,
    op: Union[OperationType, str, int],
    base_units: BaseUnitQuantity,
) -> float:
    factor = _factor_for(buy, sell, op)
    return format_scaled(_checked_base_units(base_units), factor, as_float=True)


__all__ = [
    "BaseUnitQuantity",
    "quantity_to_base_units",
    "base_units_to_quantity",
    "base_units_to_float",
]
