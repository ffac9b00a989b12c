"""
Top-level API for coinscale (integer-domain).

Exposes the fixed-point conversion engine used to prepare and read the numeric
fields of two-asset limit orders:
  - core: Asset/OperationType unit model, decimal formatter, rate and
    quantity converters (all exact integer arithmetic)
  - orders: LimitOrderEntry / LimitOrderView builders

The engine has no I/O of its own; `coinscale.cli` is a thin argparse wrapper.
"""

from __future__ import annotations

from . import core
from . import orders as _orders

from .core import (
    Asset,
    OperationType,
    FillType,
    RATE_SCALE,
    S_REF,
    S_GEN,
    K,
    parse_decimal_to_scaled,
    format_scaled_to_string,
    format_scaled_to_float,
    truncate_to_significant_digits,
    rate_from_decimal,
    rate_to_decimal,
    rate_to_float,
    rate_from_price,
    price_from_rate,
    quantity_to_base_units,
    base_units_to_quantity,
    base_units_to_float,
    ConversionError,
    ParseError,
    RangeError,
    Uint256OverflowError,
    AssetPairError,
)
from .orders import (
    LimitOrderEntry,
    LimitOrderView,
    build_order_entry,
    build_order_view,
    build_order_views,
)

__version__ = "0.1.0"


def set_debug(enabled: bool) -> None:
    """Switch the debug print channel of the core converters and order builders."""
    core.set_debug(enabled)
    _orders.DEBUG_ORDERS = enabled


__all__ = [
    # unit model
    "Asset",
    "OperationType",
    "FillType",
    "RATE_SCALE",
    "S_REF",
    "S_GEN",
    "K",
    # formatter
    "parse_decimal_to_scaled",
    "format_scaled_to_string",
    "format_scaled_to_float",
    "truncate_to_significant_digits",
    # converters
    "rate_from_decimal",
    "rate_to_decimal",
    "rate_to_float",
    "rate_from_price",
    "price_from_rate",
    "quantity_to_base_units",
    "base_units_to_quantity",
    "base_units_to_float",
    # orders
    "LimitOrderEntry",
    "LimitOrderView",
    "build_order_entry",
    "build_order_view",
    "build_order_views",
    # exceptions
    "ConversionError",
    "ParseError",
    "RangeError",
    "Uint256OverflowError",
    "AssetPairError",
    # debug
    "set_debug",
]
