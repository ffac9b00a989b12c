"""
coinscale Core
==============

Unified exports for the integer-domain conversion engine that turns human
prices and quantities into ledger-ready uint256 fields and back.
All scaling is exact integer arithmetic; floats and Decimals appear only at
the I/O boundary.
"""

# NOTE:
#   Every function here is pure and stateless. The only module-level mutable
#   state is the DEBUG_* print switches, toggled together through set_debug().

from . import fmt as _fmt
from . import quantities as _quantities
from . import rates as _rates

# Wire constants (must match the ledger bit-for-bit)
from .constants import (
    MAX_UINT256,
    S_REF,
    S_GEN,
    K,
    RATE_SCALE,
    RATE_SCALE_SQUARED,
    SIGNIFICANT_DIGITS,
)

# Unit model
from .units import (
    Asset,
    OperationType,
    FillType,
    check_pair,
    base_units_per_coin,
    scaling_factor_for,
    quantity_asset_side,
)

# Decimal formatter
from .fmt import (
    DecimalValue,
    check_uint256,
    parse_decimal_to_scaled,
    format_scaled_to_string,
    format_scaled_to_float,
    format_scaled,
    truncate_to_significant_digits,
    decimal_text,
)

# Rate converter
from .rates import (
    ScaledRate,
    rate_from_decimal,
    rate_to_decimal,
    rate_to_float,
    rate_from_price,
    price_from_rate,
)

# Quantity converter
from .quantities import (
    BaseUnitQuantity,
    quantity_to_base_units,
    base_units_to_quantity,
    base_units_to_float,
)

# Core exceptions
from .exc import ConversionError, ParseError, RangeError, Uint256OverflowError, AssetPairError


def set_debug(enabled: bool) -> None:
    """Switch the debug print channel of every core module on or off."""
    _fmt.DEBUG_FMT = enabled
    _rates.DEBUG_RATES = enabled
    _quantities.DEBUG_QUANTITIES = enabled


__all__ = [
    # constants
    "MAX_UINT256",
    "S_REF",
    "S_GEN",
    "K",
    "RATE_SCALE",
    "RATE_SCALE_SQUARED",
    "SIGNIFICANT_DIGITS",
    # units
    "Asset",
    "OperationType",
    "FillType",
    "check_pair",
    "base_units_per_coin",
    "scaling_factor_for",
    "quantity_asset_side",
    # fmt
    "DecimalValue",
    "check_uint256",
    "parse_decimal_to_scaled",
    "format_scaled_to_string",
    "format_scaled_to_float",
    "format_scaled",
    "truncate_to_significant_digits",
    "decimal_text",
    # rates
    "ScaledRate",
    "rate_from_decimal",
    "rate_to_decimal",
    "rate_to_float",
    "rate_from_price",
    "price_from_rate",
    # quantities
    "BaseUnitQuantity",
    "quantity_to_base_units",
    "base_units_to_quantity",
    "base_units_to_float",
    # exceptions
    "ConversionError",
    "ParseError",
    "RangeError",
    "Uint256OverflowError",
    "AssetPairError",
    # debug
    "set_debug",
]
