"""
Rate converter: human prices <-> ledger ScaledRate.

A ScaledRate is "selling base units per buying base unit" times RATE_SCALE
(1e38), stored in a uint256. Because reference-asset base units are K = 1e9
times coarser than generic ones, a coin-level price needs a correction when
either side of the pair is the reference asset:

- buy is REFERENCE:  scaled = raw * K
- sell is REFERENCE: scaled = raw // K  (zero -> RangeError)
- neither:           scaled = raw

Side-aware helpers (rate_from_price / price_from_rate) additionally invert ASK
prices on the 1e38 grid. Inverting an incoming ASK price rounds up
(ceil(1e76 / raw)) while parsing and the outbound inversion floor; the
asymmetry keeps a seller from under-quoting through truncation.
"""

from __future__ import annotations

from typing import Union

from .constants import RATE_SCALE, RATE_SCALE_SQUARED
from .exc import RangeError
from .fmt import (
    DecimalValue,
    _ceil_div,
    _check_scaled,
    _floor_div,
    check_uint256,
    decimal_text,
    format_scaled,
    parse_decimal_to_scaled,
)
from .units import Asset, OperationType, check_pair, scaling_factor_for

# Debug printing control
DEBUG_RATES = False

def _dbg(msg: str) -> None:
    if DEBUG_RATES:
        print(msg)


ScaledRate = int


# ----------------------------
# Reference-side correction
# ----------------------------

def _apply_reference_correction(buy: Asset, sell: Asset, raw: int, price: DecimalValue) -> ScaledRate:
    k = scaling_factor_for(buy, sell)
    if buy is Asset.REFERENCE:
        return check_uint256(raw * k, f"price {price!r} scaled for a reference-asset buy side")
    if sell is Asset.REFERENCE:
        q = _floor_div(raw, k)
        if q == 0:
            raise RangeError(f"price {price!r} is too small to produce a scaled exchange rate")
        return q
    return raw


def _undo_reference_correction(buy: Asset, sell: Asset, scaled_rate: ScaledRate) -> int:
    _check_scaled(scaled_rate)
    check_uint256(scaled_rate, "scaled exchange rate")
    if scaled_rate == 0:
        raise RangeError("scaled exchange rate must be > 0")
    k = scaling_factor_for(buy, sell)
    if buy is Asset.REFERENCE:
        v = _floor_div(scaled_rate, k)
        if v == 0:
            raise RangeError(f"scaled exchange rate {scaled_rate} is below the reference-side resolution")
        return v
    if sell is Asset.REFERENCE:
        return scaled_rate * k
    return scaled_rate


# ----------------------------
# Plain conversions (no side inversion)
# ----------------------------

def rate_from_decimal(buy: Asset, sell: Asset, price: DecimalValue) -> ScaledRate:
    """Coin-level price (selling coins per buying coin) -> ledger ScaledRate."""
    check_pair(buy, sell)
    raw = parse_decimal_to_scaled(decimal_text(price), RATE_SCALE)
    scaled = _apply_reference_correction(buy, sell, raw, price)
    _dbg(f"rate_from_decimal: price={price!r}, buy={buy.value}, sell={sell.value}, raw={raw}, scaled={scaled}")
    return scaled


def rate_to_decimal(buy: Asset, sell: Asset, scaled_rate: ScaledRate) -> str:
    """Exact inverse of rate_from_decimal, as a decimal string."""
    return format_scaled(_undo_reference_correction(buy, sell, scaled_rate), RATE_SCALE)


def rate_to_float(buy: Asset, sell: Asset, scaled_rate: ScaledRate) -> float:
    return format_scaled(_undo_reference_correction(buy, sell, scaled_rate), RATE_SCALE, as_float=True)


# ----------------------------
# Side-aware price conversions
# ----------------------------

def _invert_up(raw: int) -> int:
    # raw >= 1, so the result is in [1, 1e76] and always fits.
    return _ceil_div(RATE_SCALE_SQUARED, raw)


def rate_from_price(
    buy: Asset,
    sell: Asset,
    price: DecimalValue,
    op: Union[OperationType, str, int],
) -> ScaledRate:
    """Price as quoted for an order side -> ledger ScaledRate.

    BID prices are selling coins per buying coin and convert directly. ASK
    prices are quoted the other way round (buying coins per selling coin), so
    the raw rate is inverted with a ceiling before the reference correction:

      BID "3" -> 300000000000000000000000000000000000000
      ASK "3" -> 33333333333333333333333333333333333334
    """
    op = OperationType.parse(op)
    check_pair(buy, sell)
    raw = parse_decimal_to_scaled(decimal_text(price), RATE_SCALE)
    if op is OperationType.ASK:
        inverted = _invert_up(raw)
        _dbg(f"rate_from_price: ASK invert raw={raw} -> {inverted}")
        raw = inverted
    return _apply_reference_correction(buy, sell, raw, price)


def price_from_rate(
    buy: Asset,
    sell: Asset,
    scaled_rate: ScaledRate,
    op: Union[OperationType, str, int],
    *,
    as_float: bool = False,
) -> Union[str, float]:
    """Ledger ScaledRate -> price as quoted for the given order side."""
    op = OperationType.parse(op)
    v = _undo_reference_correction(buy, sell, scaled_rate)
    if op is OperationType.ASK:
        v = _floor_div(RATE_SCALE_SQUARED, v)
        if v == 0:
            raise RangeError(f"scaled exchange rate {scaled_rate} is too large to invert")
    return format_scaled(v, RATE_SCALE, as_float=as_float)


__all__ = [
    "ScaledRate",
    "rate_from_decimal",
    "rate_to_decimal",
    "rate_to_float",
    "rate_from_price",
    "price_from_rate",
]
