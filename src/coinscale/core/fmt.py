"""
Decimal formatter: text <-> scaled-integer bridges (integer domain).

All scaling is performed on Python ints; floats only enter through
truncate_to_significant_digits and only leave through format_scaled_to_float.

Grammar accepted by parse_decimal_to_scaled:
    digits? ('.' digits?)?      with at least one digit overall

Rounding semantics:
- Parsing floors: digits worth less than 1/F are dropped, never rounded.
- Formatting is exact: whole part, '.', fractional part padded to F's width
  with trailing zeros trimmed (at least one fractional digit is kept).
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Union

from .constants import MAX_UINT256, SIGNIFICANT_DIGITS
from .exc import ParseError, RangeError, Uint256OverflowError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# Human-facing value accepted at the boundary.
DecimalValue = Union[str, float, Decimal]

_DECIMAL_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?")

#: Decimal digits in 2**256 - 1; a longer whole part overflows at any scale.
_UINT256_DIGITS = len(str(MAX_UINT256))


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def _ceil_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise RangeError("_ceil_div expects a>=0 and b>0")
    return 0 if a == 0 else -(-a // b)


def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise RangeError("_floor_div expects a>=0 and b>0")
    return a // b


def _scale_exponent(factor: int) -> int:
    """Return n for factor == 10**n; anything else is a programming error."""
    if isinstance(factor, bool) or not isinstance(factor, int) or factor <= 0:
        raise ValueError(f"scaling factor must be a positive power of ten, got {factor!r}")
    s = str(factor)
    if s[0] != "1" or s.count("0") != len(s) - 1:
        raise ValueError(f"scaling factor must be a positive power of ten, got {factor!r}")
    return len(s) - 1


def _check_scaled(scaled: int) -> None:
    if isinstance(scaled, bool) or not isinstance(scaled, int):
        raise TypeError(f"scaled value must be int, got {type(scaled).__name__}")
    if scaled < 0:
        raise RangeError(f"scaled value must be >= 0, got {scaled}")


def _num_digits(n: int) -> int:
    """Decimal digit count of |n|; zero has no digits."""
    return 0 if n == 0 else len(str(abs(n)))


def check_uint256(value: int, context: str) -> int:
    """Return value unchanged, or raise if it does not fit the ledger's uint256."""
    if value > MAX_UINT256:
        raise Uint256OverflowError(f"{context}: {value} exceeds 256 bits", value)
    return value


# ----------------------------
# Parsing
# ----------------------------

def parse_decimal_to_scaled(text: str, factor: int) -> int:
    """Parse a non-negative decimal string into floor(text * factor).

    Raises ParseError for malformed text, RangeError if the result is zero and
    Uint256OverflowError if it does not fit in 256 bits.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected decimal string, got {type(text).__name__}")
    m = _DECIMAL_RE.fullmatch(text)
    if m is None:
        raise ParseError(f"malformed decimal {text!r}")
    whole_digits, frac_digits = m.group(1), m.group(2) or ""
    if not whole_digits and not frac_digits:
        raise ParseError(f"malformed decimal {text!r}")

    exp = _scale_exponent(factor)
    # Leading zeros carry no value; strip them so int() only sees bounded input.
    whole_digits = whole_digits.lstrip("0")
    if len(whole_digits) > _UINT256_DIGITS:
        raise Uint256OverflowError(
            f"decimal with {len(whole_digits)} whole digits scaled by 1e{exp} exceeds 256 bits"
        )
    # Fractional digits beyond 10^-exp are below resolution: drop them.
    kept = frac_digits[:exp]
    frac_scaled = int(kept) * 10 ** (exp - len(kept)) if kept else 0
    whole = int(whole_digits) if whole_digits else 0
    value = whole * factor + frac_scaled
    _dbg(f"parse: text={text!r}, factor=1e{exp}, whole={whole}, frac_scaled={frac_scaled}")

    check_uint256(value, f"{text!r} scaled by 1e{exp}")
    if value == 0:
        raise RangeError(f"{text!r} is too small to represent at scale 1e{exp}")
    return value


# ----------------------------
# Formatting
# ----------------------------

def format_scaled_to_string(scaled: int, factor: int) -> str:
    """Render scaled / factor as "{whole}.{frac}" exactly.

      format_scaled_to_string(100 * 10**38, 10**38) -> '100.0'
      format_scaled_to_string(10**36, 10**38)       -> '0.01'
    """
    _check_scaled(scaled)
    exp = _scale_exponent(factor)
    whole, frac = divmod(scaled, factor)
    if exp == 0:
        return f"{whole}.0"
    frac_str = str(frac).rjust(exp, "0").rstrip("0") or "0"
    return f"{whole}.{frac_str}"


def format_scaled_to_float(scaled: int, factor: int) -> float:
    """Same as format_scaled_to_string, parsed as a float64 (inherits its precision)."""
    return float(format_scaled_to_string(scaled, factor))


def format_scaled(scaled: int, factor: int, *, as_float: bool = False) -> Union[str, float]:
    if as_float:
        return format_scaled_to_float(scaled, factor)
    return format_scaled_to_string(scaled, factor)


# ----------------------------
# Float / Decimal bridges (I/O only)
# ----------------------------

def truncate_to_significant_digits(value: float, limit: int = SIGNIFICANT_DIGITS) -> str:
    """Render a float with no more than `limit` significant digits.

    15 is the precision a float64 carries reliably. Printing more digits than
    that manufactures garbage, so:
    - an integer part of <= limit digits is printed with (limit - digits)
      fractional digits, e.g. 1.1 -> '1.10000000000000';
    - a larger integer part keeps its top `limit` digits and zeroes the rest,
      e.g. 1234567890123456789.0 -> '1234567890123450000.0'.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"expected float, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ParseError(f"non-finite float {value!r}")

    whole = int(value)
    digits = _num_digits(whole)
    if digits <= limit:
        return f"{value:.{limit - digits}f}"
    drop = 10 ** (digits - limit)
    kept = abs(whole) // drop * drop
    sign = "-" if whole < 0 else ""
    _dbg(f"truncate: value={value!r}, digits={digits}, kept={kept}")
    return f"{sign}{kept}.0"


def decimal_text(value: DecimalValue) -> str:
    """Normalise a human value (str, float or Decimal) to parseable decimal text."""
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"non-finite Decimal {value!r}")
        return format(value, "f")
    return truncate_to_significant_digits(value)


__all__ = [
    "DecimalValue",
    "check_uint256",
    "parse_decimal_to_scaled",
    "format_scaled_to_string",
    "format_scaled_to_float",
    "format_scaled",
    "truncate_to_significant_digits",
    "decimal_text",
]
