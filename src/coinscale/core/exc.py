"""
Core exception types for coinscale.core.

These are dependency-free and may be imported by all core modules. Every
conversion failure derives from ConversionError; the concrete types also
subclass the matching builtin so callers can catch ValueError/OverflowError.
"""

from typing import Optional

__all__ = [
    "ConversionError",
    "ParseError",
    "RangeError",
    "Uint256OverflowError",
    "AssetPairError",
]


class ConversionError(Exception):
    """Base class for all fixed-point conversion failures."""
    pass


class ParseError(ConversionError, ValueError):
    """Raised when input text is not a well-formed non-negative decimal number."""
    pass


class RangeError(ConversionError, ValueError):
    """Raised when a valid value truncates to zero or an inversion would yield zero."""
    pass


class Uint256OverflowError(ConversionError, OverflowError):
    """Raised when scaling would exceed the ledger's 256-bit unsigned capacity.

    Attributes
    ----------
    value : int
        The out-of-range integer that was produced.
    """

    def __init__(self, message: str, value: Optional[int] = None):
        super().__init__(message)
        self.value = value


class AssetPairError(ConversionError, ValueError):
    """Raised when an asset pair is not a valid (buy, sell) combination."""
    pass
