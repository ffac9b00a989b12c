"""
coinscale Core Constants (integer domain)
=========================================

Wire constants shared with the consuming ledger. They are not tunables: the
ledger stores rates and quantities as 256-bit unsigned integers built from
exactly these scales.
"""

# NOTE: S_REF/S_GEN are base units per whole coin; K is their exact ratio.

# ---------------------------------------------------------------------------
# Fixed-width integer bound
# ---------------------------------------------------------------------------

#: Largest value the ledger's uint256 fields can hold.
MAX_UINT256: int = (1 << 256) - 1


# ---------------------------------------------------------------------------
# Base-unit scales
# ---------------------------------------------------------------------------

#: Reference asset (network currency): base units ("nanos") per coin.
S_REF: int = 10 ** 9

#: Generic asset: base units per coin.
S_GEN: int = 10 ** 18

#: Reference-to-generic base-unit scaling factor (S_GEN / S_REF).
K: int = S_GEN // S_REF


# ---------------------------------------------------------------------------
# Exchange-rate scale
# ---------------------------------------------------------------------------

#: Rates are stored as (selling base units per buying base unit) * 1e38.
RATE_SCALE: int = 10 ** 38

#: Numerator used to invert a scaled rate while staying on the 1e38 grid.
RATE_SCALE_SQUARED: int = RATE_SCALE * RATE_SCALE


# ---------------------------------------------------------------------------
# Float bridge
# ---------------------------------------------------------------------------

#: Significant digits a float64 carries reliably (IEEE-754 double).
SIGNIFICANT_DIGITS: int = 15


__all__ = [
    "MAX_UINT256",
    "S_REF",
    "S_GEN",
    "K",
    "RATE_SCALE",
    "RATE_SCALE_SQUARED",
    "SIGNIFICANT_DIGITS",
]
