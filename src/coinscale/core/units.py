"""
Unit model: asset classes, order sides and the base-unit scale each one uses.

- Asset: REFERENCE (network currency, 1e9 base units per coin) or GENERIC
  (any other coin, 1e18 base units per coin).
- A pair is an ordered (buy, sell) tuple; REFERENCE/REFERENCE is never valid.
- OperationType / FillType carry both their API string and their ledger code.

Identity resolution (public keys, usernames, empty-string sentinels) happens
upstream; this module only ever sees resolved Asset tags.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .constants import K, S_GEN, S_REF
from .exc import AssetPairError, ParseError


class Asset(Enum):
    """Asset class of one side of a pair."""

    REFERENCE = "reference"
    GENERIC = "generic"

    @property
    def base_units_per_coin(self) -> int:
        return S_REF if self is Asset.REFERENCE else S_GEN

    @classmethod
    def parse(cls, value: Union["Asset", str]) -> "Asset":
        if isinstance(value, Asset):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ParseError(f"unknown asset class {value!r}")


class OperationType(Enum):
    """Order direction. BID buys the pair's buy asset, ASK sells it."""

    ASK = "ASK"
    BID = "BID"

    @property
    def ledger_code(self) -> int:
        return _OPERATION_CODES[self]

    @classmethod
    def from_ledger_code(cls, code: int) -> "OperationType":
        for op, c in _OPERATION_CODES.items():
            if c == code:
                return op
        raise ParseError(f"unknown operation type code {code!r}")

    @classmethod
    def parse(cls, value: Union["OperationType", str, int]) -> "OperationType":
        """Accept an OperationType, its API string ("BID"/"ASK") or its ledger code."""
        if isinstance(value, OperationType):
            return value
        if isinstance(value, bool):
            raise ParseError(f"unknown operation type {value!r}")
        if isinstance(value, int):
            return cls.from_ledger_code(value)
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ParseError(f"unknown operation type {value!r}")


class FillType(Enum):
    """Time-in-force of a limit order."""

    GOOD_TILL_CANCELLED = "GOOD_TILL_CANCELLED"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"

    @property
    def ledger_code(self) -> int:
        return _FILL_CODES[self]

    @classmethod
    def from_ledger_code(cls, code: int) -> "FillType":
        for ft, c in _FILL_CODES.items():
            if c == code:
                return ft
        raise ParseError(f"unknown fill type code {code!r}")

    @classmethod
    def parse(cls, value: Union["FillType", str, int]) -> "FillType":
        if isinstance(value, FillType):
            return value
        if isinstance(value, bool):
            raise ParseError(f"unknown fill type {value!r}")
        if isinstance(value, int):
            return cls.from_ledger_code(value)
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ParseError(f"unknown fill type {value!r}")


# Ledger enum values (0 is UNDEFINED on the ledger and never produced here).
_OPERATION_CODES = {
    OperationType.ASK: 1,
    OperationType.BID: 2,
}

_FILL_CODES = {
    FillType.GOOD_TILL_CANCELLED: 1,
    FillType.IMMEDIATE_OR_CANCEL: 2,
    FillType.FILL_OR_KILL: 3,
}


# ----------------------------
# Pair rules
# ----------------------------

def check_pair(buy: Asset, sell: Asset) -> None:
    """Reject non-Asset tags and the REFERENCE/REFERENCE pair."""
    if not isinstance(buy, Asset) or not isinstance(sell, Asset):
        raise AssetPairError(f"asset pair must be Asset tags, got ({buy!r}, {sell!r})")
    if buy is Asset.REFERENCE and sell is Asset.REFERENCE:
        raise AssetPairError("a pair cannot trade the reference asset against itself")


def base_units_per_coin(asset: Asset) -> int:
    if not isinstance(asset, Asset):
        raise AssetPairError(f"expected Asset, got {asset!r}")
    return asset.base_units_per_coin


def scaling_factor_for(buy: Asset, sell: Asset) -> int:
    """Return K = S_GEN / S_REF, the base-unit correction for reference-side pairs."""
    check_pair(buy, sell)
    return K


def quantity_asset_side(buy: Asset, sell: Asset, op: OperationType) -> Asset:
    """Which asset a QuantityToFill is denominated in.

    The quantity always names the coin on the side the operation refers to, and
    only the reference asset has a different scale, so only it is special-cased:
    - buy is REFERENCE and op is BID  -> REFERENCE
    - sell is REFERENCE and op is ASK -> REFERENCE
    - otherwise                       -> GENERIC
    """
    check_pair(buy, sell)
    op = OperationType.parse(op)
    if buy is Asset.REFERENCE and op is OperationType.BID:
        return Asset.REFERENCE
    if sell is Asset.REFERENCE and op is OperationType.ASK:
        return Asset.REFERENCE
    return Asset.GENERIC


__all__ = [
    "Asset",
    "OperationType",
    "FillType",
    "check_pair",
    "base_units_per_coin",
    "scaling_factor_for",
    "quantity_asset_side",
]
