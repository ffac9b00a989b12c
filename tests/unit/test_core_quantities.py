import pytest
from decimal import Decimal

from coinscale.core import (
    MAX_UINT256,
    Asset,
    OperationType,
    ParseError,
    RangeError,
    Uint256OverflowError,
    AssetPairError,
    quantity_to_base_units,
    base_units_to_quantity,
    base_units_to_float,
    truncate_to_significant_digits,
)

REF = Asset.REFERENCE
GEN = Asset.GENERIC
BID = OperationType.BID
ASK = OperationType.ASK

# (buy, sell, op, denominated in the reference asset?)
SIDE_CASES = [
    (REF, GEN, BID, True),    # bid to buy the reference asset with a generic coin
    (GEN, REF, BID, False),   # bid to buy a generic coin with the reference asset
    (GEN, REF, ASK, True),    # ask to sell the reference asset for a generic coin
    (REF, GEN, ASK, False),   # ask to sell a generic coin for the reference asset
    (GEN, GEN, BID, False),
    (GEN, GEN, ASK, False),
]


# -----------------------------
# quantity_to_base_units
# -----------------------------

@pytest.mark.parametrize("buy,sell,op,is_ref", SIDE_CASES)
def test_one_coin_to_base_units(buy, sell, op, is_ref):
    expected = 10 ** 9 if is_ref else 10 ** 18
    print(f"[quantity_to_base_units] {buy.value}/{sell.value} {op.value} 1.0 -> expect {expected}")
    assert quantity_to_base_units(buy, sell, op, truncate_to_significant_digits(1.0)) == expected
    assert quantity_to_base_units(buy, sell, op, 1.0) == expected
    assert quantity_to_base_units(buy, sell, op, "1") == expected


def test_fractional_quantities():
    print("[quantity_to_base_units] 1.5 GEN -> 1.5e18; 0.000000001 REF -> 1; Decimal 2.5 -> 2.5e18")
    assert quantity_to_base_units(GEN, GEN, BID, "1.5") == 15 * 10 ** 17
    assert quantity_to_base_units(REF, GEN, BID, "0.000000001") == 1
    assert quantity_to_base_units(GEN, GEN, ASK, Decimal("2.5")) == 25 * 10 ** 17
    # digits below one base unit are floored away
    assert quantity_to_base_units(REF, GEN, BID, "1.0000000019") == 1_000_000_001


@pytest.mark.parametrize("quantity", ["0", "0.0", ".0", 0.0])
def test_zero_quantity_rejected_everywhere(pair, op, quantity):
    buy, sell = pair
    print(f"[quantity-zero] {buy.value}/{sell.value} {op.value} {quantity!r} -> expect RangeError")
    with pytest.raises(RangeError):
        quantity_to_base_units(buy, sell, op, quantity)


@pytest.mark.parametrize("quantity", ["-1", "-1.1", "-.1", "a", "a.b", ".a", "", "1e3", -1.0])
def test_malformed_quantity_rejected(op, quantity):
    print(f"[quantity-malformed] {op.value} {quantity!r} -> expect ParseError")
    with pytest.raises(ParseError):
        quantity_to_base_units(GEN, GEN, op, quantity)


def test_quantity_below_resolution():
    print("[quantity-resolution] 1e-10 REF and 1e-19 GEN truncate to zero -> RangeError")
    with pytest.raises(RangeError):
        quantity_to_base_units(REF, GEN, BID, "0.0000000001")
    with pytest.raises(RangeError):
        quantity_to_base_units(GEN, GEN, BID, "0.0000000000000000001")
    # 1e-10 is fine when the quantity is in generic base units
    assert quantity_to_base_units(GEN, REF, BID, "0.0000000001") == 10 ** 8


def test_quantity_overflow():
    print("[quantity-overflow] 1e60 GEN coins = 1e78 base units -> Uint256OverflowError")
    with pytest.raises(Uint256OverflowError):
        quantity_to_base_units(GEN, GEN, BID, "1" + "0" * 60)


def test_quantity_rejects_reference_pair():
    with pytest.raises(AssetPairError):
        quantity_to_base_units(REF, REF, BID, "1")


# -----------------------------
# base_units_to_quantity / base_units_to_float
# -----------------------------

@pytest.mark.parametrize("buy,sell,op,is_ref", SIDE_CASES)
def test_base_units_to_quantity(buy, sell, op, is_ref):
    expected_str, expected_float = ("1000000000.0", 1e9) if is_ref else ("1.0", 1.0)
    print(f"[base_units_to_quantity] {buy.value}/{sell.value} {op.value} 1e18 -> expect {expected_str}")
    assert base_units_to_quantity(buy, sell, op, 10 ** 18) == expected_str
    assert base_units_to_float(buy, sell, op, 10 ** 18) == expected_float


@pytest.mark.parametrize("op", [BID, ASK])
def test_zero_base_units_rejected(op):
    print(f"[base_units-zero] {op.value} 0 -> expect RangeError")
    with pytest.raises(RangeError):
        base_units_to_quantity(REF, GEN, op, 0)
    with pytest.raises(RangeError):
        base_units_to_float(REF, GEN, op, 0)


def test_base_units_domain():
    print("[base_units-domain] negative -> RangeError, > 2^256-1 -> Uint256OverflowError, str -> TypeError")
    with pytest.raises(RangeError):
        base_units_to_quantity(GEN, GEN, BID, -1)
    with pytest.raises(Uint256OverflowError):
        base_units_to_quantity(GEN, GEN, BID, MAX_UINT256 + 1)
    with pytest.raises(TypeError):
        base_units_to_quantity(GEN, GEN, BID, "100")  # type: ignore[arg-type]


@pytest.mark.parametrize("quantity", ["1.5", "0.000000001", "42.0", "123456789.123456789"])
def test_quantity_round_trip(pair, op, quantity):
    buy, sell = pair
    print(f"[quantity-round-trip] {buy.value}/{sell.value} {op.value} {quantity!r}")
    base_units = quantity_to_base_units(buy, sell, op, quantity)
    assert base_units_to_quantity(buy, sell, op, base_units) == quantity
