#!/usr/bin/env python3
"""Command-line front end for the coinscale converters.

Examples:
  coinscale to-rate 3 --buy generic --sell generic
  coinscale to-rate 3 --buy generic --sell generic --op ASK
  coinscale from-rate 100000000000000000000000000000 --buy generic --sell reference
  coinscale to-base-units 1.5 --buy reference --sell generic --op BID
  coinscale from-base-units 1000000000000000000 --buy generic --sell reference --op BID --float
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import set_debug
from .core import (
    Asset,
    ConversionError,
    OperationType,
    base_units_to_float,
    base_units_to_quantity,
    price_from_rate,
    quantity_to_base_units,
    rate_from_decimal,
    rate_from_price,
    rate_to_decimal,
    rate_to_float,
)

ASSET_METAVAR = "{" + ",".join(a.value for a in Asset) + "}"
OP_METAVAR = "{" + ",".join(op.value for op in OperationType) + "}"


def _add_pair_args(p: argparse.ArgumentParser, *, op_required: bool) -> None:
    p.add_argument("--buy", type=Asset.parse, metavar=ASSET_METAVAR, required=True, help="Asset class being bought")
    p.add_argument("--sell", type=Asset.parse, metavar=ASSET_METAVAR, required=True, help="Asset class being sold")
    p.add_argument(
        "--op",
        type=OperationType.parse,
        metavar=OP_METAVAR,
        required=op_required,
        default=None,
        help="Order side" + ("" if op_required else " (rates: quote the price for this side)"),
    )


def _scaled_int(text: str) -> int:
    try:
        return int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a base-10 integer: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coinscale", description="Fixed-point price/quantity converter")
    parser.add_argument("--debug", action="store_true", help="Print intermediate scaling steps")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("to-rate", help="Price -> scaled exchange rate")
    p.add_argument("price", help="Decimal price, selling coins per buying coin")
    _add_pair_args(p, op_required=False)

    p = sub.add_parser("from-rate", help="Scaled exchange rate -> price")
    p.add_argument("scaled_rate", type=_scaled_int, help="Scaled exchange rate (integer)")
    _add_pair_args(p, op_required=False)
    p.add_argument("--float", dest="as_float", action="store_true", help="Print as float64")

    p = sub.add_parser("to-base-units", help="Quantity -> base units")
    p.add_argument("quantity", help="Decimal quantity in the coin the order side refers to")
    _add_pair_args(p, op_required=True)

    p = sub.add_parser("from-base-units", help="Base units -> quantity")
    p.add_argument("base_units", type=_scaled_int, help="Quantity in base units (integer)")
    _add_pair_args(p, op_required=True)
    p.add_argument("--float", dest="as_float", action="store_true", help="Print as float64")

    return parser


def run(args: argparse.Namespace) -> str:
    buy, sell, op = args.buy, args.sell, args.op

    if args.command == "to-rate":
        if op is None:
            return str(rate_from_decimal(buy, sell, args.price))
        return str(rate_from_price(buy, sell, args.price, op))
    if args.command == "from-rate":
        if op is not None:
            return str(price_from_rate(buy, sell, args.scaled_rate, op, as_float=args.as_float))
        if args.as_float:
            return repr(rate_to_float(buy, sell, args.scaled_rate))
        return rate_to_decimal(buy, sell, args.scaled_rate)
    if args.command == "to-base-units":
        return str(quantity_to_base_units(buy, sell, op, args.quantity))
    if args.as_float:
        return repr(base_units_to_float(buy, sell, op, args.base_units))
    return base_units_to_quantity(buy, sell, op, args.base_units)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        set_debug(True)
    try:
        print(run(args))
    except ConversionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    finally:
        if args.debug:
            set_debug(False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
