"""
Command-line access to the Monaco SDK conversion helpers and ABIs.

Examples:
    python -m monaco_sdk to-universal 1000000 --decimals 6
    python -m monaco_sdk parse-universal 1.5 --decimals 6
    python -m monaco_sdk abi CLOB
"""

import argparse
import json
import sys
from typing import List, Optional

from monaco_sdk.abis import CONTRACT_NAMES, load_abi
from monaco_sdk.utils.decimal_utils import (
    to_universal_amount,
    from_universal_amount,
    to_universal_price,
    from_universal_price,
    parse_native_amount,
    format_native_amount,
    parse_to_universal_amount,
    format_universal_amount,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monaco_sdk",
        description="Convert token amounts and prices between native and universal (18-decimal) precision."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    amount_commands = {
        "to-universal": "Native integer amount to universal precision.",
        "from-universal": "Universal integer amount to native precision.",
        "format": "Native integer amount to a decimal string.",
        "format-universal": "Universal integer amount to a native decimal string.",
    }
    for name, help_text in amount_commands.items():
        command = commands.add_parser(name, help=help_text)
        command.add_argument("amount", type=int)
        command.add_argument("--decimals", type=int, required=True, help="Token's native decimals.")

    for name, help_text in (
        ("parse", "Decimal string to a native integer amount."),
        ("parse-universal", "Decimal string to a universal integer amount."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("amount", help="Human-readable amount, e.g. 1.5")
        command.add_argument("--decimals", type=int, required=True, help="Token's native decimals.")

    for name, help_text in (
        ("to-universal-price", "Native integer price to universal precision."),
        ("from-universal-price", "Universal integer price to the quote token's precision."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("price", type=int)
        command.add_argument("--base-decimals", type=int, default=18)
        command.add_argument("--quote-decimals", type=int, required=True)

    abi_command = commands.add_parser("abi", help="Print a contract ABI as JSON.")
    abi_command.add_argument("contract", choices=CONTRACT_NAMES)
    abi_command.add_argument("--abi-dir", default=None, help="Directory holding the ABI JSON files.")

    return parser


def run_command(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    if args.command == "to-universal":
        return str(to_universal_amount(args.amount, args.decimals))
    if args.command == "from-universal":
        return str(from_universal_amount(args.amount, args.decimals))
    if args.command == "format":
        return format_native_amount(args.amount, args.decimals)
    if args.command == "format-universal":
        return format_universal_amount(args.amount, args.decimals)
    if args.command == "parse":
        return str(parse_native_amount(args.amount, args.decimals))
    if args.command == "parse-universal":
        return str(parse_to_universal_amount(args.amount, args.decimals))
    if args.command == "to-universal-price":
        return str(to_universal_price(args.price, args.base_decimals, args.quote_decimals))
    if args.command == "from-universal-price":
        return str(from_universal_price(args.price, args.base_decimals, args.quote_decimals))
    return json.dumps(load_abi(args.contract, args.abi_dir), indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        output = run_command(args)
    except (ValueError, OSError) as e:
        print(f"ERROR: {str(e)}")
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
