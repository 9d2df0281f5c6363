import argparse
import json
import logging
import sys
from typing import Optional

from .accounts import RecordKind
from .config import load_context
from .service import EvmScanService


def _add_address(parser: argparse.ArgumentParser, help_text: str = "Target address (0x-prefixed).") -> None:
    parser.add_argument("--address", required=True, help=help_text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query BscScan/Etherscan/Polygonscan account, stats and contract APIs.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--chain",
        required=False,
        help="Chain to query: bsc, ethereum or polygon. Defaults to EVMSCAN_CHAIN env or ethereum.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance_parser = subparsers.add_parser("balance", help="Native token balance of an address")
    _add_address(balance_parser)

    multi_parser = subparsers.add_parser("balance-multi", help="Native token balances of up to 20 addresses")
    multi_parser.add_argument(
        "--address",
        required=True,
        nargs="+",
        dest="addresses",
        help="One or more addresses (max 20).",
    )

    txs_parser = subparsers.add_parser("txs", help="List all normal or internal transactions")
    _add_address(txs_parser)
    txs_parser.add_argument(
        "--kind",
        choices=[RecordKind.NORMAL.value, RecordKind.INTERNAL.value],
        default=RecordKind.NORMAL.value,
        help="Transaction kind (default normal).",
    )

    transfers_parser = subparsers.add_parser("token-transfers", help="List ERC-20/BEP-20 transfer events")
    _add_address(transfers_parser, "Wallet address (0x-prefixed).")

    subparsers.add_parser("price", help="Last price of the chain's native token")

    abi_parser = subparsers.add_parser("abi", help="Fetch a verified contract's ABI")
    _add_address(abi_parser, "Contract address (0x-prefixed).")
    abi_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Re-indent the ABI JSON.",
    )

    source_parser = subparsers.add_parser("source", help="Fetch a verified contract's source files")
    _add_address(source_parser, "Contract address (0x-prefixed).")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        service = EvmScanService(load_context(args.chain))

        if args.command == "balance":
            result = service.get_balance(args.address)
        elif args.command == "balance-multi":
            result = service.get_balances(args.addresses)
        elif args.command == "txs":
            result = service.list_records(args.address, args.kind)
        elif args.command == "token-transfers":
            result = service.list_records(args.address, RecordKind.TOKEN_TRANSFER)
        elif args.command == "price":
            result = service.get_native_price()
        elif args.command == "abi":
            result = service.get_abi(args.address, pretty=args.pretty)
        else:
            result = service.get_source_code(args.address)
        print(json.dumps(result, indent=2))
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
