"""
MCP server exposing BscScan/Etherscan/Polygonscan queries.
"""

import argparse
from collections.abc import Mapping
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from .accounts import RecordKind
from .chains import resolve_chain
from .config import load_context
from .service import EvmScanService

server = FastMCP(
    name="evmscan",
    instructions="Query account transactions, balances, native token price and verified contract source on BSC, Ethereum and Polygon explorers.",
)

_services: Dict[str, EvmScanService] = {}


def _get_service(chain: Optional[str] = None) -> EvmScanService:
    key = resolve_chain(chain).value if chain else ""
    if key not in _services:
        _services[key] = EvmScanService(load_context(chain))
    return _services[key]


def _normalize_addresses(value: Any) -> list:
    """
    Ensure `addresses` is a list:
    - str: comma-separated list is split
    - list/tuple: kept as list
    - Mapping or anything else: rejected
    """
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Mapping):
        raise ValueError("addresses must be an array, not an object/map.")
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValueError("addresses must be an array of addresses.")


@server.tool(
    name="get_balance",
    title="Get Native Balance",
    description="Native token balance (wei and whole units) of an address.",
)
def get_balance(address: str, chain: Optional[str] = None) -> dict:
    return _get_service(chain).get_balance(address)


@server.tool(
    name="get_balances",
    title="Get Native Balances",
    description="Native token balances of up to 20 addresses in one request. `addresses` must be an array.",
)
def get_balances(addresses: Any, chain: Optional[str] = None) -> dict:
    return _get_service(chain).get_balances(_normalize_addresses(addresses))


@server.tool(
    name="list_transactions",
    title="List Transactions",
    description="All normal or internal transactions of an address, oldest first (capped at 10,000).",
)
def list_transactions(address: str, kind: str = "normal", chain: Optional[str] = None) -> dict:
    if kind not in {RecordKind.NORMAL.value, RecordKind.INTERNAL.value}:
        raise ValueError("kind must be 'normal' or 'internal'.")
    return _get_service(chain).list_records(address, kind)


@server.tool(
    name="list_token_transfers",
    title="List Token Transfers",
    description="All ERC-20/BEP-20 transfer events of a wallet address, oldest first (capped at 10,000).",
)
def list_token_transfers(address: str, chain: Optional[str] = None) -> dict:
    return _get_service(chain).list_records(address, RecordKind.TOKEN_TRANSFER)


@server.tool(
    name="get_native_price",
    title="Get Native Token Price",
    description="Last BTC and USD price of the chain's native token.",
)
def get_native_price(chain: Optional[str] = None) -> dict:
    return _get_service(chain).get_native_price()


@server.tool(
    name="get_abi",
    title="Get Contract ABI",
    description="ABI of a verified contract as JSON text.",
)
def get_abi(address: str, pretty: bool = False, chain: Optional[str] = None) -> dict:
    return _get_service(chain).get_abi(address, pretty=pretty)


@server.tool(
    name="get_source_code",
    title="Get Verified Source Code",
    description="Verified source of a contract. Multi-file (standard-json-input) submissions are split per file.",
)
def get_source_code(address: str, chain: Optional[str] = None) -> dict:
    return _get_service(chain).get_source_code(address)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the evmscan MCP server.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol for MCP.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--mount-path",
        default="/",
        help="Mount path for SSE transport (only when transport=sse).",
    )
    args = parser.parse_args()

    # FastMCP uses host/port only for SSE/HTTP transports; stdio ignores them.
    server.settings.host = args.host
    server.settings.port = args.port

    if args.transport == "sse":
        server.run(transport="sse", mount_path=args.mount_path)
    else:
        server.run(transport=args.transport)


if __name__ == "__main__":
    main()
