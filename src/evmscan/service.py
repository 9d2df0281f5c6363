from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence, Union

from .accounts import Accounts, RecordKind
from .client import EvmScanClient
from .config import Context
from .contracts import Contracts
from .stats import Stats
from .units import format_scaled_int


class EvmScanService:
    """Combine context, client and API namespaces into JSON-ready results."""

    def __init__(self, context: Context, client: Optional[EvmScanClient] = None) -> None:
        self.context = context
        self.client = client if client is not None else EvmScanClient(context)
        self.accounts = Accounts(self.client)
        self.stats = Stats(self.client)
        self.contracts = Contracts(self.client)

    def get_balance(self, address: str) -> Dict[str, Any]:
        wei = self.accounts.get_balance_address(address)
        return {
            "address": address,
            "chain": self.context.chain.value,
            **self._amount(wei),
        }

    def get_balances(self, addresses: Sequence[str]) -> Dict[str, Any]:
        balances = self.accounts.get_balance_addresses_multi(addresses)
        return {
            "chain": self.context.chain.value,
            "balances": [
                {"address": entry.account, **self._amount(entry.balance)} for entry in balances
            ],
        }

    def list_records(self, address: str, kind: Union[str, RecordKind] = RecordKind.NORMAL) -> Dict[str, Any]:
        record_kind = self._normalize_kind(kind)
        records = self.accounts.get_list_records(address, record_kind)
        return {
            "address": address,
            "chain": self.context.chain.value,
            "kind": record_kind.value,
            "count": len(records),
            "records": [self._jsonable(asdict(record)) for record in records],
        }

    def get_native_price(self) -> Dict[str, Any]:
        price = self.stats.get_native_token_last_price()
        return {
            "chain": self.context.chain.value,
            "symbol": self.context.info.native_symbol,
            **asdict(price),
        }

    def get_abi(self, address: str, pretty: bool = False) -> Dict[str, Any]:
        return {
            "address": address,
            "chain": self.context.chain.value,
            "abi": self.contracts.get_abi(address, pretty=pretty),
        }

    def get_source_code(self, address: str) -> Dict[str, Any]:
        records, is_multi_file = self.contracts.get_verified_source_code(address)
        return {
            "address": address,
            "chain": self.context.chain.value,
            "multi_file": is_multi_file,
            "files": [asdict(record) for record in records],
        }

    def _amount(self, wei: int) -> Dict[str, str]:
        return {
            "balance_wei": str(wei),
            "balance": format_scaled_int(wei),
            "symbol": self.context.info.native_symbol,
        }

    def _normalize_kind(self, kind: Union[str, RecordKind]) -> RecordKind:
        try:
            return RecordKind(kind)
        except ValueError:
            allowed = ", ".join(item.value for item in RecordKind)
            raise ValueError(f"kind must be one of: {allowed}.") from None

    def _jsonable(self, record: Dict[str, Any]) -> Dict[str, Any]:
        # uint256 amounts exceed what JSON consumers can hold as numbers.
        out = dict(record)
        if isinstance(out.get("value"), int):
            out["value"] = str(out["value"])
        return out
