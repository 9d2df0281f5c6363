from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence

from .client import EvmScanClient
from .deserialize import to_uint256
from .envelope import Envelope, decode_envelope, list_of, unwrap
from .errors import ParameterError
from .models import AccountBalance, InternalTransaction, NormalTransaction, TokenTransferEvent
from .pagination import PAGE_SIZE, fetch_all_pages

MAX_BALANCE_ADDRESSES = 20


class RecordKind(str, Enum):
    NORMAL = "normal"
    INTERNAL = "internal"
    TOKEN_TRANSFER = "token_transfer"


@dataclass(frozen=True)
class ListEndpoint:
    action: str
    end_block: int
    decode: Callable[[Dict[str, Any]], Any]


LIST_ENDPOINTS: Dict[RecordKind, ListEndpoint] = {
    RecordKind.NORMAL: ListEndpoint("txlist", 99999999, NormalTransaction.from_api),
    RecordKind.INTERNAL: ListEndpoint("txlistinternal", 99999999, InternalTransaction.from_api),
    RecordKind.TOKEN_TRANSFER: ListEndpoint("tokentx", 999999999, TokenTransferEvent.from_api),
}


class Accounts:
    """Account APIs: transaction lists, token transfer events and balances."""

    def __init__(self, client: EvmScanClient) -> None:
        self.client = client

    def get_list_normal_transactions(self, address: str) -> List[NormalTransaction]:
        return self.get_list_records(address, RecordKind.NORMAL)

    def get_list_internal_transactions(self, address: str) -> List[InternalTransaction]:
        return self.get_list_records(address, RecordKind.INTERNAL)

    def get_erc20_transfer_events(self, address: str) -> List[TokenTransferEvent]:
        """
        ERC-20 (BEP-20 on BSC) transfer events where `address` is sender or receiver.

        The address is passed as-is; a contract address yields the explorer's error.
        """
        return self.get_list_records(address, RecordKind.TOKEN_TRANSFER)

    def get_list_records(self, address: str, kind: RecordKind) -> List[Any]:
        """
        Fetch every record of `kind` for `address`, oldest first.

        Capped at 10,000 records: the explorers stop answering past
        page * offset = 10000, so addresses with more history are truncated.
        """
        endpoint = LIST_ENDPOINTS[RecordKind(kind)]
        decode = list_of(endpoint.decode)

        def fetch_page(page: int, offset: int) -> Envelope[List[Any]]:
            payload = self.client.request(
                {
                    "module": "account",
                    "action": endpoint.action,
                    "address": address,
                    "startblock": 0,
                    "endblock": endpoint.end_block,
                    "page": page,
                    "offset": offset,
                    "sort": "asc",
                }
            )
            return decode_envelope(payload, decode)

        return fetch_all_pages(fetch_page, page_size=PAGE_SIZE)

    def get_balance_address(self, address: str) -> int:
        """Native token balance of `address`, in wei."""
        payload = self.client.request(
            {
                "module": "account",
                "action": "balance",
                "address": address,
                "tag": "latest",
            }
        )
        return unwrap(decode_envelope(payload, to_uint256))

    def get_balance_addresses_multi(self, addresses: Sequence[str]) -> List[AccountBalance]:
        """Native token balances of up to 20 addresses in one request."""
        if isinstance(addresses, str):
            raise ParameterError("addresses must be a sequence of addresses, not a string")
        if not addresses:
            raise ParameterError("addresses must not be empty")
        if len(addresses) > MAX_BALANCE_ADDRESSES:
            raise ParameterError(
                f"at most {MAX_BALANCE_ADDRESSES} addresses are allowed, got {len(addresses)}"
            )

        payload = self.client.request(
            {
                "module": "account",
                "action": "balancemulti",
                "address": ",".join(addresses),
                "tag": "latest",
            }
        )
        return unwrap(decode_envelope(payload, list_of(AccountBalance.from_api)))
