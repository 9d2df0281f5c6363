from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .chains import ChainInfo
from .deserialize import (
    to_bool,
    to_constructor_arguments,
    to_float,
    to_int,
    to_uint256,
)


def _optional_str(item: Dict[str, Any], key: str) -> Optional[str]:
    value = item.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class NormalTransaction:
    block_number: int
    timestamp: int
    hash: str
    nonce: int
    transaction_index: int
    from_address: str
    to_address: str
    value: int
    gas: int
    gas_price: int
    is_error: bool
    txreceipt_status: str
    input: str
    contract_address: str
    cumulative_gas_used: int
    gas_used: int
    confirmations: int

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "NormalTransaction":
        return cls(
            block_number=to_int(item["blockNumber"], "blockNumber"),
            timestamp=to_int(item["timeStamp"], "timeStamp"),
            hash=item["hash"],
            nonce=to_int(item["nonce"], "nonce"),
            transaction_index=to_int(item["transactionIndex"], "transactionIndex"),
            from_address=item["from"],
            to_address=item["to"],
            value=to_uint256(item["value"], "value"),
            gas=to_int(item["gas"], "gas"),
            gas_price=to_int(item["gasPrice"], "gasPrice"),
            is_error=to_bool(item["isError"], "isError"),
            txreceipt_status=item["txreceipt_status"],
            input=item["input"],
            contract_address=item["contractAddress"],
            cumulative_gas_used=to_int(item["cumulativeGasUsed"], "cumulativeGasUsed"),
            gas_used=to_int(item["gasUsed"], "gasUsed"),
            confirmations=to_int(item["confirmations"], "confirmations"),
        )


@dataclass(frozen=True)
class InternalTransaction:
    block_number: int
    timestamp: int
    hash: str
    from_address: str
    to_address: str
    value: int
    contract_address: str
    input: str
    type: Optional[str]
    gas: int
    gas_used: int
    trace_id: Optional[str]
    is_error: bool
    err_code: Optional[str]

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "InternalTransaction":
        return cls(
            block_number=to_int(item["blockNumber"], "blockNumber"),
            timestamp=to_int(item["timeStamp"], "timeStamp"),
            hash=item["hash"],
            from_address=item["from"],
            to_address=item["to"],
            value=to_uint256(item["value"], "value"),
            contract_address=item["contractAddress"],
            input=item["input"],
            type=_optional_str(item, "type"),
            gas=to_int(item["gas"], "gas"),
            gas_used=to_int(item["gasUsed"], "gasUsed"),
            trace_id=_optional_str(item, "traceId"),
            is_error=to_bool(item["isError"], "isError"),
            err_code=_optional_str(item, "errCode"),
        )


@dataclass(frozen=True)
class TokenTransferEvent:
    """ERC-20 (BEP-20 on BSC) transfer event touching an address."""

    block_number: int
    timestamp: int
    hash: str
    nonce: int
    block_hash: str
    from_address: str
    contract_address: str
    to_address: str
    value: int
    token_name: str
    token_symbol: str
    token_decimal: int
    transaction_index: int
    gas: int
    gas_price: int
    gas_used: int
    cumulative_gas_used: int
    input: str
    confirmations: int

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "TokenTransferEvent":
        return cls(
            block_number=to_int(item["blockNumber"], "blockNumber"),
            timestamp=to_int(item["timeStamp"], "timeStamp"),
            hash=item["hash"],
            nonce=to_int(item["nonce"], "nonce"),
            block_hash=item["blockHash"],
            from_address=item["from"],
            contract_address=item["contractAddress"],
            to_address=item["to"],
            value=to_uint256(item["value"], "value"),
            token_name=item["tokenName"],
            token_symbol=item["tokenSymbol"],
            token_decimal=to_int(item["tokenDecimal"], "tokenDecimal"),
            transaction_index=to_int(item["transactionIndex"], "transactionIndex"),
            gas=to_int(item["gas"], "gas"),
            gas_price=to_int(item["gasPrice"], "gasPrice"),
            gas_used=to_int(item["gasUsed"], "gasUsed"),
            cumulative_gas_used=to_int(item["cumulativeGasUsed"], "cumulativeGasUsed"),
            input=item["input"],
            confirmations=to_int(item["confirmations"], "confirmations"),
        )


@dataclass(frozen=True)
class AccountBalance:
    account: str
    balance: int

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "AccountBalance":
        return cls(account=item["account"], balance=to_uint256(item["balance"], "balance"))


@dataclass(frozen=True)
class NativeTokenLastPrice:
    btc: float
    btc_timestamp: int
    usd: float
    usd_timestamp: int

    @classmethod
    def from_api(cls, item: Dict[str, Any], chain: ChainInfo) -> "NativeTokenLastPrice":
        # Field names differ per chain (ethusd vs maticusd), remap into one shape.
        btc_key = chain.price_field("btc")
        usd_key = chain.price_field("usd")
        return cls(
            btc=to_float(item[btc_key], btc_key),
            btc_timestamp=to_int(item[f"{btc_key}_timestamp"], f"{btc_key}_timestamp"),
            usd=to_float(item[usd_key], usd_key),
            usd_timestamp=to_int(item[f"{usd_key}_timestamp"], f"{usd_key}_timestamp"),
        )


@dataclass(frozen=True)
class ContractSourceCode:
    """
    One verified source record.

    For unverified contracts the explorer still answers with a record whose
    fields are mostly empty and whose ABI reads "Contract source code not verified".
    """

    source_code: str
    abi: str
    contract_name: str
    compiler_version: str
    optimization_used: bool
    runs: int
    constructor_arguments: List[str] = field(default_factory=list)
    evm_version: str = ""
    library: str = ""
    license_type: str = ""
    proxy: bool = False
    implementation: str = ""
    swarm_source: str = ""

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ContractSourceCode":
        def text(key: str) -> str:
            value = item.get(key)
            return value if isinstance(value, str) else ""

        runs = text("Runs").strip()
        return cls(
            source_code=item["SourceCode"],
            abi=item["ABI"],
            contract_name=text("ContractName"),
            compiler_version=text("CompilerVersion"),
            optimization_used=to_bool(text("OptimizationUsed"), "OptimizationUsed"),
            # Unverified contracts report an empty run count.
            runs=to_int(runs, "Runs") if runs else 0,
            constructor_arguments=to_constructor_arguments(text("ConstructorArguments")),
            evm_version=text("EVMVersion"),
            library=text("Library"),
            license_type=text("LicenseType"),
            proxy=to_bool(text("Proxy"), "Proxy"),
            implementation=text("Implementation"),
            swarm_source=text("SwarmSource"),
        )
