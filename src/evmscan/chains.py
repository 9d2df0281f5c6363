from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

_WORD_RE = re.compile(r"[a-z0-9]+")
_SPACE_RE = re.compile(r"[\s_\-]+")


def _norm(text: str) -> str:
    candidate = (text or "").strip().lower()
    candidate = _SPACE_RE.sub(" ", candidate)
    return " ".join(_WORD_RE.findall(candidate))


class ChainType(str, Enum):
    BSC = "bsc"
    ETHEREUM = "ethereum"
    POLYGON = "polygon"


@dataclass(frozen=True)
class ChainInfo:
    """
    Per-chain quirks of an explorer deployment.
    - base_url: explorer API host, requests go to `<base_url>/api`.
    - price_action: stats action returning the native token's last price.
    - price_field_prefix: prefix of the price payload's field names
      (e.g. `maticusd` on Polygon vs `ethusd` everywhere else).
    """

    chain: ChainType
    chainname: str
    base_url: str
    native_symbol: str
    price_action: str
    price_field_prefix: str
    api_key_env: str

    def price_field(self, suffix: str) -> str:
        return f"{self.price_field_prefix}{suffix}"


CHAINS: Dict[ChainType, ChainInfo] = {
    ChainType.BSC: ChainInfo(
        chain=ChainType.BSC,
        chainname="BNB Smart Chain",
        base_url="https://api.bscscan.com",
        native_symbol="BNB",
        price_action="bnbprice",
        # bscscan reports BNB price under eth-prefixed field names.
        price_field_prefix="eth",
        api_key_env="BSCSCAN_API_KEY",
    ),
    ChainType.ETHEREUM: ChainInfo(
        chain=ChainType.ETHEREUM,
        chainname="Ethereum Mainnet",
        base_url="https://api.etherscan.io",
        native_symbol="ETH",
        price_action="ethprice",
        price_field_prefix="eth",
        api_key_env="ETHERSCAN_API_KEY",
    ),
    ChainType.POLYGON: ChainInfo(
        chain=ChainType.POLYGON,
        chainname="Polygon Mainnet",
        base_url="https://api.polygonscan.com",
        native_symbol="MATIC",
        price_action="maticprice",
        price_field_prefix="matic",
        api_key_env="POLYGONSCAN_API_KEY",
    ),
}

_EXTRA_ALIASES: Dict[str, ChainType] = {
    "bnb": ChainType.BSC,
    "binance": ChainType.BSC,
    "bscscan": ChainType.BSC,
    "eth": ChainType.ETHEREUM,
    "mainnet": ChainType.ETHEREUM,
    "etherscan": ChainType.ETHEREUM,
    "matic": ChainType.POLYGON,
    "polygonscan": ChainType.POLYGON,
}


def _build_aliases() -> Dict[str, ChainType]:
    aliases = dict(_EXTRA_ALIASES)
    for chain, info in CHAINS.items():
        aliases[chain.value] = chain
        aliases[_norm(info.chainname)] = chain
    return aliases


_ALIASES = _build_aliases()


def supported_chains() -> List[str]:
    return sorted(chain.value for chain in CHAINS)


def resolve_chain(name: str | ChainType) -> ChainType:
    """Resolve a chain selector from its enum value or a common alias."""
    if isinstance(name, ChainType):
        return name

    normalized = _norm(str(name or ""))
    if normalized in _ALIASES:
        return _ALIASES[normalized]

    allowed = ", ".join(supported_chains())
    raise ValueError(f"Unknown chain '{name}'. Supported: {allowed}.")


def chain_info(chain: str | ChainType) -> ChainInfo:
    return CHAINS[resolve_chain(chain)]
