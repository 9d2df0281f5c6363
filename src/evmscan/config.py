import os
from dataclasses import dataclass, field
from typing import Optional, Union

from .chains import ChainInfo, ChainType, chain_info, resolve_chain

DEFAULT_CHAIN = "ethereum"
# None leaves the timeout to the transport.
DEFAULT_REQUEST_TIMEOUT: Optional[float] = None


@dataclass
class Context:
    """Which chain to talk to, with which API key."""

    chain: ChainType
    api_key: str
    base_url: str = ""
    request_timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT
    info: ChainInfo = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.chain = resolve_chain(self.chain)
        self.info = chain_info(self.chain)
        self.base_url = (self.base_url or self.info.base_url).rstrip("/")

    @classmethod
    def create(cls, chain: Union[str, ChainType], api_key: str) -> "Context":
        return cls(chain=resolve_chain(chain), api_key=api_key)

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api"


def load_context(chain: Optional[str] = None) -> Context:
    """Load context from environment variables."""
    selected = resolve_chain(chain or os.getenv("EVMSCAN_CHAIN", DEFAULT_CHAIN))
    info = chain_info(selected)

    api_key = os.getenv("EVMSCAN_API_KEY") or os.getenv(info.api_key_env)
    if not api_key:
        raise ValueError(f"EVMSCAN_API_KEY or {info.api_key_env} is required but not set.")

    base_url = os.getenv("EVMSCAN_BASE_URL", "").strip()
    timeout_env = os.getenv("REQUEST_TIMEOUT")
    timeout = float(timeout_env) if timeout_env else DEFAULT_REQUEST_TIMEOUT

    return Context(
        chain=selected,
        api_key=api_key.strip(),
        base_url=base_url,
        request_timeout=timeout,
    )
