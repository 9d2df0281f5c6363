from .client import EvmScanClient
from .envelope import decode_envelope, unwrap
from .models import NativeTokenLastPrice


class Stats:
    """Stats APIs."""

    def __init__(self, client: EvmScanClient) -> None:
        self.client = client

    def get_native_token_last_price(self) -> NativeTokenLastPrice:
        """Last BTC and USD price of the chain's native token (BNB, ETH or MATIC)."""
        chain = self.client.context.info
        payload = self.client.request({"module": "stats", "action": chain.price_action})
        return unwrap(
            decode_envelope(payload, lambda raw: NativeTokenLastPrice.from_api(raw, chain))
        )
