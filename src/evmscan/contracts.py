import json
import logging
from typing import List, Tuple

from .client import EvmScanClient
from .envelope import decode_envelope, list_of, unwrap
from .errors import ApiResponseError, InternalGenericError, UnverifiedContractError
from .models import ContractSourceCode
from .sources import clean_escaped_text, is_unverified, normalize_source_records

logger = logging.getLogger(__name__)


def _as_str(raw: object) -> str:
    if not isinstance(raw, str):
        raise TypeError(f"expected a string, got {type(raw).__name__}")
    return raw


class Contracts:
    """Contract APIs: ABI and verified source code."""

    def __init__(self, client: EvmScanClient) -> None:
        self.client = client

    def get_abi(self, address: str, pretty: bool = False) -> str:
        """
        ABI of a verified contract as JSON text.

        With `pretty`, the ABI is parsed and re-serialized with indentation.
        """
        payload = self.client.request(
            {"module": "contract", "action": "getabi", "address": address}
        )
        abi = clean_escaped_text(unwrap(decode_envelope(payload, _as_str)))
        if not pretty:
            return abi

        try:
            return json.dumps(json.loads(abi), indent=2)
        except ValueError as exc:
            raise InternalGenericError(f"create JSON object from string; err={exc}") from exc

    def get_verified_source_code(self, address: str) -> Tuple[List[ContractSourceCode], bool]:
        """
        Verified source code of `address`.

        Returns `(records, is_multi_file)`. For a single-file submission the list
        holds one record. For a standard-json-input submission it holds the
        combined record followed by one record per source file, each named by
        its path.
        """
        payload = self.client.request(
            {"module": "contract", "action": "getsourcecode", "address": address}
        )
        records = unwrap(decode_envelope(payload, list_of(ContractSourceCode.from_api)))

        if not records:
            raise ApiResponseError("source code is empty")

        # The explorer answers status "1" for unverified contracts too; only the
        # ABI text tells them apart.
        if is_unverified(records[0]):
            raise UnverifiedContractError("made query to un-verified contract source code")

        normalized, is_multi_file = normalize_source_records(records)
        logger.debug(
            "source code for %s: %d record(s), multi_file=%s",
            address,
            len(normalized),
            is_multi_file,
        )
        return normalized, is_multi_file
