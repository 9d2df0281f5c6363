from typing import Any, Dict, List, Optional

import pytest

from evmscan.client import EvmScanClient
from evmscan.config import Context


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, invalid_json: bool = False) -> None:
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for requests.Session: records GETs and replays canned responses in order."""

    def __init__(self, responses: List[Any]) -> None:
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"unexpected request #{len(self.calls)}: {params}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, FakeResponse):
            return item
        return FakeResponse(item)


def envelope(result: Any, status: str = "1", message: str = "OK") -> Dict[str, Any]:
    return {"status": status, "message": message, "result": result}


def normal_tx(i: int) -> Dict[str, str]:
    return {
        "blockNumber": str(1000 + i),
        "timeStamp": str(1600000000 + i),
        "hash": f"0x{i:064x}",
        "nonce": str(i),
        "blockHash": f"0x{i + 1:064x}",
        "transactionIndex": "3",
        "from": "0x1111111111111111111111111111111111111111",
        "to": "0x2222222222222222222222222222222222222222",
        "value": "1000000000000000000",
        "gas": "21000",
        "gasPrice": "5000000000",
        "isError": "0",
        "txreceipt_status": "1",
        "input": "0x",
        "contractAddress": "",
        "cumulativeGasUsed": "42000",
        "gasUsed": "21000",
        "confirmations": "12",
    }


def internal_tx(i: int) -> Dict[str, str]:
    return {
        "blockNumber": str(2000 + i),
        "timeStamp": str(1600000100 + i),
        "hash": f"0x{i:064x}",
        "from": "0x3333333333333333333333333333333333333333",
        "to": "0x4444444444444444444444444444444444444444",
        "value": "250",
        "contractAddress": "",
        "input": "",
        "type": "call",
        "gas": "2300",
        "gasUsed": "0",
        "traceId": f"0_{i}",
        "isError": "1",
        "errCode": "out of gas",
    }


def token_transfer(i: int) -> Dict[str, str]:
    return {
        "blockNumber": str(3000 + i),
        "timeStamp": str(1600000200 + i),
        "hash": f"0x{i:064x}",
        "nonce": str(i),
        "blockHash": f"0x{i + 7:064x}",
        "from": "0x5555555555555555555555555555555555555555",
        "contractAddress": "0xe9e7cea3dedca5984780bafc599bd69add087d56",
        "to": "0x6666666666666666666666666666666666666666",
        "value": "115792089237316195423570985008687907853269984665640564039457584007913129639935",
        "tokenName": "BUSD Token",
        "tokenSymbol": "BUSD",
        "tokenDecimal": "18",
        "transactionIndex": "7",
        "gas": "90000",
        "gasPrice": "5000000000",
        "gasUsed": "51000",
        "cumulativeGasUsed": "800000",
        "input": "deprecated",
        "confirmations": "3",
    }


@pytest.fixture
def context() -> Context:
    return Context.create("ethereum", "test-key")


@pytest.fixture
def make_client(context):
    def factory(responses: List[Any], ctx: Optional[Context] = None):
        session = FakeSession(responses)
        return EvmScanClient(ctx or context, session=session), session

    return factory
