import pytest

from conftest import envelope
from evmscan.accounts import MAX_BALANCE_ADDRESSES, Accounts
from evmscan.errors import ApiResponseError, JsonParsingError, ParameterError

ADDR_A = "0x1111111111111111111111111111111111111111"
ADDR_B = "0x2222222222222222222222222222222222222222"


def test_balance(make_client):
    client, session = make_client([envelope("40000000000000000000")])

    assert Accounts(client).get_balance_address(ADDR_A) == 40 * 10**18
    assert session.calls[0]["params"] == {
        "module": "account",
        "action": "balance",
        "address": ADDR_A,
        "tag": "latest",
        "apikey": "test-key",
    }


def test_balance_failure_message(make_client):
    client, _ = make_client([envelope("Error! Invalid address format", status="0", message="NOTOK")])

    with pytest.raises(ApiResponseError) as excinfo:
        Accounts(client).get_balance_address("0xnope")

    assert excinfo.value.message == "message:NOTOK, result:Error! Invalid address format"


def test_balance_success_status_with_failure_payload(make_client):
    client, _ = make_client([envelope("Max rate limit reached")])

    with pytest.raises(ApiResponseError, match="un-expected error for success case"):
        Accounts(client).get_balance_address(ADDR_A)


def test_balance_multi(make_client):
    result = [
        {"account": ADDR_A, "balance": "1500000000000000000"},
        {"account": ADDR_B, "balance": "0"},
    ]
    client, session = make_client([envelope(result)])

    balances = Accounts(client).get_balance_addresses_multi([ADDR_A, ADDR_B])

    assert [(b.account, b.balance) for b in balances] == [(ADDR_A, 1500000000000000000), (ADDR_B, 0)]
    params = session.calls[0]["params"]
    assert params["action"] == "balancemulti"
    assert params["address"] == f"{ADDR_A},{ADDR_B}"
    assert params["tag"] == "latest"


def test_balance_multi_malformed_row(make_client):
    client, _ = make_client([envelope([{"account": ADDR_A}])])

    with pytest.raises(JsonParsingError):
        Accounts(client).get_balance_addresses_multi([ADDR_A])


@pytest.mark.parametrize(
    "addresses",
    [
        [],
        [ADDR_A] * (MAX_BALANCE_ADDRESSES + 1),
        ADDR_A,
    ],
    ids=["empty", "too-many", "plain-string"],
)
def test_balance_multi_rejects_before_request(make_client, addresses):
    client, session = make_client([])

    with pytest.raises(ParameterError):
        Accounts(client).get_balance_addresses_multi(addresses)

    assert session.calls == []


def test_balance_multi_accepts_twenty(make_client):
    addresses = [f"0x{i:040x}" for i in range(MAX_BALANCE_ADDRESSES)]
    rows = [{"account": a, "balance": "1"} for a in addresses]
    client, _ = make_client([envelope(rows)])

    assert len(Accounts(client).get_balance_addresses_multi(addresses)) == 20
