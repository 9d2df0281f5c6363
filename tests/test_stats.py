import pytest

from conftest import envelope
from evmscan.config import Context
from evmscan.errors import JsonParsingError
from evmscan.stats import Stats


def test_polygon_price_fields_are_remapped(make_client):
    ctx = Context.create("polygon", "poly-key")
    payload = {
        "maticbtc": "0.00002514",
        "maticbtc_timestamp": "1650000000",
        "maticusd": "1.02",
        "maticusd_timestamp": "1650000001",
    }
    client, session = make_client([envelope(payload)], ctx)

    price = Stats(client).get_native_token_last_price()

    assert session.calls[0]["url"] == "https://api.polygonscan.com/api"
    assert session.calls[0]["params"]["action"] == "maticprice"
    assert price.btc == pytest.approx(0.00002514)
    assert price.btc_timestamp == 1650000000
    assert price.usd == pytest.approx(1.02)
    assert price.usd_timestamp == 1650000001


def test_bsc_price_uses_eth_field_names(make_client):
    ctx = Context.create("bsc", "bsc-key")
    payload = {
        "ethbtc": "0.0071",
        "ethbtc_timestamp": "1650000000",
        "ethusd": "412.5",
        "ethusd_timestamp": "1650000002",
    }
    client, session = make_client([envelope(payload)], ctx)

    price = Stats(client).get_native_token_last_price()

    assert session.calls[0]["params"] == {"module": "stats", "action": "bnbprice", "apikey": "bsc-key"}
    assert price.usd == pytest.approx(412.5)


def test_price_with_wrong_field_names(make_client):
    ctx = Context.create("polygon", "poly-key")
    payload = {"ethbtc": "1", "ethbtc_timestamp": "1", "ethusd": "1", "ethusd_timestamp": "1"}
    client, _ = make_client([envelope(payload)], ctx)

    with pytest.raises(JsonParsingError):
        Stats(client).get_native_token_last_price()
