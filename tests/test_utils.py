import asyncio
from decimal import Decimal

from blockchain import Web3
from utils import CONFIG, SecretStr, str_num
from conftest import TX_HASH, make_web3_receipt


def test_test_config_loaded():
    assert CONFIG["blockchain"]["chain_id"] == 31
    assert CONFIG["document"]["filename"] == "Rootstock_Transaction_Receipt.pdf"
    assert CONFIG["summary"]["size"] == 200


def test_endpoint_hidden():
    endpoint = CONFIG["blockchain"]["endpoint"]

    assert isinstance(endpoint, SecretStr)
    assert str(endpoint) == repr(endpoint) == "<SecretStr>"
    assert endpoint.str() == "http://127.0.0.1:4444"


def test_str_num():
    assert str_num(21000) == "21,000"
    assert str_num(2**53 - 1) == "9,007,199,254,740,991"
    assert str_num(Decimal("12345.6789000000")) == "12,345.6789"


def test_web3_singleton():
    first = Web3(new_singleton=True)

    assert Web3() is first
    assert Web3(no_singleton=True) is not first
    assert first.chain_id == 31


def test_web3_get_transaction_receipt():
    class Eth:
        async def get_transaction_receipt(self, tx_hash):
            return make_web3_receipt(tx_hash)

    w3 = Web3(no_singleton=True)
    w3.eth = Eth()

    receipt = asyncio.run(w3.get_transaction_receipt(TX_HASH))
    assert receipt["blockNumber"] == 555
