"""Pytest fixtures for receipt generator tests. Node access is replaced by `FakeNode`."""

import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hexbytes import HexBytes  # noqa: E402
from web3.datastructures import AttributeDict  # noqa: E402
from web3.exceptions import TransactionNotFound  # noqa: E402

from utils import Receipt  # noqa: E402

TX_HASH = "0xabc4567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
OTHER_HASH = "0xdef4567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
SENDER = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x2222222222222222222222222222222222222222"
CONTRACT = "0x3333333333333333333333333333333333333333"


class FakeNode:
    """In memory node answering `get_transaction_receipt`.

    Args:
        receipts (dict): Transaction hash to receipt mapping.
        error (BaseException | None): Error raised on every request.
        delays (dict | None): Transaction hash to response delay in seconds.
    """

    def __init__(self, receipts=None, error=None, delays=None):
        self.receipts = receipts or {}
        self.error = error
        self.delays = delays or {}
        self.calls = []

    async def get_transaction_receipt(self, tx_hash):
        self.calls.append(tx_hash)
        await asyncio.sleep(self.delays.get(tx_hash, 0))
        if self.error is not None:
            raise self.error
        if tx_hash not in self.receipts:
            raise TransactionNotFound(f"Transaction with hash: '{tx_hash}' not found.")
        return self.receipts[tx_hash]


def make_web3_receipt(tx_hash=TX_HASH, **fields):
    receipt = {
        "transactionHash": HexBytes(tx_hash),
        "from": SENDER,
        "to": RECIPIENT,
        "contractAddress": None,
        "cumulativeGasUsed": 21000,
        "blockNumber": 555,
        "status": 1,
    }
    receipt.update(fields)
    return AttributeDict(receipt)


@pytest.fixture
def web3_receipt():
    return make_web3_receipt()


@pytest.fixture
def node(web3_receipt):
    return FakeNode({TX_HASH: web3_receipt})


@pytest.fixture
def receipt():
    return Receipt(
        transaction_hash=TX_HASH,
        sender=SENDER,
        recipient=RECIPIENT,
        contract_address=None,
        cumulative_gas_used=21000,
        block_number=555,
    )


@pytest.fixture
def bare_receipt(receipt):
    return Receipt(
        transaction_hash=receipt.transaction_hash,
        sender=receipt.sender,
        recipient=None,
        contract_address=None,
        cumulative_gas_used=receipt.cumulative_gas_used,
        block_number=receipt.block_number,
    )


@pytest.fixture
def deploy_receipt(receipt):
    return Receipt(
        transaction_hash=receipt.transaction_hash,
        sender=receipt.sender,
        recipient=None,
        contract_address=CONTRACT,
        cumulative_gas_used=1_250_000,
        block_number=4_812_004,
    )
