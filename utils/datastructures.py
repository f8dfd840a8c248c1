from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from eth_utils import conversions



class SecretStr:
    """Hide sensitive information when logging.

    Args:
        text (str): Text to hide.
    """

    __slots__ = ("__text",)

    def __init__(self, text: str) -> None:
        self.__text = text

    def __str__(self) -> Literal["<SecretStr>"]:
        return "<SecretStr>"

    def __repr__(self) -> Literal["<SecretStr>"]:
        return "<SecretStr>"

    def str(self) -> str:
        """Convert ``SecretString`` to builtin ``str``."""
        return self.__text


@dataclass(frozen=True, slots=True)
class RawReceipt:
    """Transaction receipt as returned by the node.

    Gas and block number are kept in the form the node delivered them.
    """

    transaction_hash: str
    sender: str
    recipient: str | None
    contract_address: str | None
    cumulative_gas_used: int | str | bytes
    block_number: int | str | bytes

    @classmethod
    def from_web3(cls, receipt: Mapping) -> "RawReceipt":
        """Create receipt from `eth_getTransactionReceipt` result.

        Args:
            receipt (Mapping): `TxReceipt` or plain JSON-RPC dictionary.

        Returns:
            RawReceipt: Raw receipt.
        """
        return cls(
            transaction_hash=_text(receipt["transactionHash"]),
            sender=_text(receipt["from"]),
            recipient=_text(receipt.get("to")),
            contract_address=_text(receipt.get("contractAddress")),
            cumulative_gas_used=receipt["cumulativeGasUsed"],
            block_number=receipt["blockNumber"],
        )


@dataclass(frozen=True, slots=True)
class Receipt:
    """Normalized transaction receipt used for display and export."""

    transaction_hash: str
    sender: str
    recipient: str | None
    contract_address: str | None
    cumulative_gas_used: int
    block_number: int


def _text(value: str | bytes | None) -> str | None:
    # `HexBytes.hex()` prefix differs between versions
    if isinstance(value, bytes):
        return conversions.to_hex(value)
    return value
