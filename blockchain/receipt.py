import asyncio
from typing import Any, Protocol

from aiohttp import ClientError
from eth_utils import conversions
from web3.exceptions import TransactionNotFound, Web3Exception

from utils import CONFIG, Logger, RawReceipt, Receipt, measure_time
from utils._types import WideInt

from .exceptions import EmptyInput, NotFound, NumericOverflow, TransportError

log = Logger(__name__)

TRANSPORT_ERRORS = (
    Web3Exception,
    ValueError,
    OSError,
    ClientError,
    asyncio.TimeoutError,
)
"""Errors raised by web3 and its HTTP transport for a failed request."""


class ReceiptNode(Protocol):
    async def get_transaction_receipt(self, tx_hash: str) -> Any:
        ...


def validate_identifier(identifier: str | None) -> str:
    """Trim whitespace from entered transaction hash.

    Malformed hashes are left to the node to reject.

    Args:
        identifier (str | None): Entered transaction hash.

    Returns:
        str: Trimmed transaction hash.

    Raises:
        EmptyInput: If nothing but whitespace was entered.
    """
    tx_hash = (identifier or "").strip()
    if not tx_hash:
        raise EmptyInput
    return tx_hash


async def fetch_receipt(node: ReceiptNode, tx_hash: str) -> RawReceipt:
    """Request transaction receipt from the node. Only one attempt is made.

    Args:
        node (ReceiptNode): Node connection, usually `blockchain.Web3`.
        tx_hash (str): Validated transaction hash.

    Returns:
        RawReceipt: Receipt with integers as delivered by the node.

    Raises:
        NotFound: If node reports there is no such transaction.
        TransportError: If request or response handling failed.
    """
    log_str = measure_time("Fetched receipt {} in {}.")
    try:
        receipt = await node.get_transaction_receipt(tx_hash)
    except TransactionNotFound:
        raise NotFound(tx_hash) from None
    except TRANSPORT_ERRORS as error:
        raise TransportError(str(error) or type(error).__name__) from error

    if not receipt:
        raise NotFound(tx_hash)

    try:
        raw = RawReceipt.from_web3(receipt)
    except KeyError as error:
        raise TransportError(f"Malformed receipt, missing {error}.") from error

    log.debug(log_str(tx_hash))
    return raw


def to_safe_int(field: str, value: WideInt, limit: int | None = None) -> int:
    """Convert node integer to ``int`` without losing precision.

    Args:
        field (str): Receipt field name, used in error message.
        value (WideInt): ``int``, hex text, decimal text or big-endian bytes.
        limit (int | None, optional): Largest safe integer.
            Defaults to `CONFIG["receipt"]["max_safe_integer"]`.

    Example::
        >>> to_safe_int("blockNumber", "0x22b")
        555
        >>> to_safe_int("cumulativeGasUsed", 2**53)
        Traceback (most recent call last):
        ...
        NumericOverflow: cumulativeGasUsed value 9007199254740992 is outside ...

    Returns:
        int: Converted integer.

    Raises:
        NumericOverflow: If value is outside of ``0`` to ``limit``.
        TransportError: If value is not an integer representation.
    """
    if limit is None:
        limit = CONFIG["receipt"]["max_safe_integer"]

    try:
        number = _to_int(value)
    except (TypeError, ValueError) as error:
        raise TransportError(f"Malformed {field} value {value!r}.") from error

    if not 0 <= number <= limit:
        raise NumericOverflow(field, number, limit)
    return number


def normalize_receipt(raw: RawReceipt, limit: int | None = None) -> Receipt:
    """Convert receipt integers to ``int``. Text fields are passed unchanged.

    Args:
        raw (RawReceipt): Receipt from the node.
        limit (int | None, optional): Largest safe integer. Defaults to None.

    Returns:
        Receipt: Normalized receipt.

    Raises:
        NumericOverflow: If gas used or block number can not be represented.
    """
    return Receipt(
        transaction_hash=raw.transaction_hash,
        sender=raw.sender,
        recipient=raw.recipient,
        contract_address=raw.contract_address,
        cumulative_gas_used=to_safe_int(
            "cumulativeGasUsed", raw.cumulative_gas_used, limit
        ),
        block_number=to_safe_int("blockNumber", raw.block_number, limit),
    )


def _to_int(value: WideInt) -> int:
    if isinstance(value, bool):
        raise TypeError("bool is not a receipt integer")
    if isinstance(value, int):
        return value
    if isinstance(value, bytes):
        return conversions.to_int(primitive=value)
    if isinstance(value, str):
        text = value.strip()
        if text[:2].lower() == "0x":
            return conversions.to_int(hexstr=text)
        return conversions.to_int(text=text)
    raise TypeError(f"{type(value).__name__} is not a receipt integer")
