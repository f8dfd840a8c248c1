class ReceiptError(Exception):
    """Raised when a transaction receipt could not be produced.

    ``str(error)`` is the message shown to the user.
    """

    pass


class EmptyInput(ReceiptError):
    """Raised when no transaction hash was entered."""

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or ("Please enter a transaction hash",)))


class NotFound(ReceiptError):
    """Raised when the node has no receipt for the transaction hash.

    Args:
        tx_hash (str): Requested transaction hash.

    Attributes:
        tx_hash (str): Requested transaction hash.
    """

    def __init__(self, tx_hash: str, *args: object) -> None:
        self.tx_hash = tx_hash
        super().__init__(
            *(args or ("Transaction not found! Please check the hash and try again.",))
        )


class TransportError(ReceiptError):
    """Raised when request to the node failed.
    Message is the one of the underlying error, available as ``__cause__``.
    """

    pass


class NumericOverflow(ReceiptError):
    """Raised when receipt integer can not be represented exactly.

    Args:
        field (str): Receipt field name.
        value (int): Value received from the node.
        limit (int): Largest safe integer.

    Attributes:
        field (str): Receipt field name.
        value (int): Value received from the node.
        limit (int): Largest safe integer.
    """

    def __init__(self, field: str, value: int, limit: int, *args: object) -> None:
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(*args)

    def __str__(self) -> str:
        return (
            f"{self.field} value {self.value} is outside "
            f"of the safe integer range (0 to {self.limit})."
        )
