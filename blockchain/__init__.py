from .exceptions import EmptyInput, NotFound, NumericOverflow, ReceiptError, TransportError
from .receipt import fetch_receipt, normalize_receipt, to_safe_int, validate_identifier
from .ww3 import Web3, create_web3_instance
