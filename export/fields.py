from dataclasses import dataclass

from utils import Receipt


@dataclass(frozen=True, slots=True)
class FieldDirective:
    """Receipt field in export order.

    ``value`` is ``None`` for an absent optional field, exporters skip it.
    """

    key: str
    document_label: str
    summary_label: str
    value: str | int | None

    @property
    def present(self) -> bool:
        return self.value is not None and self.value != ""


def receipt_fields(receipt: Receipt) -> list[FieldDirective]:
    """Get receipt fields in the order shared by the document and the QR code.

    Args:
        receipt (Receipt): Normalized receipt.

    Returns:
        list[FieldDirective]: Hash, sender, recipient, contract address,
            gas used and block number.
    """
    return [
        FieldDirective(
            "transaction_hash",
            "Transaction Hash",
            "Transaction Hash",
            receipt.transaction_hash,
        ),
        FieldDirective("sender", "From Address", "From", receipt.sender),
        FieldDirective("recipient", "To Address", "To", receipt.recipient),
        FieldDirective(
            "contract_address",
            "Contract Address",
            "Contract Address",
            receipt.contract_address,
        ),
        FieldDirective(
            "cumulative_gas_used",
            "Gas Used",
            "Cumulative Gas Used",
            receipt.cumulative_gas_used,
        ),
        FieldDirective(
            "block_number", "Block Number", "Block Number", receipt.block_number
        ),
    ]


def present_fields(receipt: Receipt) -> list[FieldDirective]:
    """Get only the fields that are present on ``receipt``."""
    return [field for field in receipt_fields(receipt) if field.present]
