from dataclasses import dataclass
from datetime import date
from pathlib import Path

from PIL import Image

import export
from blockchain import (
    ReceiptError,
    Web3,
    fetch_receipt,
    normalize_receipt,
    validate_identifier,
)
from blockchain.receipt import ReceiptNode
from utils import CONFIG, Logger, Receipt

log = Logger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Loading:
    tx_hash: str | None = None


@dataclass(frozen=True, slots=True)
class Ready:
    receipt: Receipt


@dataclass(frozen=True, slots=True)
class Failed:
    message: str
    error: ReceiptError | None = None


PipelineState = Idle | Loading | Ready | Failed


class ReceiptPipeline:
    """Fetches a transaction receipt and exports the current result.

    Holds exactly one state. A new fetch replaces it with `Loading` right away;
    fetches are not cancelled, the one finishing last decides the final state.

    Args:
        node (ReceiptNode | None, optional): Node connection.
            Defaults to `blockchain.Web3` singleton.

    Attributes:
        node (ReceiptNode): Node connection.
        state (PipelineState): Current state.
    """

    __slots__ = "node", "state"

    def __init__(self, node: ReceiptNode | None = None) -> None:
        self.node = node if node is not None else Web3()
        self.state: PipelineState = Idle()

    async def fetch(self, identifier: str | None) -> PipelineState:
        """Validate, fetch and normalize receipt for ``identifier``.

        Args:
            identifier (str | None): Entered transaction hash.

        Returns:
            PipelineState: `Ready` or `Failed` state set by this fetch.
        """
        self._set(Loading())
        try:
            tx_hash = validate_identifier(identifier)
            self._set(Loading(tx_hash))
            raw = await fetch_receipt(self.node, tx_hash)
            state: PipelineState = Ready(normalize_receipt(raw))
        except ReceiptError as error:
            state = Failed(str(error), error)

        self._set(state)
        return state

    @property
    def receipt(self) -> Receipt | None:
        """Snapshot of the ready receipt, ``None`` in any other state."""
        state = self.state
        return state.receipt if isinstance(state, Ready) else None

    def field_value(self, key: str) -> str | None:
        """Get text of a receipt field for copying.

        Args:
            key (str): `FieldDirective.key`.

        Returns:
            str | None: Field text or ``None`` if there is no such value.
        """
        receipt = self.receipt
        if receipt is None:
            return None
        for field in export.present_fields(receipt):
            if field.key == key:
                return str(field.value)
        return None

    def payload(self) -> str | None:
        """QR code text of the ready receipt."""
        receipt = self.receipt
        return export.build_payload(receipt) if receipt else None

    def generate_document(
        self, path: str | Path | None = None, generated_on: date | None = None
    ) -> Path | None:
        """Write PDF of the ready receipt.

        Returns:
            Path | None: Written file or ``None`` if nothing was written.
        """
        receipt = self.receipt
        if receipt is None:
            return None
        path = Path(path or CONFIG["document"]["filename"])
        export.generate_document(receipt, path, generated_on)
        return path

    def generate_summary(self, path: str | Path | None = None) -> Path | None:
        """Write QR code PNG of the ready receipt.

        Returns:
            Path | None: Written file or ``None`` if nothing was written.
        """
        receipt = self.receipt
        if receipt is None:
            return None
        path = Path(path or CONFIG["summary"]["filename"])
        export.save_summary(receipt, path)
        return path

    def summary_image(self) -> Image.Image | None:
        receipt = self.receipt
        return export.encode_summary(receipt) if receipt else None

    def _set(self, state: PipelineState) -> None:
        log.debug(f"Pipeline state: {type(self.state).__name__} -> {state}")
        self.state = state
