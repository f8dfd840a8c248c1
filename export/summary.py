from io import StringIO
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M

from utils import CONFIG, Logger, Receipt

from .fields import present_fields

log = Logger(__name__)

SEPARATOR = ", "


def build_payload(receipt: Receipt) -> str:
    """Join present receipt fields into QR code text.

    Example::
        >>> build_payload(receipt)
        'Transaction Hash: 0xabc..., From: 0x111..., To: 0x222...,
        Cumulative Gas Used: 21000, Block Number: 555'

    Args:
        receipt (Receipt): Normalized receipt.

    Returns:
        str: Payload, never truncated.
    """
    return SEPARATOR.join(
        f"{field.summary_label}: {field.value}" for field in present_fields(receipt)
    )


def make_qr(payload: str) -> qrcode.QRCode:
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=4)
    qr.add_data(payload)
    qr.make(fit=True)
    return qr


def encode_summary(receipt: Receipt, size: int | None = None) -> Image.Image:
    """Encode receipt as QR code image.

    Args:
        receipt (Receipt): Normalized receipt.
        size (int | None, optional): Image width and height in pixels.
            Defaults to `CONFIG["summary"]["size"]`.

    Returns:
        Image.Image: Black on white QR code.
    """
    size = size or CONFIG["summary"]["size"]
    qr = make_qr(build_payload(receipt))
    qr_img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    return qr_img.resize((size, size), Image.Resampling.NEAREST)


def save_summary(receipt: Receipt | None, path: str | Path | None = None) -> None:
    """Write QR code PNG. Does nothing if there is no receipt.

    Args:
        receipt (Receipt | None): Normalized receipt.
        path (str | Path | None, optional): Output file.
            Defaults to `CONFIG["summary"]["filename"]`.
    """
    if receipt is None:
        return

    path = Path(path or CONFIG["summary"]["filename"])
    encode_summary(receipt).save(path, format="PNG")
    log.info(f"Saved QR code for {receipt.transaction_hash} to [b]{path}[/].")


def ascii_summary(receipt: Receipt) -> str:
    """Render receipt QR code with text characters for terminal output."""
    out = StringIO()
    make_qr(build_payload(receipt)).print_ascii(out=out)
    return out.getvalue()
