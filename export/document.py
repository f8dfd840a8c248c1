from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from pathlib import Path

from fpdf import FPDF

from utils import CONFIG, Logger, Receipt, execution_time
from utils._types import DocumentConf

from .fields import FieldDirective, present_fields

log = Logger(__name__)

MARGIN = 15
VALUE_X = 55
BODY_TOP = 35
FOOTER_Y = 280

TITLE_SIZE = 16
SMALL_SIZE = 10
BODY_SIZE = 12

FONT = "Helvetica"
MONO_FONT = "Courier"

FIELD_ADVANCE = 10
LONG_VALUE_EXTRA = 15
NUMBER_ADVANCE = {"cumulative_gas_used": 7, "block_number": 15}

QR_NOTE = (
    "A QR code containing this transaction information is available",
    "in the online receipt generator.",
)


@dataclass(frozen=True, slots=True)
class TextOp:
    """Text placed with its baseline at ``y``.
    With ``align="C"`` the text is centred on ``x``.
    """

    x: float
    y: float
    text: str
    font: str = FONT
    size: int = BODY_SIZE
    align: str = "L"


@dataclass(frozen=True, slots=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 0.5


Op = TextOp | LineOp


def split_value(value: str, threshold: int | None = None) -> tuple[str, ...]:
    """Split long value into two lines.

    Args:
        value (str): Field value.
        threshold (int | None, optional): Maximum length of value placed inline.
            Defaults to `CONFIG["receipt"]["long_value_threshold"]`.

    Example::
        >>> [len(s) for s in split_value("0x" + "ab" * 32, 60)]
        [60, 6]
        >>> split_value("0x" + "11" * 20, 60)
        ('0x1111111111111111111111111111111111111111',)

    Returns:
        tuple[str, ...]: ``(value,)`` if it fits, else first ``threshold``
            characters and the rest.
    """
    if threshold is None:
        threshold = CONFIG["receipt"]["long_value_threshold"]
    if len(value) > threshold:
        return value[:threshold], value[threshold:]
    return (value,)


def place_field(
    field: FieldDirective, y: float, threshold: int | None = None
) -> tuple[list[Op], float]:
    """Place single field starting at ``y``.

    Args:
        field (FieldDirective): Present receipt field.
        y (float): Vertical position of the field.
        threshold (int | None, optional): Long value threshold. Defaults to None.

    Returns:
        tuple[list[Op], float]: Drawing operations and position of the next field.
    """
    if isinstance(field.value, int):
        text = f"{field.document_label}: {field.value}"
        return [TextOp(MARGIN, y, text)], y + NUMBER_ADVANCE.get(field.key, 7)

    ops: list[Op] = [TextOp(MARGIN, y, f"{field.document_label}:")]
    segments = split_value(field.value, threshold)

    if len(segments) == 1:
        ops.append(TextOp(VALUE_X, y, segments[0]))
        return ops, y + FIELD_ADVANCE

    # monospace lines under the label, font is reset by the next op
    for i, segment in enumerate(segments, start=1):
        ops.append(TextOp(MARGIN, y + 5 * i, segment, MONO_FONT))
    return ops, y + LONG_VALUE_EXTRA + FIELD_ADVANCE


def layout_document(
    receipt: Receipt,
    generated_on: date,
    page_width: float = 210,
    conf: DocumentConf | None = None,
) -> list[Op]:
    """Lay out receipt page.

    Fields are folded top to bottom, each present field moves the following
    ones down, absent fields take no space.

    Args:
        receipt (Receipt): Normalized receipt.
        generated_on (date): Date printed in the header.
        page_width (float, optional): Page width in mm. Defaults to 210 (A4).
        conf (DocumentConf | None, optional): Document configuration.
            Defaults to `CONFIG["document"]`.

    Returns:
        list[Op]: Drawing operations in drawing order.
    """
    conf = conf or CONFIG["document"]
    center = page_width / 2

    ops: list[Op] = [
        TextOp(center, 15, conf["title"], size=TITLE_SIZE, align="C"),
        TextOp(
            center,
            22,
            f"Generated on: {generated_on.isoformat()}",
            size=SMALL_SIZE,
            align="C",
        ),
        LineOp(MARGIN, 25, page_width - MARGIN, 25),
    ]

    y: float = BODY_TOP
    for field in present_fields(receipt):
        field_ops, y = place_field(field, y)
        ops.extend(field_ops)

    ops.append(TextOp(MARGIN, y, QR_NOTE[0]))
    ops.append(TextOp(MARGIN, y + 5, QR_NOTE[1]))

    ops.append(TextOp(center, FOOTER_Y, conf["footer"], size=SMALL_SIZE, align="C"))
    return ops


@execution_time
def render_document(receipt: Receipt, generated_on: date | None = None) -> bytes:
    """Render receipt as single page A4 PDF.

    Same receipt and date always give the same bytes.

    Args:
        receipt (Receipt): Normalized receipt.
        generated_on (date | None, optional): Generation date. Defaults to today.

    Returns:
        bytes: PDF document.
    """
    generated_on = generated_on or date.today()
    conf = CONFIG["document"]

    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(False)
    pdf.set_title(conf["title"])
    # fixed metadata date keeps output reproducible
    pdf.creation_date = datetime.combine(generated_on, time.min, tzinfo=timezone.utc)
    pdf.add_page()

    for op in layout_document(receipt, generated_on, pdf.w, conf):
        if isinstance(op, LineOp):
            pdf.set_line_width(op.width)
            pdf.line(op.x1, op.y1, op.x2, op.y2)
            continue

        pdf.set_font(op.font, size=op.size)
        x = op.x
        if op.align == "C":
            x -= pdf.get_string_width(op.text) / 2
        pdf.text(x, op.y, op.text)

    return bytes(pdf.output())


def generate_document(
    receipt: Receipt | None,
    path: str | Path | None = None,
    generated_on: date | None = None,
) -> None:
    """Write receipt PDF. Does nothing if there is no receipt.

    Args:
        receipt (Receipt | None): Normalized receipt.
        path (str | Path | None, optional): Output file.
            Defaults to `CONFIG["document"]["filename"]`.
        generated_on (date | None, optional): Generation date. Defaults to today.
    """
    if receipt is None:
        return

    path = Path(path or CONFIG["document"]["filename"])
    data = render_document(receipt, generated_on)
    path.write_bytes(data)
    log.info(f"Saved receipt for {receipt.transaction_hash} to [b]{path}[/].")
