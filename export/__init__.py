from .document import (
    LineOp,
    TextOp,
    generate_document,
    layout_document,
    render_document,
    split_value,
)
from .fields import FieldDirective, present_fields, receipt_fields
from .summary import SEPARATOR, ascii_summary, build_payload, encode_summary, save_summary
