from datetime import date

from PIL import Image

from export import (
    SEPARATOR,
    TextOp,
    ascii_summary,
    build_payload,
    encode_summary,
    layout_document,
    receipt_fields,
    save_summary,
)
from conftest import CONTRACT, RECIPIENT, SENDER, TX_HASH


def test_build_payload_scenario(receipt):
    assert build_payload(receipt) == SEPARATOR.join(
        [
            f"Transaction Hash: {TX_HASH}",
            f"From: {SENDER}",
            f"To: {RECIPIENT}",
            "Cumulative Gas Used: 21000",
            "Block Number: 555",
        ]
    )


def test_build_payload_skips_absent_fields(deploy_receipt):
    payload = build_payload(deploy_receipt)

    assert "To:" not in payload
    assert f"Contract Address: {CONTRACT}" in payload
    assert payload.endswith("Cumulative Gas Used: 1250000, Block Number: 4812004")


def test_payload_and_document_share_field_order(bare_receipt, deploy_receipt, receipt):
    for r in (bare_receipt, deploy_receipt, receipt):
        fields = [f for f in receipt_fields(r) if f.present]
        payload_labels = [item.split(": ")[0] for item in build_payload(r).split(SEPARATOR)]
        ops = [op for op in layout_document(r, date(2026, 10, 19)) if isinstance(op, TextOp)]
        document_ys = [
            next(op.y for op in ops if op.text.startswith(f.document_label + ":"))
            for f in fields
        ]

        assert payload_labels == [f.summary_label for f in fields]
        assert document_ys == sorted(set(document_ys))


def test_bare_payload_order(bare_receipt):
    items = build_payload(bare_receipt).split(SEPARATOR)

    assert [item.split(": ")[1] for item in items] == [TX_HASH, SENDER, "21000", "555"]


def test_encode_summary_fixed_size(receipt):
    image = encode_summary(receipt)

    assert image.size == (200, 200)
    assert image.mode == "RGB"
    assert encode_summary(receipt, size=96).size == (96, 96)


def test_save_summary(receipt, tmp_path):
    path = tmp_path / "qr.png"
    save_summary(receipt, path)

    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (200, 200)


def test_save_summary_without_receipt_is_noop(tmp_path):
    path = tmp_path / "qr.png"
    save_summary(None, path)

    assert not path.exists()


def test_ascii_summary(receipt):
    text = ascii_summary(receipt)

    assert len(text.splitlines()) > 20
