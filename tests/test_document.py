from datetime import date

from export import LineOp, TextOp, generate_document, layout_document, render_document
from export.document import MONO_FONT, split_value
from conftest import CONTRACT, RECIPIENT, SENDER, TX_HASH

GENERATED_ON = date(2026, 10, 19)


def labels(ops):
    return [op.text[:-1] for op in ops if isinstance(op, TextOp) and op.text.endswith(":")]


def find(ops, text):
    return next(op for op in ops if isinstance(op, TextOp) and op.text.startswith(text))


def test_split_value_threshold():
    assert split_value("x" * 60, 60) == ("x" * 60,)
    assert split_value("x" * 61, 60) == ("x" * 60, "x")


def test_layout_field_order_without_optional_fields(bare_receipt):
    ops = layout_document(bare_receipt, GENERATED_ON)
    texts = [op.text for op in ops if isinstance(op, TextOp)]

    assert labels(ops) == ["Transaction Hash", "From Address"]
    order = [
        texts.index("Transaction Hash:"),
        texts.index("From Address:"),
        texts.index("Gas Used: 21000"),
        texts.index("Block Number: 555"),
    ]
    assert order == sorted(order)


def test_layout_splits_long_hash_into_two_mono_lines(receipt):
    ops = layout_document(receipt, GENERATED_ON)
    label = find(ops, "Transaction Hash:")
    segments = [op for op in ops if isinstance(op, TextOp) and op.font == MONO_FONT]

    assert len(segments) == 2
    assert "".join(op.text for op in segments) == TX_HASH
    assert len(segments[0].text) == 60
    assert [op.y for op in segments] == [label.y + 5, label.y + 10]
    assert all(op.x == label.x for op in segments)


def test_layout_short_values_inline(receipt):
    ops = layout_document(receipt, GENERATED_ON)
    label = find(ops, "From Address:")
    value = find(ops, SENDER)

    assert value.y == label.y
    assert value.x > label.x
    assert value.font != MONO_FONT


def test_layout_full_scenario(receipt):
    ops = layout_document(receipt, GENERATED_ON)

    assert labels(ops) == ["Transaction Hash", "From Address", "To Address"]
    assert find(ops, "To Address:").y == 70
    assert find(ops, RECIPIENT).y == 70
    assert find(ops, "Gas Used:").y == 80
    assert find(ops, "Block Number:").y == 87


def test_layout_contract_without_recipient_leaves_no_gap(deploy_receipt):
    ops = layout_document(deploy_receipt, GENERATED_ON)

    assert labels(ops) == ["Transaction Hash", "From Address", "Contract Address"]
    # takes the place the recipient would have had
    assert find(ops, "Contract Address:").y == 70
    assert find(ops, CONTRACT).y == 70
    assert find(ops, "Gas Used: 1250000").y == 80
    assert find(ops, "Block Number: 4812004").y == 87


def test_layout_every_optional_field_adds_fixed_offset(bare_receipt, deploy_receipt):
    bare = find(layout_document(bare_receipt, GENERATED_ON), "Gas Used:").y
    deploy = find(layout_document(deploy_receipt, GENERATED_ON), "Gas Used:").y

    assert deploy - bare == 10


def test_layout_header_and_footer_always_present(bare_receipt):
    ops = layout_document(bare_receipt, GENERATED_ON)
    header = ops[:3]
    footer = ops[-1]

    assert header[0].text == "Rootstock Transaction Receipt"
    assert header[0].align == "C"
    assert header[1].text == "Generated on: 2026-10-19"
    assert isinstance(header[2], LineOp)
    assert footer.y == 280
    assert "Rootstock Blockchain Receipt Generator" in footer.text


def test_layout_body_lines_do_not_overlap(receipt, deploy_receipt):
    for r in (receipt, deploy_receipt):
        ys = [
            op.y
            for op in layout_document(r, GENERATED_ON)[3:-1]
            if op.x == 15  # label column
        ]
        assert ys == sorted(ys)
        assert len(ys) == len(set(ys))


def test_render_document_is_reproducible(receipt):
    first = render_document(receipt, GENERATED_ON)
    second = render_document(receipt, GENERATED_ON)

    assert first.startswith(b"%PDF")
    assert first == second


def test_generate_document_writes_file(receipt, tmp_path):
    path = tmp_path / "receipt.pdf"
    generate_document(receipt, path, GENERATED_ON)

    assert path.read_bytes() == render_document(receipt, GENERATED_ON)


def test_generate_document_without_receipt_is_noop(tmp_path):
    path = tmp_path / "receipt.pdf"

    assert generate_document(None, path) is None
    assert not path.exists()
