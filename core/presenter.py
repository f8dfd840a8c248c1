from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from export import present_fields
from utils import CONFIG, Receipt, str_num

from .pipeline import Failed, PipelineState, Ready

console = Console()


def receipt_table(receipt: Receipt) -> Table:
    """Build table with receipt fields, integers with thousands separators."""
    table = Table(
        title="Transaction Details",
        caption=f"Transaction verified on {CONFIG['blockchain']['name']}",
        show_header=False,
    )
    table.add_column(style="b blue", no_wrap=True)
    table.add_column(style="default", overflow="fold")

    for field in present_fields(receipt):
        value = field.value
        if isinstance(value, int):
            table.add_row(field.summary_label, str_num(value))
        elif field.key == "transaction_hash":
            url = CONFIG["blockchain"]["explorer"] + value
            table.add_row(field.summary_label, f"[link={url}]{value}[/]")
        else:
            table.add_row(field.summary_label, value)

    return table


def show_state(state: PipelineState) -> None:
    """Print ready receipt or error panel."""
    match state:
        case Ready(receipt=receipt):
            console.print(receipt_table(receipt))
        case Failed(message=message):
            console.print(Panel(Text(message), title="Error", border_style="red"))
        case _:
            console.print(f"[dim]{type(state).__name__}[/]")
