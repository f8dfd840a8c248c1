import asyncio
import sys
from argparse import ArgumentParser, Namespace

from core import Ready, ReceiptPipeline, show_state
from core.presenter import console
from export import ascii_summary
from utils import CONFIG, Logger
from utils.config import NETWORKS

log = Logger(__name__)


def parse_args(argv: list[str] | None = None) -> Namespace:
    parser = ArgumentParser(
        "Receipt Generator",
        description="Generate receipts for transactions on the Rootstock blockchain.",
    )
    parser.add_argument("tx_hash", metavar="HASH", help="transaction hash")
    parser.add_argument(
        "-n",
        metavar="NETWORK",
        help="blockchain network name",
        choices=NETWORKS,
        default="testnet",
        required=False,
        dest="network",
    )
    parser.add_argument(
        "--pdf",
        metavar="PATH",
        nargs="?",
        const=CONFIG["document"]["filename"],
        help="save PDF receipt",
    )
    parser.add_argument(
        "--qr",
        metavar="PATH",
        nargs="?",
        const=CONFIG["summary"]["filename"],
        help="save QR code image",
    )
    parser.add_argument(
        "--show-qr", action="store_true", help="print QR code to the terminal"
    )
    return parser.parse_args(argv)


async def main(args: Namespace) -> int:
    log.debug(f"Fetching receipt on [b]{CONFIG['blockchain']['name']}[/].")

    pipeline = ReceiptPipeline()
    with console.status("Fetching..."):
        state = await pipeline.fetch(args.tx_hash)

    show_state(state)
    if not isinstance(state, Ready):
        return 1

    if args.show_qr:
        console.print(ascii_summary(state.receipt), highlight=False)
    if args.pdf:
        console.print(f"PDF receipt saved to [b]{pipeline.generate_document(args.pdf)}[/]")
    if args.qr:
        console.print(f"QR code saved to [b]{pipeline.generate_summary(args.qr)}[/]")

    return 0


if __name__ == "__main__":
    args = parse_args()
    try:
        exit_code = asyncio.run(main(args))
    except KeyboardInterrupt:
        print()
        exit_code = 130
    except Exception as error:
        log.critical(error, exc_info=True)
        exit_code = 1
    sys.exit(exit_code)
