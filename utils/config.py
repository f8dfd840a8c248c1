import os
import sys
from argparse import ArgumentParser
from pathlib import Path

from pyaml_env import parse_config

from ._types import ConfigDict
from .datastructures import SecretStr

CONFIG: ConfigDict = {}  # type: ignore

ROOT = Path(__file__).resolve().parent.parent
"""Project root holding `config_[network].yaml` files."""

NETWORKS = ["testnet", "mainnet"]


def load_config(network: str | None = None) -> None:
    """Load `config_[network].yaml` and do conversion and safety checks.

    Args:
        network (str | None, optional): Network name. If not provided, it is
            taken from the command line. Defaults to None.
    """
    network = network or get_network()

    conf = parse_config(str(ROOT / f"config_{network}.yaml"), default_sep="|")

    # Hiding sensitive info
    hide_sensitive_info(conf)

    # updating in place so modules holding a reference see the new values
    CONFIG.clear()
    CONFIG.update(conf)


def get_network() -> str:
    """Get network name.

    Returns:
        str: Network name.
    """
    program = os.path.basename(sys.argv[0])
    if program == "pytest" or "pytest" in sys.modules:
        return "test"

    parser = ArgumentParser(add_help=False)
    parser.add_argument(
        "-n",
        metavar="NETWORK",
        choices=NETWORKS,
        default="testnet",
        required=False,
        dest="network",
    )
    # the rest of the arguments belong to the CLI
    return parser.parse_known_args()[0].network


def hide_sensitive_info(config: dict) -> None:
    config["blockchain"]["endpoint"] = SecretStr(config["blockchain"]["endpoint"])


load_config()
