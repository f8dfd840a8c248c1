from typing import TypedDict

from .datastructures import SecretStr


class BlockchainConf(TypedDict):
    name: str
    chain_id: int
    explorer: str
    endpoint: SecretStr


class ReceiptConf(TypedDict):
    max_safe_integer: int
    long_value_threshold: int


class DocumentConf(TypedDict):
    filename: str
    title: str
    footer: str


class SummaryConf(TypedDict):
    filename: str
    size: int


class LoggingStream(TypedDict):
    level: str
    format: str
    date_format: str


class LoggingRotation(TypedDict):
    when: str
    interval: int
    backup_count: int


class LoggingFile(LoggingStream):
    path: str
    rotation: LoggingRotation


class Logging(TypedDict):
    stream: LoggingStream
    file: LoggingFile
    traceback_width: int
    show_locals: bool


class ConfigDict(TypedDict):
    r"""Dictionary that contains configuration from `config_[network].yaml`.

    Also hides the node endpoint to prevent logging access credentials.

    To access hidden text use `.str()` method to convert to builtin ``str``::

        >>> CONFIG["blockchain"]["endpoint"]
        <SecretStr>
        >>> CONFIG["blockchain"]["endpoint"].str()
        'https://public-node.testnet.rsk.co'
    """

    blockchain: BlockchainConf
    receipt: ReceiptConf
    document: DocumentConf
    summary: SummaryConf
    logging: Logging


WideInt = int | str | bytes
"""Integer as returned by a node: ``int``, hex text (`0x5208`), decimal text
or big-endian bytes."""
