import re
from copy import copy
from decimal import Decimal
from logging import Formatter
from logging import Logger as BaseLogger
from logging import LogRecord, StreamHandler
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from rich.console import Console

import web3

from .config import CONFIG

LEVELNAME_TO_NUMBER = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

console = Console(stderr=True)


def add_level_color(level: int) -> str:
    """Add color to level name.

    Args:
        level (int): Level number.

    Returns:
        str: Level name with color.

    Raises:
        TypeError: if provided level does not match builtin levels.
    """
    match level:
        case 10:
            color = "blue"
            name = "DEBUG"
        case 20:
            color = "green"
            name = "INFO"
        case 30:
            color = "yellow"
            name = "WARNING"
        case 40:
            color = "red"
            name = "ERROR"
        case 50:
            color = "red r"
            name = "CRITICAL"
        case _:
            raise TypeError(f"Provided level number:{level} did not match any level.")

    with console.capture() as capture:
        console.print(name, end="", style=color)
    return capture.get()


LEVELNUMBER_TO_COLORED_NAME = {
    10: add_level_color(10),
    20: add_level_color(20),
    30: add_level_color(30),
    40: add_level_color(40),
    50: add_level_color(50),
}


class StreamFormatter(Formatter):
    traceback_width = CONFIG["logging"]["traceback_width"]
    show_locals = CONFIG["logging"]["show_locals"]
    pretty = True

    def formatException(self, ei) -> str:
        """Format exception using rich exception format."""
        with console.capture() as capture:
            console.print_exception(
                show_locals=self.show_locals,
                width=self.traceback_width,
                suppress=[web3],
            )
        return capture.get()

    def format(self, record: LogRecord) -> str:
        """Format ``record`` to String.

        Args:
            record (LogRecord): LogRecord to format.
        """
        # handlers share the record, styling a copy keeps the file output plain
        record = copy(record)
        record.name = f"{record.name}\x1b[2m:{record.lineno}\x1b[0m"
        record.levelname = LEVELNUMBER_TO_COLORED_NAME[record.levelno]

        if self.pretty:
            with console.capture() as capture:
                console.print(record.getMessage(), end="")
            record.msg = capture.get()
            record.args = None

        return super().format(record)

    def formatTime(self, record: LogRecord, datefmt: str | None = None) -> str:
        """Add dim style to time.

        Args:
            record (LogRecord): LogRecord.
            datefmt (str|None, optional): dateformat used by ``time.strftime()``.

        Returns:
            str: Formatted time.
        """
        formatted_time = super().formatTime(record, datefmt)
        return f"\x1b[2m{formatted_time}\x1b[0m"


class FileFormatter(Formatter):
    """Removes ansi escape sequences and `rich` markup."""

    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    markup = re.compile(r"\[/?[a-z ]*\]")

    def format(self, record: LogRecord) -> str:
        formatted = re.sub(self.ansi_escape, "", super().format(record))
        return re.sub(self.markup, "", formatted)


class Logger(BaseLogger):
    """Logs data to `stderr` and `log` file.

    Args:
        name (str): Name of the logger to use when logging.
        pretty (bool, optional): Render `rich` markup in messages. Defaults to True.
    """

    def __init__(self, name: str, pretty: bool = True) -> None:
        conf = CONFIG["logging"]
        stream_level = LEVELNAME_TO_NUMBER[conf["stream"]["level"]]
        file_level = LEVELNAME_TO_NUMBER[conf["file"]["level"]]

        self.pretty = pretty

        if name == "__main__":
            name = "main"

        super().__init__(name, min(stream_level, file_level))
        self.__set_stream_handler()
        self.__set_file_handler()

    def __set_file_handler(self):
        conf = CONFIG["logging"]["file"]
        path = Path(conf["path"])
        path.parent.mkdir(parents=True, exist_ok=True)

        formatter = FileFormatter(conf["format"], conf["date_format"], "{")
        handler = TimedRotatingFileHandler(
            path,
            conf["rotation"]["when"],
            conf["rotation"]["interval"],
            conf["rotation"]["backup_count"],
            delay=True,
        )
        handler.setFormatter(formatter)
        handler.setLevel(LEVELNAME_TO_NUMBER[conf["level"]])
        self.addHandler(handler)

    def __set_stream_handler(self):
        conf = CONFIG["logging"]["stream"]
        formatter = StreamFormatter(conf["format"], conf["date_format"], "{")
        formatter.pretty = self.pretty
        handler = StreamHandler()
        handler.setFormatter(formatter)
        handler.setLevel(LEVELNAME_TO_NUMBER[conf["level"]])
        self.addHandler(handler)


def str_num(num: int | float | Decimal) -> str:
    """Convert number to pretty string representation.

    Args:
        num (int | float | Decimal): Number.

    Example::
        >>> str_num(21000)
        '21,000'
        >>> str_num(Decimal('12345.6789000000'))
        '12,345.6789'

    Returns:
        str: Pretty number.
    """
    if isinstance(num, int):
        return f"{num:,}"

    s = f"{num:,.18f}"

    while s.endswith("0"):
        s = s[:-1]

    if s.endswith("."):
        s = s[:-1]

    return s
