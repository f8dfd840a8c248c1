from datetime import timedelta
from functools import wraps
from time import perf_counter
from typing import Any, Callable, ParamSpec, Protocol, TypeVar

from .logger import Logger

log = Logger(__name__)

T = TypeVar("T")
P = ParamSpec("P")


def execution_time(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator to measure execution time of a function.

    Args:
        func (Callable[P, T]): Function.

    Returns:
        Callable[P, T]: Wrapped function.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start = perf_counter()
        result = func(*args, **kwargs)
        elpassed = perf_counter() - start

        log.debug(
            f"[magenta b]{func.__name__}[/] execution time: {timedelta(seconds=elpassed)}"
        )

        return result

    return wrapper


class MeasureTime(Protocol):
    def __call__(self, *args: Any, **kwargs: Any) -> str:
        """Get formatted string with measured time.

        Args:
            args (Any): Will be formatted in previously provided string.
            kwargs (Any): Will be formatted in previously provided string.

        Returns:
            str: Formatted string.
        """
        ...


def measure_time(log_str: str) -> MeasureTime:
    """Meassure time until returned function is called and format provided log_str.
    Last field will be measured time if args are used.
    If keyword fields are used `t` represents measured time.

    Args:
        log_str (str): String to format.

    Examples::

        >>> format_log = measure_time("Fetched receipt {} in {}.")
        >>> receipt = await fetch_receipt(node, tx_hash)
        >>> format_log(tx_hash)
        Fetched receipt 0x7b1b...fb8b in 0:00:00.413020.

        >>> format_log = measure_time("Rendered {size:,} bytes in {t}.")
        >>> data = render_document(receipt)
        >>> format_log(size=len(data))
        Rendered 1,783 bytes in 0:00:00.004420.

    Returns:
        MeasureTime: Function to be called to format log.
    """
    start = perf_counter()

    def finish(*args: Any, **kwargs: Any) -> str:
        if kwargs:
            return log_str.format(**kwargs, t=timedelta(seconds=perf_counter() - start))
        return log_str.format(*args, timedelta(seconds=perf_counter() - start))

    return finish
