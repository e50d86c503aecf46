import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def log_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Log any exception raised by the decorated callable, then re-raise it.

    The log line names the function, the exception type and its message so a
    failed Storefront call can be traced without a full traceback.

    Usage::

        @log_errors
        def execute(self, query: str, variables: dict | None = None) -> dict: ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.error(f"[{func.__qualname__}] {type(exc).__name__}: {exc}")
            raise

    return wrapper


def log_duration(func: Callable[P, R]) -> Callable[P, R]:
    """Log the wall-clock time of every call at debug level, failed or not."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(f"[{func.__qualname__}] took {elapsed_ms:.1f} ms")

    return wrapper
