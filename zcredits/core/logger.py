import functools
import logging
import sys
import time
from typing import Awaitable, Callable, ParamSpec, TypeVar

from zcredits.config import settings

P = ParamSpec("P")
R = TypeVar("R")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(settings.APP_NAME)


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the application logger."""
    level = level or settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def log_async_execution_time(label: str):
    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            started = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.debug(f'{label} took {elapsed_ms:.2f} ms',
                             extra={'operation': label, 'elapsed_ms': round(elapsed_ms, 2)})
        return wrapper
    return decorator
