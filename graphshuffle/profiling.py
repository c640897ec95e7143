"""Timing decorator for the public transforms."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar, cast

from .config import settings

F = TypeVar("F", bound=Callable[..., Any])

PERF_LOGGER = f"{settings.LOG_NAMESPACE}.perf"


def timeit(name: str | None = None, level: int = logging.INFO) -> Callable[[F], F]:
    """Log the wall time of every call to ``graphshuffle.perf``.

    The log record is written even when the wrapped call raises.
    """
    def deco(fn: F) -> F:
        label = name or fn.__qualname__
        logger = logging.getLogger(PERF_LOGGER)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(level):
                return fn(*args, **kwargs)
            t0 = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                dt = (time.perf_counter() - t0) * 1000.0
                logger.log(level, "%s: %.1f ms", label, dt)

        return cast(F, wrapper)

    return deco
