"""Retry decorator with exponential backoff for job-store fetches."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

from jobfeed.log import get_logger

log = get_logger(__name__)


def backoff_delay(attempt: int, base_delay: float, factor: float, max_delay: float) -> float:
    """Delay before retry number *attempt* (1-based), without jitter."""
    return min(base_delay * (factor ** (attempt - 1)), max_delay)


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
) -> Callable:
    """Retry the wrapped call on *retryable* errors; re-raise after the last attempt."""

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if attempt == max_attempts:
                        log.error("%s gave up after %d attempts: %s", fn.__qualname__, attempt, exc)
                        raise
                    delay = backoff_delay(attempt, base_delay, backoff_factor, max_delay)
                    if jitter:
                        delay *= 0.5 + random.random()
                    log.warning(
                        "%s attempt %d/%d failed (%s), retrying in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    sleep(delay)
            raise RuntimeError("max_attempts must be at least 1")

        return wrapper

    return decorator
