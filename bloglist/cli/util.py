"""HTTP helpers shared by CLI commands."""

import os
import time
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def get_server_url() -> str:
    """Get server URL from environment."""
    return os.environ.get("BLOGLIST_SERVER", "http://localhost:8000")


def with_retry(
    fn: Callable[[], T],
    retries: int = 3,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> T:
    """Retry a function on transient errors with linear backoff.

    Args:
        fn: Zero-argument callable to retry.
        retries: Max retry attempts (total attempts = retries + 1).
        exceptions: Exception types to catch and retry on.

    Returns:
        Result of fn() on success.

    Raises:
        The last exception if all retries fail.
    """
    last_error: Exception | None = None
    for attempt in range(retries + 1):
        try:
            return fn()
        except exceptions as e:
            last_error = e
            if attempt < retries:
                time.sleep(0.2 * (attempt + 1))  # Backoff: 0.2, 0.4, 0.6s
    raise last_error  # type: ignore[misc]
