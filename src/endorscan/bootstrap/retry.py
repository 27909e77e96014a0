"""Bounded retries with exponential backoff for network stages."""

from __future__ import annotations

import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from endorscan.bootstrap.errors import DownloadError, MetadataFetchError
from endorscan.core.logging import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")

# Only transport failures are worth another attempt
TRANSIENT_ERRORS: Tuple[Type[Exception], ...] = (MetadataFetchError, DownloadError)


def call_with_retries(
    func: Callable[[], T],
    attempts: int = 1,
    initial_delay: float = 1.0,
    max_delay: float = 30.0,
    retry_on: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """Call ``func`` up to ``attempts`` times.

    Args:
        func: Zero-argument callable to run.
        attempts: Total number of calls allowed (at least one).
        initial_delay: Seconds to wait before the second attempt.
        max_delay: Upper bound for the wait between attempts.
        retry_on: Exception types that trigger another attempt.
        sleep: Sleep function (defaults to time.sleep).

    Returns:
        Whatever ``func`` returns.

    Raises:
        The last exception raised by ``func`` once attempts are exhausted,
        or immediately for exceptions not listed in ``retry_on``.
    """
    attempts = max(1, attempts)
    delay = initial_delay

    for attempt in range(1, attempts + 1):
        try:
            return func()
        except retry_on as e:
            if attempt == attempts:
                raise
            LOGGER.warning(f"Attempt {attempt}/{attempts} failed: {e}. Retrying in {delay:.1f}s")
            (sleep or time.sleep)(delay)
            delay = min(max_delay, delay * 2)

    raise AssertionError("unreachable")
