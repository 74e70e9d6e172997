"""
Address Finder - Retry & Backoff Utility

Retries a network call with exponential backoff on transient errors.
Used by the geocoder so that a single dropped connection does not surface
as an error while the user is typing.
"""

import time
import logging

logger = logging.getLogger("addressfinder.geocoder")


def retry_call(
    fn,
    args=(),
    kwargs=None,
    max_attempts: int = 2,
    backoff_base: float = 0.5,
    retryable_exceptions: tuple = (Exception,),
    non_retryable_exceptions: tuple = (),
    stop_check=None,
):
    """Call ``fn(*args, **kwargs)``, retrying on ``retryable_exceptions``.

    Args:
        fn: The callable to invoke.
        max_attempts: Maximum number of attempts (including the first).
        backoff_base: Base delay in seconds; attempt ``n`` waits
            ``backoff_base * 2 ** (n - 1)``.
        retryable_exceptions: Exception types that trigger a retry.
        non_retryable_exceptions: Exception types re-raised immediately even
            when they are also retryable (e.g. quota errors).
        stop_check: Optional callable returning True if the caller no longer
            wants the result; the last error is re-raised instead of waiting.
    """
    if kwargs is None:
        kwargs = {}

    for attempt in range(1, max_attempts + 1):
        try:
            return fn(*args, **kwargs)
        except retryable_exceptions as e:
            if non_retryable_exceptions and isinstance(e, non_retryable_exceptions):
                raise

            if attempt == max_attempts:
                raise

            if stop_check and stop_check():
                raise

            wait = backoff_base * 2 ** (attempt - 1)
            logger.warning(
                "Retry %d/%d for %s: %s (wait %.1fs)",
                attempt,
                max_attempts,
                getattr(fn, "__name__", fn),
                e,
                wait,
            )
            time.sleep(wait)

            if stop_check and stop_check():
                raise
