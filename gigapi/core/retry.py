"""
Connection-level retry with exponential backoff for transient database failures.

A single RetryPolicy is built from settings when the data context is created
(see gigapi/core/database.py) and every repository operation runs through it.
Callers never pass retry options themselves.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy import exc as sa_exc

from gigapi.core.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_transient_error(exception: BaseException) -> bool:
    """
    Determine if a database exception is likely transient and should be retried.

    Args:
        exception: Exception raised by SQLAlchemy or the driver

    Returns:
        True for connectivity problems (dropped connections, pool timeouts)
    """
    if isinstance(exception, sa_exc.DBAPIError) and exception.connection_invalidated:
        return True

    return isinstance(
        exception,
        (
            sa_exc.OperationalError,
            sa_exc.InterfaceError,
            sa_exc.TimeoutError,
            sa_exc.DisconnectionError,
            ConnectionError,
        ),
    )


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry-on-failure policy for database operations.

    Attributes:
        enabled: When False, transient errors surface as StorageError immediately
        max_retries: Retry attempts after the first call (0 = no retries)
        base_delay: Initial delay in seconds
        max_delay: Upper bound for a single delay in seconds
        exponential_base: Multiplier applied to the delay after each attempt
    """

    enabled: bool = True
    max_retries: int = 6
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0

    @classmethod
    def from_settings(cls, settings) -> "RetryPolicy":
        return cls(
            enabled=settings.DB_RETRY_ON_FAILURE,
            max_retries=settings.DB_MAX_RETRY_COUNT,
            base_delay=settings.DB_RETRY_BASE_DELAY,
            max_delay=settings.DB_MAX_RETRY_DELAY,
        )

    def delays(self):
        """Yield the delay to sleep before each retry attempt."""
        delay = self.base_delay
        for _ in range(self.max_retries if self.enabled else 0):
            yield min(delay, self.max_delay)
            delay *= self.exponential_base

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        on_retry: Optional[Callable[[int, BaseException], Awaitable[None]]] = None,
    ) -> T:
        """
        Run an async operation, retrying it on transient database errors.

        Args:
            operation: Zero-argument coroutine function performing the whole unit of work
            on_retry: Optional coroutine function(attempt, exception) awaited before each
                retry, used by repositories to roll back the failed session state

        Returns:
            Whatever the operation returns

        Raises:
            StorageError: If the operation keeps failing with transient errors
            Any non-transient exception raised by the operation, unchanged
        """
        delays = self.delays()
        attempt = 0

        while True:
            attempt += 1
            try:
                return await operation()
            except Exception as e:
                if not is_transient_error(e):
                    raise

                delay = next(delays, None)
                if delay is None:
                    logger.error(f"Database operation failed after {attempt} attempt(s): {e}")
                    raise StorageError(
                        f"Database unavailable after {attempt} attempt(s): {e}"
                    ) from e

                logger.warning(
                    f"Transient database error on attempt {attempt}, retrying in {delay:.2f}s: {e}"
                )
                if on_retry is not None:
                    await on_retry(attempt, e)
                await asyncio.sleep(delay)
