"""Minimum-interval request throttling."""

import asyncio
import logging
import math
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Throttler:
    """Spaces outgoing requests at least ``ceil(60000 / R)`` ms apart.

    The timestamp of the last completed request is instance state and is not
    locked: callers sharing one instance are expected to be serialized.

    Args:
        max_requests_per_minute: Request budget per minute (must be > 0).
        clock: Monotonic clock in seconds.
        sleep: Coroutine used to suspend the caller.
    """

    def __init__(
        self,
        max_requests_per_minute: int = 60,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_requests_per_minute <= 0:
            raise ValueError("max_requests_per_minute must be positive")
        self._interval_ms = math.ceil(60_000 / max_requests_per_minute)
        self._clock = clock
        self._sleep = sleep
        self._last_request_at: float | None = None

    @property
    def interval_ms(self) -> int:
        """Minimum spacing between requests in milliseconds."""
        return self._interval_ms

    @property
    def last_request_at(self) -> float | None:
        return self._last_request_at

    def remaining(self) -> float:
        """Seconds left before the next request may start."""
        if self._last_request_at is None:
            return 0.0
        ready_at = self._last_request_at + self._interval_ms / 1000
        return max(0.0, ready_at - self._clock())

    async def wait(self) -> None:
        """Suspend until the minimum interval since the last request has passed."""
        delay = self.remaining()
        if delay > 0:
            logger.debug("Throttling request for %.3fs", delay)
            await self._sleep(delay)

    def mark(self) -> None:
        """Record that a request has just completed."""
        self._last_request_at = self._clock()
