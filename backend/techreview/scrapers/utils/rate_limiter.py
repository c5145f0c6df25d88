"""Process-wide minimum-interval rate limiter."""

import asyncio
import time
from typing import Awaitable, Callable, Optional

import structlog


logger = structlog.get_logger(__name__)


class IntervalRateLimiter:
    """Single global gate spacing the starts of successive scrapes.

    Every caller, whatever retailer it targets, goes through the same
    gate. The timestamp is recorded when permission is granted, so the
    interval is measured start-to-start rather than finish-to-start.

    The read-modify-write of the timestamp happens under an asyncio.Lock.
    Concurrent callers therefore queue in arrival order and each one is
    released at least min_interval after the previous one.
    """

    def __init__(
        self,
        min_interval: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the limiter.

        Args:
            min_interval: Minimum seconds between two permitted starts
            clock: Monotonic time source
            sleep: Coroutine used to wait
        """
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self.last_request_time: Optional[float] = None
        self._lock = asyncio.Lock()

    async def throttle(self) -> float:
        """Wait until the next scrape may start.

        Returns:
            Seconds spent waiting (0.0 when no wait was needed)
        """
        async with self._lock:
            waited = 0.0
            if self.last_request_time is not None:
                elapsed = self._clock() - self.last_request_time
                if elapsed < self.min_interval:
                    waited = self.min_interval - elapsed
                    logger.debug("rate_limit_wait", wait_seconds=round(waited, 3))
                    await self._sleep(waited)
            self.last_request_time = self._clock()
            return waited

    def reset(self) -> None:
        """Forget the last request so the next call proceeds immediately."""
        self.last_request_time = None
