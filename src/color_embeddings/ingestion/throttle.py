"""Rate limiters that pace the batch driver between rows.

The driver calls :meth:`RateLimiter.pace` once after every attempted row,
whatever its outcome.  Swapping the limiter changes the throttling policy
without touching the per-row pipeline.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RateLimiter(ABC):
    """Pacing strategy applied between row attempts."""

    @abstractmethod
    async def pace(self) -> None:
        """Record one attempted row and suspend if the policy demands it."""
        ...

    def reset(self) -> None:
        """Forget pacing state left over from a previous run."""


class FixedIntervalLimiter(RateLimiter):
    """Sleep for *pause* seconds after every *every* attempted rows.

    Parameters
    ----------
    every:
        Number of attempts between pauses.
    pause:
        Pause length in seconds.
    sleep:
        Awaitable sleep function, replaceable in tests.
    """

    def __init__(self, every: int = 10, pause: float = 0.2, *, sleep: Sleep = asyncio.sleep) -> None:
        if every < 1:
            raise ValueError(f"every must be >= 1, got {every}")
        if pause < 0:
            raise ValueError(f"pause must be >= 0, got {pause}")
        self.every = every
        self.pause = pause
        self._sleep = sleep
        self.attempts = 0

    def reset(self) -> None:
        self.attempts = 0

    async def pace(self) -> None:
        self.attempts += 1
        if self.attempts % self.every == 0:
            logger.info("Attempted %d rows. Pausing %.3fs...", self.attempts, self.pause)
            await self._sleep(self.pause)


class TokenBucketLimiter(RateLimiter):
    """Allow bursts of *capacity* rows, refilled at *rate* rows per second.

    Each attempt consumes one token; when the bucket is empty the limiter
    sleeps just long enough for the next token to arrive.
    Token state tracks wall-clock throughput, so it carries across runs.
    """

    def __init__(
        self,
        rate: float,
        capacity: int,
        *,
        sleep: Sleep = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate <= 0:
            raise ValueError(f"rate must be > 0, got {rate}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.rate = rate
        self.capacity = capacity
        self._sleep = sleep
        self._clock = clock
        self._tokens = float(capacity)
        self._updated = clock()

    def _refill(self) -> None:
        now = self._clock()
        self._tokens = min(self.capacity, self._tokens + (now - self._updated) * self.rate)
        self._updated = now

    async def pace(self) -> None:
        self._refill()
        if self._tokens < 1:
            wait = (1 - self._tokens) / self.rate
            logger.debug("Token bucket empty, waiting %.3fs", wait)
            await self._sleep(wait)
            self._refill()
        # May go slightly negative when the injected sleep returns early.
        self._tokens -= 1
