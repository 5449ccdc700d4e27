"""
Rate limiting for CodeScope API.

Implements fixed window rate limiting with an in-process table.

State is local to one process: running several workers or restarting the
process often gives each worker its own counters, so enforcement is weaker
than the nominal limit in those deployments.
"""

import asyncio
import math
import time
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Any
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_MAX_REQUESTS = 10
DEFAULT_WINDOW_SECONDS = 10 * 60
DEFAULT_CLEANUP_INTERVAL = 60


@dataclass
class RateLimitEntry:
    """Request count for one identifier in its current window."""

    count: int
    reset_time: float


@dataclass
class RateLimitResult:
    """Result of rate limit check."""

    allowed: bool
    remaining: int
    reset_time: float
    limit: int = DEFAULT_MAX_REQUESTS
    window: float = DEFAULT_WINDOW_SECONDS
    checked_at: Optional[float] = None

    def retry_after(self, now: Optional[float] = None) -> int:
        """
        Whole seconds until the window resets.

        Measured from ``now``, else from the instant the check was made.
        A denied result always reports at least one second.
        """
        if now is None:
            now = self.checked_at if self.checked_at is not None else time.time()
        seconds = max(0, math.ceil(self.reset_time - now))
        if not self.allowed:
            seconds = max(1, seconds)
        return seconds

    def reset_time_iso(self) -> str:
        """Reset time as an ISO-8601 UTC string."""
        reset = datetime.fromtimestamp(self.reset_time, tz=timezone.utc)
        return reset.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_headers(self, now: Optional[float] = None) -> Dict[str, str]:
        """Convert to HTTP headers."""
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(int(math.ceil(self.reset_time))),
        }
        if not self.allowed:
            headers["Retry-After"] = str(self.retry_after(now))
        return headers

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "allowed": self.allowed,
            "remaining": self.remaining,
            "limit": self.limit,
            "window": self.window,
            "reset_time": self.reset_time,
        }


class FixedWindowRateLimiter:
    """
    In-memory fixed window rate limiting keyed by client identifier.

    The first request from an identifier opens a window of ``window``
    seconds; at most ``max_requests`` requests are admitted until it
    expires, after which the next request opens a fresh window.

    Example:
        limiter = FixedWindowRateLimiter(max_requests=10, window=600)
        result = limiter.check("ip:10.0.0.1")
        if not result.allowed:
            print(result.retry_after())
    """

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window: float = DEFAULT_WINDOW_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize rate limiter.

        Args:
            max_requests: Requests admitted per window per identifier
            window: Window length in seconds
            clock: Time source returning epoch seconds (defaults to time.time)
        """
        if max_requests <= 0:
            raise ValueError("max_requests must be greater than zero")
        if window <= 0:
            raise ValueError("window must be greater than zero")

        self.max_requests = max_requests
        self.window = window
        self._clock = clock or time.time
        self._entries: Dict[str, RateLimitEntry] = {}
        self._lock = threading.RLock()
        self._cleanup_task: Optional[asyncio.Task] = None

    def check(self, identifier: str) -> RateLimitResult:
        """
        Record a request and decide whether it is admitted.

        Args:
            identifier: Unique identifier (usually the client IP)

        Returns:
            RateLimitResult with allowed status and window metadata
        """
        with self._lock:
            now = self._clock()
            entry = self._entries.get(identifier)

            if entry is None or now > entry.reset_time:
                entry = RateLimitEntry(count=1, reset_time=now + self.window)
                self._entries[identifier] = entry
                return RateLimitResult(
                    allowed=True,
                    remaining=self.max_requests - 1,
                    reset_time=entry.reset_time,
                    limit=self.max_requests,
                    window=self.window,
                    checked_at=now,
                )

            if entry.count >= self.max_requests:
                return RateLimitResult(
                    allowed=False,
                    remaining=0,
                    reset_time=entry.reset_time,
                    limit=self.max_requests,
                    window=self.window,
                    checked_at=now,
                )

            entry.count += 1
            return RateLimitResult(
                allowed=True,
                remaining=self.max_requests - entry.count,
                reset_time=entry.reset_time,
                limit=self.max_requests,
                window=self.window,
                checked_at=now,
            )

    def cleanup(self) -> int:
        """
        Remove entries whose window has expired.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            expired = [
                key for key, entry in self._entries.items()
                if now > entry.reset_time
            ]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.debug(f"Rate limit cleanup removed {len(expired)} entries")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # -------------------------------------------------------------------------
    # Periodic cleanup
    # -------------------------------------------------------------------------

    async def _cleanup_loop(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.cleanup()

    def start_cleanup(self, interval: float = DEFAULT_CLEANUP_INTERVAL) -> asyncio.Task:
        """
        Start the periodic cleanup task on the running event loop.

        Args:
            interval: Seconds between sweeps

        Returns:
            The background task
        """
        if self._cleanup_task is None or self._cleanup_task.done():
            self._cleanup_task = asyncio.create_task(self._cleanup_loop(interval))
            logger.info(f"Rate limit cleanup started (interval={interval}s)")
        return self._cleanup_task

    async def stop_cleanup(self) -> None:
        """Cancel the periodic cleanup task if running."""
        task = self._cleanup_task
        self._cleanup_task = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Rate limit cleanup stopped")
