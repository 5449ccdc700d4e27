"""
CodeScope Cache Module.

Provides in-process rate limiting state.
"""

from codescope.cache.rate_limit import (
    FixedWindowRateLimiter,
    RateLimitEntry,
    RateLimitResult,
)

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitEntry",
    "RateLimitResult",
]
