"""
CodeScope API Middleware.

Provides rate limiting and request logging middleware.
"""

from codescope.api.middleware.rate_limit import RateLimitMiddleware, get_client_identifier
from codescope.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "RateLimitMiddleware",
    "RequestLoggingMiddleware",
    "get_client_identifier",
]
