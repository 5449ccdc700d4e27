"""
Rate Limiting Middleware for FastAPI.

Applies the per-client fixed window limit before any route runs.
"""

import logging
from typing import Callable, Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from codescope.api.errors import RateLimitError
from codescope.cache.rate_limit import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


# Paths that are never rate limited
EXEMPT_PATHS = frozenset({
    "/",
    "/health",
    "/docs",
    "/docs/oauth2-redirect",
    "/redoc",
    "/openapi.json",
})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware using the fixed window limiter.

    Rejected requests get a 429 error envelope with ``retryAfter`` and
    ``resetTime``; admitted requests carry X-RateLimit-* headers.
    """

    def __init__(
        self,
        app,
        rate_limiter: FixedWindowRateLimiter,
        exempt_paths: Optional[Iterable[str]] = None,
        enabled: bool = True,
    ):
        """
        Initialize middleware.

        Args:
            app: ASGI application
            rate_limiter: Limiter shared by every request of this process
            exempt_paths: Paths that bypass the limiter
            enabled: Whether rate limiting is enabled
        """
        super().__init__(app)
        self._limiter = rate_limiter
        self._exempt_paths = frozenset(exempt_paths) if exempt_paths is not None else EXEMPT_PATHS
        self._enabled = enabled

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with rate limiting."""
        if (
            not self._enabled
            or request.method == "OPTIONS"
            or request.url.path in self._exempt_paths
        ):
            return await call_next(request)

        identifier = get_client_identifier(request)
        result = self._limiter.check(identifier)

        if not result.allowed:
            error = RateLimitError(result)
            logger.warning(
                f"Rate limit exceeded for {identifier} on {request.url.path} "
                f"(retry after {error.retry_after}s)"
            )
            return error.to_response()

        response = await call_next(request)

        for key, value in result.to_headers().items():
            response.headers[key] = value

        return response


def get_client_identifier(request: Request) -> str:
    """
    Get the identifier requests are counted under.

    Priority:
    1. First address in X-Forwarded-For
    2. Socket peer address
    3. "unknown"
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    if request.client and request.client.host:
        return request.client.host

    return "unknown"
