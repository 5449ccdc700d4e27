"""
API middleware for request logging.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from codescope.api.middleware.rate_limit import get_client_identifier

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with its client, status and duration.

    The duration is also returned in ``X-Process-Time`` (seconds).
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code == 429:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{request.method} {request.url.path} "
            f"client={get_client_identifier(request)} "
            f"status={response.status_code} "
            f"duration={elapsed * 1000:.1f}ms"
        )

        return response
