"""
Request-level errors and the JSON error envelope.

Every 4xx/5xx response body has the shape:
    {"error": str, "message": str, "code": str,
     "details"?: dict, "retryAfter"?: int, "resetTime"?: str}
"""

from typing import Any, Dict, Optional

from starlette.responses import JSONResponse

from codescope.cache.rate_limit import RateLimitResult


class APIError(Exception):
    """Base class for errors converted to the standard envelope."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    error: str = "Internal server error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "error": self.error,
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            d["details"] = self.details
        return d

    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_dict(),
            headers=self.headers(),
        )


class ValidationError(APIError):
    """Malformed or out-of-range request input."""
    status_code = 400
    code = "VALIDATION_ERROR"
    error = "Validation error"


class NotFoundError(APIError):
    """Identifier does not resolve in the catalog."""
    status_code = 404
    code = "MODEL_NOT_FOUND"
    error = "Model not found"


class RateLimitError(APIError):
    """Admission denied by the rate limiter."""
    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"
    error = "Rate limit exceeded"

    def __init__(self, result: RateLimitResult):
        super().__init__(
            f"Maximum {result.limit} requests per "
            f"{_format_window(result)}"
        )
        self.result = result
        self.retry_after = result.retry_after()

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["retryAfter"] = self.retry_after
        d["resetTime"] = self.result.reset_time_iso()
        return d

    def headers(self) -> Dict[str, str]:
        return self.result.to_headers()


class InternalError(APIError):
    """Anything unanticipated; the caller only sees a generic message."""
    status_code = 500
    code = "INTERNAL_ERROR"
    error = "Internal server error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)


def _format_window(result: RateLimitResult) -> str:
    window = int(result.window)
    minutes, seconds = divmod(window, 60)
    if seconds == 0 and minutes > 0:
        return f"{minutes} minutes" if minutes != 1 else "minute"
    return f"{window} seconds"
