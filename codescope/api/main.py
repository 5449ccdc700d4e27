"""
CodeScope API - Main FastAPI Application.

Side-by-side code generation model comparison REST API.

Provides endpoints for:
- Health and service info
- Model catalog listing and lookup
- Multi-model prompt comparison
"""

import time
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from codescope import __version__
from codescope.api.errors import APIError, InternalError, ValidationError
from codescope.api.middleware import RateLimitMiddleware, RequestLoggingMiddleware
from codescope.api.routes import compare_router, models_router
from codescope.api.schemas import HealthResponse
from codescope.cache.rate_limit import FixedWindowRateLimiter
from codescope.catalog.catalog import ModelCatalog
from codescope.comparison.models import utc_timestamp
from codescope.comparison.orchestrator import ComparisonOrchestrator
from codescope.config.settings import Settings, get_settings
from codescope.llm.base import BaseInferenceProvider
from codescope.llm.providers.huggingface import HuggingFaceProvider
from codescope.utils.logger_config import setup_logging

logger = logging.getLogger(__name__)


# API version
API_VERSION = __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Starts the rate limit cleanup task and releases the provider's HTTP
    client on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("Starting CodeScope API...")

    app.state.rate_limiter.start_cleanup(settings.rate_limit_cleanup_interval)

    yield

    logger.info("Shutting down CodeScope API...")
    await app.state.rate_limiter.stop_cleanup()
    await app.state.provider.aclose()


def _validation_message(exc: RequestValidationError) -> ValidationError:
    """Convert FastAPI's validation error to the envelope error."""
    errors = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            # loc carries the character offset of the decode failure
            reason = str(err.get("ctx", {}).get("error", err.get("msg", "Invalid JSON")))
            return ValidationError(
                "Malformed JSON body",
                details={"errors": [{"field": "", "message": reason}]},
            )

        field = ".".join(
            str(part) for part in err.get("loc", ())
            if part not in ("body", "query", "path")
        )
        errors.append({"field": field, "message": err.get("msg", "Invalid value")})

    if not errors:
        return ValidationError("Invalid request")

    first = errors[0]
    message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    return ValidationError(message, details={"errors": errors})


def _http_error_code(status_code: int) -> str:
    if status_code == 404:
        return "NOT_FOUND"
    if status_code == 405:
        return "METHOD_NOT_ALLOWED"
    return "HTTP_ERROR"


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[ModelCatalog] = None,
    provider: Optional[BaseInferenceProvider] = None,
    rate_limiter: Optional[FixedWindowRateLimiter] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (loaded from the environment if omitted)
        catalog: Model catalog (the packaged catalog if omitted)
        provider: Inference provider (HuggingFace if omitted)
        rate_limiter: Admission controller (built from settings if omitted)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if catalog is None:
        catalog = ModelCatalog.from_definitions()
    if provider is None:
        provider = HuggingFaceProvider(
            api_key=settings.huggingface_api_key,
            base_url=settings.huggingface_api_base,
            timeout=settings.huggingface_timeout,
            cold_start_delay=settings.cold_start_delay,
            default_temperature=settings.default_temperature,
        )
    if rate_limiter is None:
        rate_limiter = FixedWindowRateLimiter(
            max_requests=settings.rate_limit_requests,
            window=settings.rate_limit_window,
        )

    app = FastAPI(
        title="CodeScope API",
        description="""
# CodeScope - Code Generation Model Comparison

Send one prompt to up to three hosted code models and compare their output,
latency and throughput side by side. Static benchmark records for
proprietary models are listed alongside.

## Rate Limiting

Default: 10 requests per 10 minutes per client IP.
Rate limit headers are included in all rate-limited responses.
        """,
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.provider = provider
    app.state.rate_limiter = rate_limiter
    app.state.orchestrator = ComparisonOrchestrator(
        catalog=catalog,
        provider=provider,
        default_max_tokens=settings.default_max_tokens,
        temperature=settings.default_temperature,
    )
    app.state.started_at = time.time()

    # Order matters - last added is outermost
    app.add_middleware(RateLimitMiddleware, rate_limiter=rate_limiter)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(models_router)
    app.include_router(compare_router)

    @app.get("/", tags=["root"])
    async def root():
        """API root - returns basic info."""
        return {
            "name": "CodeScope API",
            "version": API_VERSION,
            "description": "Code generation model comparison",
            "docs": "/docs",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["health"]
    )
    async def health_check():
        """Health check endpoint (not rate limited)."""
        return HealthResponse(
            status="ok",
            timestamp=utc_timestamp(),
            version=API_VERSION,
            uptime=int(time.time() - app.state.started_at),
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Render request-level errors as the standard envelope."""
        return exc.to_response()

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Schema and parameter violations are 400 VALIDATION_ERROR."""
        error = _validation_message(exc)
        logger.info(f"Validation failed on {request.url.path}: {error.message}")
        return error.to_response()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Framework HTTP errors (unknown route, wrong method) in envelope form."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTP error",
                "message": str(exc.detail),
                "code": _http_error_code(exc.status_code),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return InternalError().to_response()

    return app


# Create the app instance
app = create_app()


def run():
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "codescope.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


# Entry point for running with uvicorn
if __name__ == "__main__":
    run()
