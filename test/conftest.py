"""
Shared fixtures and configuration for CodeScope tests.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient


TEST_API_BASE = "https://hf.test/models"

LIVE_OK_OUTPUT = "def add(a, b):\n    return a + b\n"


# =============================================================================
# Helpers
# =============================================================================

class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Awaitable sleep that returns immediately and records delays."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class UpstreamStub:
    """
    Scripted stand-in for the Inference API.

    Each model path maps to a list of (status, body) replies consumed in
    order; the last reply repeats once the list is exhausted.
    """

    def __init__(self, replies=None):
        self.replies = dict(replies or {})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        model = request.url.path.split("/models/", 1)[-1]
        script = self.replies.get(model)
        if not script:
            return httpx.Response(404, json={"error": f"Model {model} does not exist"})

        status, body = script[0] if len(script) == 1 else script.pop(0)
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode(),
                                  headers={"Content-Type": "application/json"})
        return httpx.Response(status, text=body)

    def bodies(self):
        return [json.loads(r.content) for r in self.requests]


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def catalog_records():
    """Raw records for a small catalog."""
    return [
        {
            "id": "m-live-ok",
            "name": "Live OK",
            "type": "live",
            "provider": "huggingface",
            "modelId": "org/live-ok",
            "description": "Answers every prompt",
            "contextWindow": 8192,
            "tags": ["python"],
        },
        {
            "id": "m-live-fail",
            "name": "Live Fail",
            "type": "live",
            "provider": "huggingface",
            "modelId": "org/live-fail",
            "contextWindow": 4096,
        },
        {
            "id": "m-static-1",
            "name": "Static One",
            "type": "static",
            "provider": "Vendor",
            "description": "Benchmark-only model",
            "contextWindow": 128000,
            "benchmarkUrl": "https://example.com/leaderboard",
            "benchmarks": {"humanEval": 90.2, "mbpp": 87.5},
        },
    ]


@pytest.fixture
def catalog(catalog_records):
    """ModelCatalog built from catalog_records."""
    from codescope.catalog.catalog import ModelCatalog
    return ModelCatalog.from_records(catalog_records)


# =============================================================================
# Provider Fixtures
# =============================================================================

@pytest.fixture
def upstream():
    """Upstream stub with one healthy and one failing model."""
    return UpstreamStub({
        "org/live-ok": [(200, [{"generated_text": LIVE_OK_OUTPUT}])],
        "org/live-fail": [(500, {"error": "Internal upstream failure"})],
    })


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def provider(upstream, fake_sleep):
    """HuggingFaceProvider talking to the upstream stub."""
    from codescope.llm.providers.huggingface import HuggingFaceProvider
    return HuggingFaceProvider(
        api_key="hf_test_token",
        base_url=TEST_API_BASE,
        client=httpx.AsyncClient(transport=httpx.MockTransport(upstream)),
        sleep=fake_sleep,
    )


@pytest.fixture
def orchestrator(catalog, provider):
    from codescope.comparison.orchestrator import ComparisonOrchestrator
    return ComparisonOrchestrator(catalog=catalog, provider=provider)


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that Settings reads."""
    for key in (
        "HUGGINGFACE_API_KEY",
        "HUGGINGFACE_API_BASE",
        "HUGGINGFACE_TIMEOUT",
        "COLD_START_DELAY",
        "DEFAULT_TEMPERATURE",
        "DEFAULT_MAX_TOKENS",
        "RATE_LIMIT_REQUESTS",
        "RATE_LIMIT_WINDOW",
        "RATE_LIMIT_CLEANUP_INTERVAL",
        "CORS_ORIGINS",
        "LOG_LEVEL",
        "DEBUG",
        "API_HOST",
        "API_PORT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(clean_env):
    from codescope.config.settings import Settings
    return Settings(huggingface_api_key="hf_test_token")


@pytest.fixture
def rate_limiter():
    from codescope.cache.rate_limit import FixedWindowRateLimiter
    return FixedWindowRateLimiter(max_requests=10, window=600)


@pytest.fixture
def app(settings, catalog, provider, rate_limiter):
    from codescope.api.main import create_app
    return create_app(
        settings=settings,
        catalog=catalog,
        provider=provider,
        rate_limiter=rate_limiter,
    )


@pytest.fixture
def client(app):
    """Test client with lifespan events."""
    with TestClient(app) as client:
        yield client
