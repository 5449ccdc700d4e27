"""
Tests for the inference provider layer.
"""

import httpx
import pytest

from codescope.llm import (
    BaseInferenceProvider,
    ConfigurationError,
    GenerationConfig,
    HuggingFaceProvider,
    InferenceOutput,
    ProviderError,
    ProviderType,
)
from conftest import TEST_API_BASE, RecordingSleep, UpstreamStub


def make_provider(upstream, sleep=None, api_key="hf_test_token", **kwargs):
    return HuggingFaceProvider(
        api_key=api_key,
        base_url=TEST_API_BASE,
        client=httpx.AsyncClient(transport=httpx.MockTransport(upstream)),
        sleep=sleep or RecordingSleep(),
        **kwargs,
    )


# =============================================================================
# Models
# =============================================================================

class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_defaults(self):
        config = GenerationConfig()
        assert config.max_tokens == 256
        assert config.temperature == 0.7

    def test_to_parameters(self):
        config = GenerationConfig(max_tokens=64, temperature=0.2)
        assert config.to_parameters() == {
            "max_new_tokens": 64,
            "temperature": 0.2,
        }

    def test_rejects_unknown_parameters(self):
        with pytest.raises(TypeError):
            GenerationConfig(max_tokens=64, extra_params={"top_p": 0.9})


class TestBaseInferenceProvider:
    """Tests for the provider interface."""

    def test_base_provider_is_abstract(self):
        with pytest.raises(TypeError):
            BaseInferenceProvider()

    def test_is_configured(self):
        assert make_provider(UpstreamStub()).is_configured()
        assert not make_provider(UpstreamStub(), api_key=None).is_configured()

    def test_repr(self):
        assert "configured=True" in repr(make_provider(UpstreamStub()))

    def test_provider_type(self):
        assert HuggingFaceProvider.provider_type is ProviderType.HUGGINGFACE


# =============================================================================
# HuggingFace Provider
# =============================================================================

class TestHuggingFaceProvider:
    """Tests for HuggingFaceProvider.invoke."""

    @pytest.mark.asyncio
    async def test_success(self):
        upstream = UpstreamStub({"org/m": [(200, [{"generated_text": "print(1)"}])]})
        provider = make_provider(upstream)

        output = await provider.invoke("org/m", "say hi", GenerationConfig(max_tokens=32))

        assert isinstance(output, InferenceOutput)
        assert output.output_text == "print(1)"
        assert output.attempts == 1
        assert output.model == "org/m"
        assert output.elapsed_seconds >= 0

    @pytest.mark.asyncio
    async def test_request_shape(self):
        upstream = UpstreamStub({"org/m": [(200, [{"generated_text": ""}])]})
        provider = make_provider(upstream)

        await provider.invoke("org/m", "write code", GenerationConfig(max_tokens=32, temperature=0.0))

        request = upstream.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{TEST_API_BASE}/org/m"
        assert request.headers["Authorization"] == "Bearer hf_test_token"
        assert upstream.bodies()[0] == {
            "inputs": "write code",
            "parameters": {"max_new_tokens": 32, "temperature": 0.0},
        }

    @pytest.mark.asyncio
    async def test_default_config_uses_default_temperature(self):
        upstream = UpstreamStub({"org/m": [(200, [{"generated_text": "x"}])]})
        provider = make_provider(upstream, default_temperature=0.3)

        await provider.invoke("org/m", "p")

        assert upstream.bodies()[0]["parameters"]["temperature"] == 0.3

    @pytest.mark.asyncio
    async def test_payload_without_text(self):
        upstream = UpstreamStub({"org/m": [(200, [])]})
        output = await make_provider(upstream).invoke("org/m", "p")
        assert output.output_text == ""

    @pytest.mark.asyncio
    async def test_dict_payload(self):
        upstream = UpstreamStub({"org/m": [(200, {"generated_text": "ok"})]})
        output = await make_provider(upstream).invoke("org/m", "p")
        assert output.output_text == "ok"

    @pytest.mark.asyncio
    async def test_cold_start_retry_succeeds(self):
        upstream = UpstreamStub({
            "org/m": [
                (503, {"error": "Model org/m is currently loading", "estimated_time": 20.0}),
                (200, [{"generated_text": "done"}]),
            ],
        })
        sleep = RecordingSleep()
        provider = make_provider(upstream, sleep=sleep)

        output = await provider.invoke("org/m", "p")

        assert output.output_text == "done"
        assert output.attempts == 2
        assert len(upstream.requests) == 2
        assert sleep.calls == [60.0]
        assert upstream.bodies()[0] == upstream.bodies()[1]

    @pytest.mark.asyncio
    async def test_cold_start_retry_only_once(self):
        upstream = UpstreamStub({"org/m": [(503, "Service Unavailable")]})
        sleep = RecordingSleep()
        provider = make_provider(upstream, sleep=sleep, cold_start_delay=5.0)

        with pytest.raises(ProviderError) as exc_info:
            await provider.invoke("org/m", "p")

        assert exc_info.value.message == "Model unavailable after retry"
        assert exc_info.value.status_code == 503
        assert len(upstream.requests) == 2
        assert sleep.calls == [5.0]

    @pytest.mark.asyncio
    async def test_retry_failure_uses_upstream_message(self):
        upstream = UpstreamStub({
            "org/m": [
                (503, {"error": "loading"}),
                (500, {"error": "CUDA out of memory"}),
            ],
        })

        with pytest.raises(ProviderError, match="CUDA out of memory"):
            await make_provider(upstream).invoke("org/m", "p")

    @pytest.mark.asyncio
    async def test_error_status_with_message(self):
        upstream = UpstreamStub({"org/m": [(500, {"error": "Internal upstream failure"})]})
        provider = make_provider(upstream)

        with pytest.raises(ProviderError) as exc_info:
            await provider.invoke("org/m", "p")

        assert exc_info.value.message == "Internal upstream failure"
        assert exc_info.value.status_code == 500
        assert len(upstream.requests) == 1

    @pytest.mark.asyncio
    async def test_error_status_without_json(self):
        upstream = UpstreamStub({"org/m": [(502, "<html>Bad Gateway</html>")]})

        with pytest.raises(ProviderError) as exc_info:
            await make_provider(upstream).invoke("org/m", "p")

        assert exc_info.value.message == "HF API error: 502"

    @pytest.mark.asyncio
    async def test_error_list(self):
        upstream = UpstreamStub({"org/m": [(400, {"error": ["bad input", "too long"]})]})

        with pytest.raises(ProviderError, match="bad input; too long"):
            await make_provider(upstream).invoke("org/m", "p")

    @pytest.mark.asyncio
    async def test_invalid_json_success_body(self):
        upstream = UpstreamStub({"org/m": [(200, "not json")]})

        with pytest.raises(ProviderError, match="Invalid JSON"):
            await make_provider(upstream).invoke("org/m", "p")

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        upstream = UpstreamStub({"org/m": [(200, [{"generated_text": "x"}])]})
        provider = make_provider(upstream, api_key=None)

        with pytest.raises(ConfigurationError, match="HUGGINGFACE_API_KEY is not configured"):
            await provider.invoke("org/m", "p")

        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = HuggingFaceProvider(
            api_key="hf_test_token",
            base_url=TEST_API_BASE,
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        with pytest.raises(ProviderError, match="failed"):
            await provider.invoke("org/m", "p")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        provider = HuggingFaceProvider(
            api_key="hf_test_token",
            base_url=TEST_API_BASE,
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        with pytest.raises(ProviderError, match="timed out"):
            await provider.invoke("org/m", "p")

    @pytest.mark.asyncio
    async def test_aclose_keeps_injected_client(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(UpstreamStub()))
        provider = HuggingFaceProvider(api_key="k", client=client)

        await provider.aclose()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_own_client(self):
        provider = HuggingFaceProvider(api_key="k")
        client = provider.client

        await provider.aclose()

        assert client.is_closed
