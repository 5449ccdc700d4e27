"""
HuggingFace Inference Provider.

Provides integration with the HuggingFace serverless Inference API.
"""

import asyncio
import time
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from codescope.llm.base import BaseInferenceProvider
from codescope.llm.errors import ConfigurationError, ProviderError
from codescope.llm.models import GenerationConfig, InferenceOutput, ProviderType

logger = logging.getLogger(__name__)


DEFAULT_API_BASE = "https://api-inference.huggingface.co/models"

# Status the Inference API returns while a model is being loaded
MODEL_LOADING_STATUS = 503

DEFAULT_COLD_START_DELAY = 60.0


class HuggingFaceProvider(BaseInferenceProvider):
    """
    HuggingFace Inference API provider.

    A model that is still loading answers with HTTP 503. The provider then
    waits ``cold_start_delay`` seconds and repeats the identical request
    once; a second failure of any kind is final.

    Example:
        provider = HuggingFaceProvider(api_key="hf_...")
        output = await provider.invoke(
            "Qwen/Qwen2.5-Coder-7B-Instruct",
            "Write a function that adds two numbers",
            GenerationConfig(max_tokens=256),
        )
        print(output.output_text, output.elapsed_seconds)
    """

    provider_type = ProviderType.HUGGINGFACE

    API_KEY_ENV_VAR = "HUGGINGFACE_API_KEY"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 120.0,
        cold_start_delay: float = DEFAULT_COLD_START_DELAY,
        default_temperature: float = 0.7,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        """
        Initialize the HuggingFace provider.

        Args:
            api_key: HuggingFace access token.
            base_url: Inference API base URL; the model id is appended.
            timeout: Per-request timeout in seconds.
            cold_start_delay: Seconds to wait before retrying a loading model.
            default_temperature: Temperature used when no config is given.
            client: Pre-built async HTTP client (created lazily otherwise).
            sleep: Awaitable sleep used for the cold-start delay.
        """
        super().__init__(api_key=api_key, timeout=timeout)
        self.base_url = base_url.rstrip("/")
        self.cold_start_delay = cold_start_delay
        self.default_temperature = default_temperature
        self._client = client
        self._owns_client = client is None
        self._sleep = sleep or asyncio.sleep

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _url(self, model: str) -> str:
        return f"{self.base_url}/{model}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def invoke(
        self,
        model: str,
        prompt: str,
        config: Optional[GenerationConfig] = None,
    ) -> InferenceOutput:
        """
        Generate text with a HuggingFace hosted model.

        Args:
            model: Repository id, e.g. "bigcode/starcoder2-15b".
            prompt: Input text.
            config: Generation parameters.

        Returns:
            InferenceOutput with generated text and elapsed time.

        Raises:
            ConfigurationError: If no API key is configured.
            ProviderError: If the upstream call fails.
        """
        if not self.api_key:
            raise ConfigurationError(f"{self.API_KEY_ENV_VAR} is not configured")

        config = config or GenerationConfig(temperature=self.default_temperature)
        payload = {
            "inputs": prompt,
            "parameters": config.to_parameters(),
        }

        start_time = time.perf_counter()
        logger.debug(f"Querying {model} (max_new_tokens={config.max_tokens})")

        response = await self._post(model, payload)
        attempts = 1

        if response.status_code == MODEL_LOADING_STATUS:
            logger.warning(
                f"{model} is loading; retrying once in {self.cold_start_delay}s"
            )
            await self._sleep(self.cold_start_delay)
            response = await self._post(model, payload)
            attempts = 2

            if not response.is_success:
                message = self._error_message(response, "Model unavailable after retry")
                logger.warning(f"{model} failed after retry: {message}")
                raise ProviderError(message, status_code=response.status_code)

        elif not response.is_success:
            message = self._error_message(
                response, f"HF API error: {response.status_code}"
            )
            logger.warning(f"{model} returned {response.status_code}: {message}")
            raise ProviderError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise ProviderError(
                f"Invalid JSON response from {model}",
                status_code=response.status_code,
            )

        elapsed = max(0.0, time.perf_counter() - start_time)

        return InferenceOutput(
            output_text=self._extract_text(data),
            elapsed_seconds=elapsed,
            model=model,
            attempts=attempts,
            raw_response=data,
        )

    async def _post(self, model: str, payload: Dict[str, Any]) -> httpx.Response:
        """Send one inference request, mapping transport failures to ProviderError."""
        try:
            return await self.client.post(
                self._url(model),
                headers=self._headers(),
                json=payload,
            )
        except httpx.TimeoutException:
            logger.error(f"HuggingFace request to {model} timed out")
            raise ProviderError(f"Request to {model} timed out")
        except httpx.HTTPError as e:
            logger.error(f"HuggingFace request to {model} failed: {e}")
            raise ProviderError(f"Request to {model} failed: {e}")

    @staticmethod
    def _error_message(response: httpx.Response, default: str) -> str:
        """Extract the upstream ``error`` field, falling back to ``default``."""
        try:
            data = response.json()
        except ValueError:
            return default

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, list):
                error = "; ".join(str(e) for e in error if e)
            if error:
                return str(error)
        return default

    @staticmethod
    def _extract_text(data: Any) -> str:
        """Pull ``generated_text`` from an Inference API payload."""
        if isinstance(data, list):
            data = data[0] if data else None
        if isinstance(data, dict):
            return data.get("generated_text") or ""
        return ""
