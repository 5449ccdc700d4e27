"""
Base class for inference providers.

Defines the abstract interface that provider implementations must follow.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from codescope.llm.models import GenerationConfig, InferenceOutput, ProviderType

logger = logging.getLogger(__name__)


class BaseInferenceProvider(ABC):
    """
    Abstract base class for inference providers.

    Attributes:
        provider_type: The type of provider
        api_key: The API key for authentication
        timeout: Per-request timeout in seconds
    """

    provider_type: ProviderType

    def __init__(self, api_key: Optional[str] = None, timeout: float = 120.0):
        """
        Initialize the provider.

        Args:
            api_key: API key for authentication.
            timeout: Per-request timeout in seconds.
        """
        self.api_key = api_key
        self.timeout = timeout

        if not self.api_key:
            logger.warning(
                f"{self.provider_type.value} API key not found. "
                f"Live model queries will fail until it is configured."
            )

    @abstractmethod
    async def invoke(
        self,
        model: str,
        prompt: str,
        config: Optional[GenerationConfig] = None,
    ) -> InferenceOutput:
        """
        Run one generation against an upstream model.

        Args:
            model: Upstream model identifier.
            prompt: Input text.
            config: Generation parameters. Uses defaults if not provided.

        Returns:
            InferenceOutput with generated text and elapsed time.

        Raises:
            ProviderError: If the call fails.
        """

    async def aclose(self) -> None:
        """Release network resources held by the provider."""

    def is_configured(self) -> bool:
        """Check if the provider is properly configured with an API key."""
        return bool(self.api_key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(configured={self.is_configured()})"
