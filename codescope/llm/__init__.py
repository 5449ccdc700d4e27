"""
CodeScope Inference Provider Module.

Usage:
    from codescope.llm import HuggingFaceProvider, GenerationConfig

    provider = HuggingFaceProvider(api_key="hf_...")
    output = await provider.invoke(
        "bigcode/starcoder2-15b",
        "def fibonacci(n):",
        GenerationConfig(max_tokens=128),
    )
"""

from codescope.llm.models import (
    ProviderType,
    GenerationConfig,
    InferenceOutput,
)
from codescope.llm.errors import ProviderError, ConfigurationError
from codescope.llm.base import BaseInferenceProvider
from codescope.llm.providers.huggingface import HuggingFaceProvider

__all__ = [
    # Models
    "ProviderType",
    "GenerationConfig",
    "InferenceOutput",
    # Errors
    "ProviderError",
    "ConfigurationError",
    # Providers
    "BaseInferenceProvider",
    "HuggingFaceProvider",
]
