"""
Data models for inference providers.

Defines the common data structures used by provider implementations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class ProviderType(str, Enum):
    """Supported inference provider types."""
    HUGGINGFACE = "huggingface"


@dataclass
class GenerationConfig:
    """
    Configuration for one generation call.

    Attributes:
        max_tokens: Maximum new tokens to generate
        temperature: Sampling temperature
    """
    max_tokens: int = 256
    temperature: float = 0.7

    def to_parameters(self) -> Dict[str, Any]:
        """Convert to the Inference API ``parameters`` object."""
        return {
            "max_new_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


@dataclass
class InferenceOutput:
    """
    Result of a successful provider call.

    Attributes:
        output_text: Generated text (empty if the payload had none)
        elapsed_seconds: Wall-clock time including any cold-start retry
        model: Upstream model identifier
        attempts: Number of upstream requests made (1 or 2)
        raw_response: Decoded upstream payload
    """
    output_text: str
    elapsed_seconds: float
    model: str = ""
    attempts: int = 1
    raw_response: Optional[Any] = None
