"""
Performance metrics for generated outputs.

Token counts are a character-based estimate (four characters per token,
rounded up), not a tokenizer count.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any


CHARS_PER_TOKEN = 4


@dataclass(frozen=True)
class ModelMetrics:
    """
    Timing and throughput for one model output.

    Attributes:
        total_time: Elapsed wall-clock seconds
        token_count: Estimated output tokens
        tokens_per_second: token_count / total_time, or 0 when no time elapsed
    """
    total_time: float = 0.0
    token_count: int = 0
    tokens_per_second: float = 0.0

    @classmethod
    def zero(cls) -> "ModelMetrics":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalTime": self.total_time,
            "tokenCount": self.token_count,
            "tokensPerSecond": self.tokens_per_second,
        }


def estimate_tokens(text: str) -> int:
    """Estimate token count from text length."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def derive_metrics(output_text: str, elapsed_seconds: float) -> ModelMetrics:
    """
    Derive token count and throughput from an output and its elapsed time.

    Args:
        output_text: Generated text
        elapsed_seconds: Wall-clock time of the call

    Returns:
        ModelMetrics with throughput 0 when elapsed_seconds is not positive
    """
    elapsed = max(0.0, float(elapsed_seconds))
    token_count = estimate_tokens(output_text)
    tokens_per_second = token_count / elapsed if elapsed > 0 else 0.0

    return ModelMetrics(
        total_time=elapsed,
        token_count=token_count,
        tokens_per_second=tokens_per_second,
    )
