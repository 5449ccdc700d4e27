"""
Inference provider implementations.
"""

from codescope.llm.providers.huggingface import HuggingFaceProvider

__all__ = [
    "HuggingFaceProvider",
]
