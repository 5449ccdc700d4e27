"""
Evaluation module for CodeScope.

Derives per-output performance metrics.
"""

from codescope.evaluation.metrics import (
    ModelMetrics,
    estimate_tokens,
    derive_metrics,
)

__all__ = [
    "ModelMetrics",
    "estimate_tokens",
    "derive_metrics",
]
