"""
Comparison module.

Runs one prompt against several models and normalizes the results.
"""

from codescope.comparison.models import (
    QueryJob,
    ResultRecord,
    ResultStatus,
    ComparisonResult,
)
from codescope.comparison.orchestrator import (
    ComparisonOrchestrator,
    STATIC_MODEL_MESSAGE,
    MAX_MODELS_PER_COMPARISON,
)

__all__ = [
    "QueryJob",
    "ResultRecord",
    "ResultStatus",
    "ComparisonResult",
    "ComparisonOrchestrator",
    "STATIC_MODEL_MESSAGE",
    "MAX_MODELS_PER_COMPARISON",
]
