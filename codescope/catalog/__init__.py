"""
Model catalog module.

Provides the fixed list of live models and static benchmark records.
"""

from codescope.catalog.models import (
    ModelType,
    LiveModel,
    StaticBenchmark,
    ModelDescriptor,
    model_from_dict,
)
from codescope.catalog.catalog import ModelCatalog, PartitionResult, paginate

__all__ = [
    "ModelType",
    "LiveModel",
    "StaticBenchmark",
    "ModelDescriptor",
    "model_from_dict",
    "ModelCatalog",
    "PartitionResult",
    "paginate",
]
