"""
Model descriptors for the CodeScope catalog.

Two kinds of entries exist:
- LiveModel: hosted on Hugging Face and queryable through the comparison API
- StaticBenchmark: a published model that only carries benchmark scores
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Union


class ModelType(str, Enum):
    """Kind of catalog entry."""
    LIVE = "live"
    STATIC = "static"


# Benchmark names as they appear on the wire
BENCHMARK_KEYS = ("humanEval", "mbpp", "multipl-e", "apps", "gsm8k")


@dataclass(frozen=True)
class LiveModel:
    """
    A model that can be queried live.

    Attributes:
        id: Stable catalog identifier
        name: Display name
        provider: Hosting provider label
        model_id: Upstream identifier used to address the inference endpoint
        description: Free-text description
        context_window: Maximum context length in tokens
        tags: Free-form tags
    """
    id: str
    name: str
    provider: str
    model_id: str
    description: str = ""
    context_window: int = 0
    tags: List[str] = field(default_factory=list)

    @property
    def type(self) -> ModelType:
        return ModelType.LIVE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "provider": self.provider,
            "modelId": self.model_id,
            "description": self.description,
            "contextWindow": self.context_window,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class StaticBenchmark:
    """
    A model known only through published benchmark scores.

    Attributes:
        id: Stable catalog identifier
        name: Display name
        provider: Vendor label
        description: Free-text description
        context_window: Maximum context length in tokens
        tags: Free-form tags
        benchmark_url: Source of the scores
        benchmarks: Benchmark name -> score (absent scores are None)
    """
    id: str
    name: str
    provider: str
    description: str = ""
    context_window: int = 0
    tags: List[str] = field(default_factory=list)
    benchmark_url: Optional[str] = None
    benchmarks: Dict[str, Optional[float]] = field(default_factory=dict)

    @property
    def type(self) -> ModelType:
        return ModelType.STATIC

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        d = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "provider": self.provider,
            "description": self.description,
            "benchmarks": {
                key: score for key, score in self.benchmarks.items()
                if score is not None
            },
            "contextWindow": self.context_window,
            "tags": list(self.tags),
        }
        if self.benchmark_url:
            d["benchmarkUrl"] = self.benchmark_url
        return d


ModelDescriptor = Union[LiveModel, StaticBenchmark]


def model_from_dict(data: Dict[str, Any]) -> ModelDescriptor:
    """
    Create a descriptor from a catalog record.

    Args:
        data: Record with a ``type`` of "live" or "static"

    Returns:
        LiveModel or StaticBenchmark

    Raises:
        ValueError: If the type is unknown or a benchmark name is not recognised
    """
    model_type = ModelType(data["type"])
    common = {
        "id": data["id"],
        "name": data["name"],
        "provider": data["provider"],
        "description": data.get("description", ""),
        "context_window": int(data.get("contextWindow", 0)),
        "tags": list(data.get("tags", [])),
    }

    if model_type is ModelType.LIVE:
        return LiveModel(model_id=data["modelId"], **common)
    elif model_type is ModelType.STATIC:
        benchmarks = dict(data.get("benchmarks", {}))
        unknown = set(benchmarks) - set(BENCHMARK_KEYS)
        if unknown:
            raise ValueError(f"Unknown benchmarks for {data['id']}: {sorted(unknown)}")
        return StaticBenchmark(
            benchmark_url=data.get("benchmarkUrl"),
            benchmarks={key: benchmarks.get(key) for key in BENCHMARK_KEYS},
            **common,
        )
    raise ValueError(f"Unhandled model type: {model_type}")
