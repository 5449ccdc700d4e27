"""
Data structures for a comparison run.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Dict, Any

from codescope.evaluation.metrics import ModelMetrics


class ResultStatus(str, Enum):
    """Outcome of one model query."""
    SUCCESS = "success"
    ERROR = "error"


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class QueryJob:
    """One (prompt, model) pair dispatched by the orchestrator."""
    model_id: str
    prompt: str
    max_tokens: Optional[int] = None


@dataclass
class ResultRecord:
    """
    Outcome of one QueryJob.

    Attributes:
        model_id: Catalog identifier that was requested
        model_name: Display name of the resolved model
        output: Generated text (empty on error)
        metrics: Timing and throughput (zeroed on error)
        status: success or error
        error: Reason for failure, if any
    """
    model_id: str
    model_name: str
    output: str = ""
    metrics: ModelMetrics = field(default_factory=ModelMetrics.zero)
    status: ResultStatus = ResultStatus.SUCCESS
    error: Optional[str] = None

    @classmethod
    def success(cls, model_id: str, model_name: str, output: str, metrics: ModelMetrics) -> "ResultRecord":
        return cls(
            model_id=model_id,
            model_name=model_name,
            output=output,
            metrics=metrics,
            status=ResultStatus.SUCCESS,
        )

    @classmethod
    def failure(cls, model_id: str, model_name: str, error: str) -> "ResultRecord":
        return cls(
            model_id=model_id,
            model_name=model_name,
            output="",
            metrics=ModelMetrics.zero(),
            status=ResultStatus.ERROR,
            error=error,
        )

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "modelId": self.model_id,
            "modelName": self.model_name,
            "output": self.output,
            "metrics": self.metrics.to_dict(),
            "status": self.status.value,
        }
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass
class ComparisonResult:
    """Joined results of a comparison, in request order."""
    results: List[ResultRecord]
    success_count: int
    error_count: int
    timestamp: str = field(default_factory=utc_timestamp)

    @property
    def total(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "metadata": {
                "timestamp": self.timestamp,
                "totalModels": self.total,
                "successfulModels": self.success_count,
                "failedModels": self.error_count,
            },
        }
