"""
Pydantic schemas for API request/response validation.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from codescope.comparison.orchestrator import DEFAULT_MAX_TOKENS, MAX_MODELS_PER_COMPARISON


MAX_PROMPT_LENGTH = 10000
MAX_OUTPUT_TOKENS = 4096


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Compare Schemas
# =============================================================================

class CompareRequest(CamelModel):
    """Request to compare models on one prompt."""
    prompt: str = Field(
        ...,
        min_length=1,
        max_length=MAX_PROMPT_LENGTH,
        description="Prompt sent to every model",
    )
    model_ids: List[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_MODELS_PER_COMPARISON,
        description="Catalog identifiers (1-3, unique)",
    )
    max_tokens: int = Field(
        DEFAULT_MAX_TOKENS,
        ge=1,
        le=MAX_OUTPUT_TOKENS,
        strict=True,
        description="Maximum new tokens per model",
    )

    @field_validator("model_ids")
    @classmethod
    def model_ids_unique(cls, value: List[str]) -> List[str]:
        duplicates = sorted({m for m in value if value.count(m) > 1})
        if duplicates:
            raise ValueError(f"Duplicate model IDs: {', '.join(duplicates)}")
        return value


class MetricsSchema(CamelModel):
    """Timing and throughput for one model."""
    total_time: float = 0.0
    token_count: int = 0
    tokens_per_second: float = 0.0


class ModelResultSchema(CamelModel):
    """Outcome of one model query."""
    model_id: str
    model_name: str
    output: str = ""
    metrics: MetricsSchema
    error: Optional[str] = None
    status: str


class CompareMetadata(CamelModel):
    """Aggregate counters for a comparison."""
    timestamp: str
    total_models: int
    successful_models: int
    failed_models: int


class CompareResponse(CamelModel):
    """Comparison results in request order."""
    results: List[ModelResultSchema]
    metadata: CompareMetadata


# =============================================================================
# Model Catalog Schemas
# =============================================================================

class ModelDescriptorSchema(CamelModel):
    """A catalog entry (live or static)."""
    id: str
    name: str
    type: str
    provider: str
    model_id: Optional[str] = None
    description: str = ""
    context_window: int = 0
    tags: List[str] = []
    benchmark_url: Optional[str] = None
    benchmarks: Optional[Dict[str, float]] = None


class ModelListResponse(CamelModel):
    """Catalog page, split by kind."""
    live_models: List[ModelDescriptorSchema]
    static_benchmarks: List[ModelDescriptorSchema]


# =============================================================================
# Common Schemas
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    uptime: int


class ErrorResponse(CamelModel):
    """Error envelope."""
    error: str
    message: str
    code: str
    details: Optional[Dict[str, object]] = None
    retry_after: Optional[int] = None
    reset_time: Optional[str] = None
