"""
Model catalog API endpoints.

Provides read-only access to live models and static benchmark records.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from codescope.api.dependencies import get_catalog
from codescope.api.errors import NotFoundError
from codescope.api.schemas import (
    ErrorResponse,
    ModelDescriptorSchema,
    ModelListResponse,
)
from codescope.catalog.catalog import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT, ModelCatalog, paginate
from codescope.catalog.models import ModelType


router = APIRouter(prefix="/models", tags=["models"])


@router.get(
    "",
    response_model=ModelListResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="List models",
    description="List live models and static benchmarks, optionally filtered by type.",
)
async def list_models(
    type: Optional[ModelType] = Query(None, description="Only return this kind of model"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT, description="Maximum models per list"),
    offset: int = Query(0, ge=0, description="Models to skip in each list"),
    catalog: ModelCatalog = Depends(get_catalog),
):
    """List catalog entries, paging each kind independently."""
    live = catalog.live_models() if type in (None, ModelType.LIVE) else []
    static = catalog.static_models() if type in (None, ModelType.STATIC) else []

    return {
        "liveModels": [m.to_dict() for m in paginate(live, limit=limit, offset=offset)],
        "staticBenchmarks": [m.to_dict() for m in paginate(static, limit=limit, offset=offset)],
    }


@router.get(
    "/{model_id:path}",
    response_model=ModelDescriptorSchema,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Get model by ID",
    description="Get a single catalog entry.",
)
async def get_model(model_id: str, catalog: ModelCatalog = Depends(get_catalog)):
    """Get a specific model by its catalog ID."""
    model = catalog.resolve(model_id)

    if model is None:
        raise NotFoundError(f"No model found with ID: {model_id}")

    return model.to_dict()
