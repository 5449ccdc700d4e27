"""
Comparison API endpoint.

Runs one prompt against up to three catalog models.
"""

from fastapi import APIRouter, Depends

from codescope.api.dependencies import get_catalog, get_orchestrator
from codescope.api.errors import ValidationError
from codescope.api.schemas import CompareRequest, CompareResponse, ErrorResponse
from codescope.catalog.catalog import ModelCatalog
from codescope.comparison.orchestrator import ComparisonOrchestrator


router = APIRouter(prefix="/compare", tags=["compare"])


@router.post(
    "",
    response_model=CompareResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Compare models",
    description=(
        "Send one prompt to each requested model concurrently. Individual model "
        "failures are reported per result; the request itself still succeeds."
    ),
)
async def compare_models(
    request: CompareRequest,
    catalog: ModelCatalog = Depends(get_catalog),
    orchestrator: ComparisonOrchestrator = Depends(get_orchestrator),
):
    """Compare models on a single prompt."""
    partition = catalog.partition(request.model_ids)

    if partition.invalid:
        raise ValidationError(
            f"Invalid model IDs: {', '.join(partition.invalid)}",
            details={"invalidModelIds": partition.invalid},
        )

    if not partition.valid:
        raise ValidationError("At least one valid model must be selected")

    result = await orchestrator.compare(
        request.prompt,
        partition.valid,
        max_tokens=request.max_tokens,
    )

    return result.to_dict()
