"""
Comparison orchestrator.

Fans one prompt out to several catalog models concurrently and joins the
per-model outcomes into a single result list.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from codescope.catalog.catalog import ModelCatalog
from codescope.catalog.models import LiveModel, StaticBenchmark
from codescope.comparison.models import (
    ComparisonResult,
    QueryJob,
    ResultRecord,
    ResultStatus,
)
from codescope.evaluation.metrics import derive_metrics
from codescope.llm.base import BaseInferenceProvider
from codescope.llm.errors import ProviderError
from codescope.llm.models import GenerationConfig

logger = logging.getLogger(__name__)


DEFAULT_MAX_TOKENS = 256
MAX_MODELS_PER_COMPARISON = 3

STATIC_MODEL_MESSAGE = (
    "Static benchmarks cannot be queried live. They display benchmark scores only."
)
MODEL_NOT_FOUND_MESSAGE = "Model not found"


class ComparisonOrchestrator:
    """
    Runs one query per requested model and collects the results.

    Every job produces a ResultRecord: a failure in one job is recorded on
    that job's result and never cancels or alters the others. Results come
    back in the order the identifiers were given.

    Example:
        orchestrator = ComparisonOrchestrator(catalog, provider)
        result = await orchestrator.compare(
            "add two numbers", ["qwen2.5-coder-7b", "gpt-4o"]
        )
        print(result.success_count, result.error_count)
    """

    def __init__(
        self,
        catalog: ModelCatalog,
        provider: BaseInferenceProvider,
        default_max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = 0.7,
    ):
        """
        Initialize orchestrator.

        Args:
            catalog: Catalog used to resolve identifiers
            provider: Provider used for live models
            default_max_tokens: Output length when the caller gives none
            temperature: Sampling temperature sent to the provider
        """
        self.catalog = catalog
        self.provider = provider
        self.default_max_tokens = default_max_tokens
        self.temperature = temperature

    async def compare(
        self,
        prompt: str,
        model_ids: Sequence[str],
        max_tokens: Optional[int] = None,
    ) -> ComparisonResult:
        """
        Query every model with the same prompt.

        Args:
            prompt: Prompt text
            model_ids: Catalog identifiers (duplicates are dropped, first wins)
            max_tokens: Output length override

        Returns:
            ComparisonResult with one record per distinct identifier
        """
        jobs = [
            QueryJob(model_id=model_id, prompt=prompt, max_tokens=max_tokens)
            for model_id in dict.fromkeys(model_ids)
        ]

        outcomes = await asyncio.gather(
            *(self._run_job(job) for job in jobs),
            return_exceptions=True,
        )

        results: List[ResultRecord] = []
        for job, outcome in zip(jobs, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(
                    f"Unexpected failure querying {job.model_id}: {outcome}",
                    exc_info=outcome,
                )
                outcome = ResultRecord.failure(job.model_id, job.model_id, str(outcome))
            results.append(outcome)

        success_count = sum(1 for r in results if r.status is ResultStatus.SUCCESS)
        error_count = sum(1 for r in results if r.status is ResultStatus.ERROR)

        logger.info(
            f"Comparison finished: {success_count}/{len(results)} succeeded "
            f"({', '.join(job.model_id for job in jobs)})"
        )

        return ComparisonResult(
            results=results,
            success_count=success_count,
            error_count=error_count,
        )

    async def _run_job(self, job: QueryJob) -> ResultRecord:
        """Process a single job and convert any provider failure to a record."""
        model = self.catalog.resolve(job.model_id)

        if model is None:
            return ResultRecord.failure(job.model_id, job.model_id, MODEL_NOT_FOUND_MESSAGE)

        if isinstance(model, StaticBenchmark):
            return ResultRecord.failure(model.id, model.name, STATIC_MODEL_MESSAGE)

        if isinstance(model, LiveModel):
            return await self._query_live(job, model)

        raise TypeError(f"Unhandled model descriptor: {type(model).__name__}")

    async def _query_live(self, job: QueryJob, model: LiveModel) -> ResultRecord:
        config = GenerationConfig(
            max_tokens=job.max_tokens or self.default_max_tokens,
            temperature=self.temperature,
        )

        try:
            output = await self.provider.invoke(model.model_id, job.prompt, config)
        except ProviderError as e:
            logger.warning(f"{model.id} failed: {e.message}")
            return ResultRecord.failure(model.id, model.name, e.message)

        metrics = derive_metrics(output.output_text, output.elapsed_seconds)
        return ResultRecord.success(model.id, model.name, output.output_text, metrics)
