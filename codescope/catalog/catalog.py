"""
Read-only model catalog.

Indexes the fixed set of model descriptors by identifier. The catalog is
built once at startup and never mutated afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Any

from codescope.catalog.definitions import get_all_definitions
from codescope.catalog.models import (
    LiveModel,
    ModelDescriptor,
    ModelType,
    StaticBenchmark,
    model_from_dict,
)

logger = logging.getLogger(__name__)


DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


@dataclass
class PartitionResult:
    """Identifiers split by whether they resolve in the catalog."""
    valid: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)


class ModelCatalog:
    """
    In-memory index over model descriptors.

    Unknown identifiers are reported as None or in the ``invalid`` list of a
    partition; lookups never raise.

    Example:
        catalog = ModelCatalog.from_definitions()
        model = catalog.resolve("qwen2.5-coder-7b")
        split = catalog.partition(["qwen2.5-coder-7b", "bogus"])
    """

    def __init__(self, models: Iterable[ModelDescriptor]):
        """
        Initialize catalog.

        Args:
            models: Descriptors in display order

        Raises:
            ValueError: If two descriptors share an identifier
        """
        self._models: List[ModelDescriptor] = []
        self._by_id: Dict[str, ModelDescriptor] = {}

        for model in models:
            if model.id in self._by_id:
                raise ValueError(f"Duplicate model id in catalog: {model.id}")
            self._models.append(model)
            self._by_id[model.id] = model

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "ModelCatalog":
        """Build a catalog from raw catalog records."""
        return cls(model_from_dict(record) for record in records)

    @classmethod
    def from_definitions(cls) -> "ModelCatalog":
        """Build the catalog shipped with the package."""
        catalog = cls.from_records(get_all_definitions())
        logger.info(
            f"Catalog loaded: {len(catalog.live_models())} live, "
            f"{len(catalog.static_models())} static"
        )
        return catalog

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, model_id: str) -> bool:
        return model_id in self._by_id

    def resolve(self, model_id: str) -> Optional[ModelDescriptor]:
        """
        Look up a descriptor by identifier.

        Args:
            model_id: Stable catalog identifier

        Returns:
            The descriptor, or None if unknown
        """
        return self._by_id.get(model_id)

    def partition(self, model_ids: Iterable[str]) -> PartitionResult:
        """
        Split identifiers into resolvable and unresolvable lists.

        Input order is preserved within each list.
        """
        result = PartitionResult()
        for model_id in model_ids:
            if model_id in self._by_id:
                result.valid.append(model_id)
            else:
                result.invalid.append(model_id)
        return result

    def all_models(self) -> List[ModelDescriptor]:
        """All descriptors in catalog order."""
        return list(self._models)

    def live_models(self) -> List[LiveModel]:
        """Queryable descriptors in catalog order."""
        return [m for m in self._models if isinstance(m, LiveModel)]

    def static_models(self) -> List[StaticBenchmark]:
        """Benchmark-only descriptors in catalog order."""
        return [m for m in self._models if isinstance(m, StaticBenchmark)]

    def filter_by_type(
        self,
        model_type: Optional[ModelType] = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> List[ModelDescriptor]:
        """
        Filter descriptors by kind, then slice.

        Args:
            model_type: Kind to keep (None keeps all)
            limit: Maximum entries to return, capped at MAX_PAGE_LIMIT
            offset: Entries to skip before taking ``limit``

        Returns:
            The requested page of descriptors
        """
        if model_type is None:
            filtered = self._models
        elif model_type is ModelType.LIVE:
            filtered = self.live_models()
        elif model_type is ModelType.STATIC:
            filtered = self.static_models()
        else:
            raise ValueError(f"Unhandled model type: {model_type}")

        return paginate(filtered, limit=limit, offset=offset)


def paginate(items: List[Any], limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> List[Any]:
    """Apply offset-then-limit slicing with the system limit bound."""
    offset = max(0, offset)
    limit = max(0, min(limit, MAX_PAGE_LIMIT))
    return items[offset:offset + limit]
