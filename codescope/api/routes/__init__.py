"""
API Routes for CodeScope.

Organized by resource type:
- models: Catalog listing and lookup
- compare: Multi-model comparison
"""

from codescope.api.routes.models import router as models_router
from codescope.api.routes.compare import router as compare_router

__all__ = [
    "models_router",
    "compare_router",
]
