"""
Dependency injection for CodeScope API.

The catalog and orchestrator are created once by ``create_app`` and kept
on ``app.state``; routes receive them through these providers.
"""

from fastapi import Request

from codescope.catalog.catalog import ModelCatalog
from codescope.comparison.orchestrator import ComparisonOrchestrator


def get_catalog(request: Request) -> ModelCatalog:
    """Process-wide model catalog."""
    return request.app.state.catalog


def get_orchestrator(request: Request) -> ComparisonOrchestrator:
    """Process-wide comparison orchestrator."""
    return request.app.state.orchestrator
