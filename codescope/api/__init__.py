"""
CodeScope REST API.

FastAPI application exposing the model catalog and the comparison endpoint.
"""

from codescope.api.main import app, create_app

__all__ = ["app", "create_app"]
