"""
Configuration module for CodeScope.

Provides settings management.
"""

from codescope.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
