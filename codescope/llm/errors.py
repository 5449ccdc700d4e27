"""
Errors raised by inference providers.
"""

from typing import Optional


class ProviderError(Exception):
    """
    An upstream call failed.

    Attributes:
        message: Human-readable reason, shown on the per-model result
        status_code: Upstream HTTP status, if a response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(ProviderError):
    """The provider is missing required configuration (e.g. its API key)."""
