"""
Global configuration settings for CodeScope.

Loads configuration from environment variables and provides
typed access to all system settings.
"""

import os
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000,http://localhost:5173,"
    "http://127.0.0.1:3000,http://127.0.0.1:5173"
)


@dataclass
class Settings:
    """Global settings for CodeScope."""

    # Upstream provider
    huggingface_api_key: Optional[str] = None
    huggingface_api_base: str = "https://api-inference.huggingface.co/models"
    huggingface_timeout: float = 120.0
    cold_start_delay: float = 60.0
    default_temperature: float = 0.7
    default_max_tokens: int = 256

    # Rate limiting
    rate_limit_requests: int = 10
    rate_limit_window: int = 600
    rate_limit_cleanup_interval: int = 60

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = field(
        default_factory=lambda: DEFAULT_CORS_ORIGINS.split(",")
    )
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        """Load settings from environment variables."""
        self.huggingface_api_key = os.getenv("HUGGINGFACE_API_KEY", self.huggingface_api_key) or None
        self.huggingface_api_base = os.getenv("HUGGINGFACE_API_BASE", self.huggingface_api_base)
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.api_host = os.getenv("API_HOST", self.api_host)
        self.debug = os.getenv("DEBUG", str(self.debug)).lower() == "true"

        if os.getenv("CORS_ORIGINS"):
            self.cors_origins = [
                origin.strip() for origin in os.getenv("CORS_ORIGINS").split(",")
                if origin.strip()
            ]

        # Load numeric settings if provided
        if os.getenv("HUGGINGFACE_TIMEOUT"):
            self.huggingface_timeout = float(os.getenv("HUGGINGFACE_TIMEOUT"))
        if os.getenv("COLD_START_DELAY"):
            self.cold_start_delay = float(os.getenv("COLD_START_DELAY"))
        if os.getenv("DEFAULT_TEMPERATURE"):
            self.default_temperature = float(os.getenv("DEFAULT_TEMPERATURE"))
        if os.getenv("DEFAULT_MAX_TOKENS"):
            self.default_max_tokens = int(os.getenv("DEFAULT_MAX_TOKENS"))
        if os.getenv("RATE_LIMIT_REQUESTS"):
            self.rate_limit_requests = int(os.getenv("RATE_LIMIT_REQUESTS"))
        if os.getenv("RATE_LIMIT_WINDOW"):
            self.rate_limit_window = int(os.getenv("RATE_LIMIT_WINDOW"))
        if os.getenv("RATE_LIMIT_CLEANUP_INTERVAL"):
            self.rate_limit_cleanup_interval = int(os.getenv("RATE_LIMIT_CLEANUP_INTERVAL"))
        if os.getenv("API_PORT"):
            self.api_port = int(os.getenv("API_PORT"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "huggingface_api_key": "***" if self.huggingface_api_key else "",
            "huggingface_api_base": self.huggingface_api_base,
            "huggingface_timeout": self.huggingface_timeout,
            "cold_start_delay": self.cold_start_delay,
            "default_temperature": self.default_temperature,
            "default_max_tokens": self.default_max_tokens,
            "rate_limit_requests": self.rate_limit_requests,
            "rate_limit_window": self.rate_limit_window,
            "rate_limit_cleanup_interval": self.rate_limit_cleanup_interval,
            "cors_origins": self.cors_origins,
            "log_level": self.log_level,
            "debug": self.debug,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
