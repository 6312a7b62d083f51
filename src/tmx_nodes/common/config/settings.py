"""Runtime settings for the ThreatMetrix nodes.

Provides environment-aware defaults for the remote service endpoints and
the HTTP transport. All settings are loaded from environment variables
with fallbacks. Per-node configuration lives in each node's schema module.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tmx_nodes.common.constants import ServiceConstants


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class Settings:
    """Central settings object.

    All settings can be overridden via environment variables prefixed with TMX_.

    Example:
        TMX_ENVIRONMENT=production
        TMX_LOG_LEVEL=INFO
        TMX_REQUEST_TIMEOUT=5
    """

    environment: Environment = field(
        default_factory=lambda: Environment(
            os.getenv("TMX_ENVIRONMENT", "development")
        )
    )
    log_level: LogLevel = field(
        default_factory=lambda: LogLevel(os.getenv("TMX_LOG_LEVEL", "INFO"))
    )

    # Transport
    request_timeout: float = field(
        default_factory=lambda: float(
            os.getenv("TMX_REQUEST_TIMEOUT", str(ServiceConstants.REQUEST_TIMEOUT_SECONDS))
        )
    )
    update_workers: int = field(
        default_factory=lambda: int(
            os.getenv("TMX_UPDATE_WORKERS", str(ServiceConstants.UPDATE_WORKERS))
        )
    )

    # Endpoints
    session_query_uri: str = field(
        default_factory=lambda: os.getenv(
            "TMX_SESSION_QUERY_URI", ServiceConstants.SESSION_QUERY_URI
        )
    )
    update_uri: str = field(
        default_factory=lambda: os.getenv("TMX_UPDATE_URI", ServiceConstants.UPDATE_URI)
    )
    profiler_uri: str = field(
        default_factory=lambda: os.getenv(
            "TMX_PROFILER_URI", ServiceConstants.PROFILER_URI
        )
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.request_timeout <= 0:
            raise ValueError("TMX_REQUEST_TIMEOUT must be a positive number of seconds")
        if self.update_workers < 1:
            raise ValueError("TMX_UPDATE_WORKERS must be at least 1")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings: The global settings singleton.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (for testing)."""
    global _settings
    _settings = None
