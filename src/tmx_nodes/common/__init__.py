"""Common utilities - logging, config, exceptions."""

from tmx_nodes.common.logging.logger import get_logger
from tmx_nodes.common.config import Settings, get_settings, reset_settings
from tmx_nodes.common.exceptions import (
    TmxNodeError,
    ConfigurationError,
    ValidationError,
    MissingStateError,
    RemoteServiceError,
    MalformedResponseError,
    NodeProcessingError,
)

__all__ = [
    # Logging
    "get_logger",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "TmxNodeError",
    "ConfigurationError",
    "ValidationError",
    "MissingStateError",
    "RemoteServiceError",
    "MalformedResponseError",
    "NodeProcessingError",
]
