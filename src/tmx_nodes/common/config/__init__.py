"""Configuration module - runtime settings from the environment."""

from tmx_nodes.common.config.settings import (
    Environment,
    LogLevel,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Environment",
    "LogLevel",
    "Settings",
    "get_settings",
    "reset_settings",
]
