"""Logging helpers."""

from tmx_nodes.common.logging.logger import get_logger, configure_package_logging

__all__ = ["get_logger", "configure_package_logging"]
