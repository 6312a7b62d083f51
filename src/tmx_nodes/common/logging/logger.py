"""Centralized logging configuration."""

import logging


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_package_logging(level: str = "INFO") -> logging.Logger:
    """Attach the standard handler to the package root logger.

    Node modules log through ``logging.getLogger(__name__)``; their records
    propagate to the ``tmx_nodes`` logger configured here.
    """
    return get_logger("tmx_nodes", level)
