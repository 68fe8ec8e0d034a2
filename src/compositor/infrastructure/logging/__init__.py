"""Logging infrastructure."""

from .logger import configure_structlog, get_logger, setup_logging

__all__ = ["configure_structlog", "get_logger", "setup_logging"]
