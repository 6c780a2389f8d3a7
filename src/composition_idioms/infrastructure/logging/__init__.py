"""Structured logging for the package."""

from .logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
