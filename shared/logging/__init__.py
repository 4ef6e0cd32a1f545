"""Structured logging module using structlog."""

from .structured_logger import configure_logging

__all__ = ["configure_logging"]
