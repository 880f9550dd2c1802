"""Logging helpers shared across :mod:`colmajor`."""

from .logging import get_configured_level, get_logger, reset_logger

__all__ = ["get_configured_level", "get_logger", "reset_logger"]
