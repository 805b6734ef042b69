"""Logging helpers for the net worth dashboard."""

from .logger import get_app_logger, get_usage_logger

__all__ = ["get_app_logger", "get_usage_logger"]
