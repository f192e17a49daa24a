"""Utility functions module."""

from typed_env.utils.logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
