"""Logging package."""

from billconf.logs.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
