"""Logging module for the WABA webhook service."""

from .logger import ContextLogger, get_app_logger, get_logger, setup_app_logging

__all__ = ["ContextLogger", "get_app_logger", "get_logger", "setup_app_logging"]
