"""
Logging configuration and utilities for the step engine.
"""
from .config import configure_from_config, configure_logging, get_logger, get_step_logger

__all__ = ["configure_logging", "configure_from_config", "get_logger", "get_step_logger"]
