"""
Engine configuration: defaults, YAML overrides and validation.
"""
from .defaults import EngineParams, LoggingParams, StepsConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "EngineParams",
    "LoggingParams",
    "StepsConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
