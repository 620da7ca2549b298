"""
Setup error classifications.

These exceptions are raised when the engine is built or called with missing
or malformed inputs. None of them are recoverable by the catch handler.
"""

from typing import Any, Dict, List, Optional


class StepsError(Exception):
    """Base class for errors raised by the step engine itself."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(StepsError):
    """Handler table or configuration values are missing or invalid."""

    def __init__(self, message: str, problems: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.problems = problems or []


class PreconditionError(StepsError, ValueError):
    """A step was requested without a record to step."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
