"""
Error classification for the step engine.

Configuration and precondition errors are raised before a record is touched.
Transition errors describe a record that cannot be advanced. Errors raised by
state handlers are never wrapped: they reach the catch handler as-is.
"""

from .configuration import (
    StepsError,
    ConfigurationError,
    PreconditionError,
)
from .transitions import (
    InvalidStateError,
    TransitionTypeError,
)

__all__ = [
    # Setup Errors
    "StepsError",
    "ConfigurationError",
    "PreconditionError",
    # Transition Errors
    "InvalidStateError",
    "TransitionTypeError",
]
