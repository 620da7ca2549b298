"""
fsm-steps - Finite State Machine Stepping Engine

A small engine that advances a stateful record by exactly one transition per
call. Each state name maps to a handler; the handler does the work for that
state and names the next one. The engine archives the previous state into the
record's history, timestamps the step and routes handler failures to a single
catch handler.
"""

from .errors import (
    ConfigurationError,
    InvalidStateError,
    PreconditionError,
    StepsError,
    TransitionTypeError,
)
from .state import HistoryEntry, StatefulRecord, Stepper, make_state, make_stepper

__version__ = "0.1.0"
__author__ = "fsm-steps Team"

__all__ = [
    "make_state",
    "make_stepper",
    "Stepper",
    "StatefulRecord",
    "HistoryEntry",
    "StepsError",
    "ConfigurationError",
    "PreconditionError",
    "InvalidStateError",
    "TransitionTypeError",
]
