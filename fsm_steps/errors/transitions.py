"""
Transition error classifications.

Raised while stepping a record whose state cannot be dispatched, or whose
handler produced a result the engine cannot interpret.
"""

from typing import Optional, Sequence

from .configuration import StepsError


class InvalidStateError(StepsError):
    """Record state does not name a registered handler."""

    def __init__(self, message: str, state: Optional[str] = None,
                 available_states: Sequence[str] = (), **kwargs):
        super().__init__(message, **kwargs)
        self.state = state
        self.available_states = tuple(available_states)


class TransitionTypeError(StepsError, TypeError):
    """Handler returned something other than a state name, the record, or nothing."""

    def __init__(self, message: str, state: Optional[str] = None,
                 result_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.state = state
        self.result_type = result_type
