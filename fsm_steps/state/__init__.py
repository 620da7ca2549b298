"""
Stateful records and the step engine.

A record moves through named states one step at a time: each call to a
Stepper archives the current state into the record's history, runs the
handler registered for it and applies the transition the handler returns.
"""
from .models import HistoryEntry, StatefulRecord, make_state
from .stepper import Stepper, make_stepper

__all__ = ["HistoryEntry", "StatefulRecord", "make_state", "Stepper", "make_stepper"]
