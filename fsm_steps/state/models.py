"""
Stateful record data models.

This module defines the mutable record threaded through the step engine and
the immutable snapshots archived into its history.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..config.defaults import StepsConfig, get_default_config
from ..utils.time import now_ms

CORE_FIELDS = ("state", "done", "history", "updated")


@dataclass(frozen=True)
class HistoryEntry:
    """A state the record occupied before its current one."""

    state: str
    updated: Optional[int]                           # Last update while in this state (ms)

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.state, "updated": self.updated}

    @classmethod
    def from_value(cls, value: Union["HistoryEntry", Mapping[str, Any]]) -> "HistoryEntry":
        """Accept an existing entry or a {state, updated} mapping."""
        if isinstance(value, HistoryEntry):
            return value
        return cls(state=value["state"], updated=value.get("updated"))


@dataclass(eq=False)
class StatefulRecord:
    """
    Record advanced by the step engine.

    The engine mutates the record in place and compares handler results
    against it by identity, so equality is identity as well.
    """

    # Current state name, dispatched on by the engine
    state: str

    # Set by handlers once the record should no longer be stepped
    done: bool = False

    # Previous states, most recent first
    history: list[HistoryEntry] = field(default_factory=list)

    # Time of the most recent step (ms since epoch)
    updated: int = field(default_factory=now_ms)

    # Caller-defined fields
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to the plain {state, done, history, updated, **data} shape."""
        result = dict(self.data)
        result.update(
            state=self.state,
            done=self.done,
            history=[entry.to_dict() for entry in self.history or []],
            updated=self.updated,
        )
        return result

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "StatefulRecord":
        """Build a record from the flat shape produced by to_dict."""
        history = values.get("history")
        return cls(
            state=values["state"],
            done=bool(values.get("done", False)),
            history=[HistoryEntry.from_value(entry) for entry in history or []],
            updated=values["updated"] if values.get("updated") is not None else now_ms(),
            data={key: value for key, value in values.items() if key not in CORE_FIELDS},
        )


def make_state(
    fields: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[StepsConfig] = None,
    **extra: Any
) -> StatefulRecord:
    """
    Create a fresh record ready for its first step.

    Args:
        fields: Caller fields overlaid on the defaults; may override state
        config: Engine configuration supplying the initial state name
        **extra: More caller fields, applied after ``fields``

    Returns:
        New record in the initial state with an empty history
    """
    params = (config or get_default_config()).engine

    values: dict[str, Any] = {
        "state": params.initial_state,
        "done": False,
        "history": [],
        "updated": now_ms(),
    }
    if fields:
        values.update(fields)
    values.update(extra)

    return StatefulRecord.from_dict(values)
