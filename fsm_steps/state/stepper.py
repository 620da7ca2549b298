"""
Step engine.

A Stepper owns a table of state handlers and advances one record by one
transition per call:

1. a done record is returned untouched
2. the current state must name a handler, otherwise InvalidStateError
3. the current {state, updated} is prepended to the record's history
4. the record is timestamped and the handler awaited
5. a handler failure goes to the catch handler, whose result is used instead
6. a string result becomes the new state; the record itself or a falsy
   result leaves state to whatever the handler set
"""

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..config.defaults import StepsConfig, get_default_config
from ..errors import ConfigurationError, InvalidStateError, PreconditionError, TransitionTypeError
from ..logging.config import get_step_logger, log_state_transition
from ..utils.time import elapsed_ms, format_timestamp, now_ms
from .models import HistoryEntry, StatefulRecord

TransitionResult = Union[None, str, StatefulRecord]
Handler = Callable[..., Union[TransitionResult, Awaitable[TransitionResult]]]
CatchHandler = Callable[..., Union[TransitionResult, Awaitable[TransitionResult]]]

step_logger = get_step_logger(__name__)


def reraise(error: Exception, record: StatefulRecord, *args: Any, **kwargs: Any) -> TransitionResult:
    """Default catch handler: hand the error back to whoever awaited the step."""
    raise error


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


def _format_updated(updated: Optional[int]) -> Optional[str]:
    try:
        return format_timestamp(updated)
    except (OverflowError, OSError, ValueError):
        return None


def _is_falsy(result: Any) -> bool:
    """Truth test that treats an ambiguous truth value as truthy."""
    try:
        return not result
    except Exception:
        return False


class Stepper:
    """
    Advances stateful records through a table of state handlers.

    Handlers are called as ``handler(record, *args, **kwargs)`` and the catch
    handler as ``catch(error, record, *args, **kwargs)``. Either may be a plain
    function or a coroutine function.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        catch: Optional[CatchHandler] = None,
        config: Optional[StepsConfig] = None
    ):
        if not handlers:
            raise ConfigurationError("Requires handlers mapping")

        params = (config or get_default_config()).engine

        table = dict(handlers)
        inline_catch = table.pop(params.catch_key, None)
        if catch is None:
            catch = inline_catch

        not_callable = sorted(name for name, handler in table.items() if not callable(handler))
        if not_callable:
            raise ConfigurationError(
                f"Handlers must be callable: {', '.join(map(str, not_callable))}",
                problems=[str(name) for name in not_callable]
            )
        if catch is not None and not callable(catch):
            raise ConfigurationError("Catch handler must be callable", problems=[params.catch_key])

        self._handlers: dict[str, Handler] = table
        self._catch: CatchHandler = catch if catch is not None else reraise
        self._log_transitions = params.log_transitions
        self.logger = step_logger

    @property
    def states(self) -> tuple[str, ...]:
        """Names of the states this stepper can dispatch."""
        return tuple(self._handlers)

    @property
    def catch_handler(self) -> CatchHandler:
        return self._catch

    async def step(self, record: StatefulRecord, *args: Any, **kwargs: Any) -> StatefulRecord:
        """
        Advance ``record`` by one transition.

        Args:
            record: Record to step; mutated in place
            *args: Passed through to the handler (and the catch handler)
            **kwargs: Passed through likewise

        Returns:
            The same record object

        Raises:
            PreconditionError: record is None
            InvalidStateError: record.state has no handler; record untouched
            TransitionTypeError: result is neither a string, the record, nor falsy
        """
        if record is None:
            raise PreconditionError("Handling state requires a state record", argument="record")

        if getattr(record, "done", False):
            self.logger.debug("Record is done, step skipped", state=record.state)
            return record

        from_state = record.state
        handler = self._handlers.get(from_state) if isinstance(from_state, str) else None
        if handler is None:
            self.logger.warning(
                "Invalid state transition",
                state=from_state,
                available_states=list(self.states)
            )
            raise InvalidStateError(
                f"Invalid state transition: {from_state}",
                state=from_state,
                available_states=self.states
            )

        previous_updated = getattr(record, "updated", None)
        self._archive(record)
        record.updated = now_ms()

        trigger = "handler"
        try:
            transition = await _resolve(handler(record, *args, **kwargs))
        except Exception as error:
            self.logger.warning(
                "State handler raised, routing to catch handler",
                state=from_state,
                error=str(error),
                error_type=type(error).__name__
            )
            trigger = "catch"
            transition = await _resolve(self._catch(error, record, *args, **kwargs))

        if transition is record:
            self._log_step(record, from_state, previous_updated, trigger)
            return record

        if isinstance(transition, str):
            if transition:
                record.state = transition
        elif not _is_falsy(transition):
            self.logger.warning(
                "Invalid transition result",
                state=from_state,
                result_type=type(transition).__name__
            )
            raise TransitionTypeError(
                "State handlers must return either a string state transition or nothing",
                state=from_state,
                result_type=type(transition).__name__
            )

        self._log_step(record, from_state, previous_updated, trigger)
        return record

    __call__ = step

    @staticmethod
    def _archive(record: StatefulRecord) -> None:
        """Prepend the record's current state and timestamp to its history."""
        if getattr(record, "history", None) is None:
            record.history = []
        record.history.insert(0, HistoryEntry(state=record.state, updated=getattr(record, "updated", None)))

    def _log_step(
        self,
        record: StatefulRecord,
        from_state: str,
        previous_updated: Optional[int],
        trigger: str
    ) -> None:
        if record.state == from_state:
            self.logger.debug(
                "Step completed without state change",
                state=from_state,
                trigger=trigger,
                done=getattr(record, "done", False)
            )
            return

        if not self._log_transitions:
            return

        # handlers may leave anything in updated; the log must not fail on it
        updated = getattr(record, "updated", None)
        if not isinstance(updated, int):
            updated = None

        log_state_transition(
            self.logger,
            from_state=from_state,
            to_state=record.state,
            trigger=trigger,
            context={
                "updated": _format_updated(updated),
                "time_in_state_ms": (
                    elapsed_ms(previous_updated, updated)
                    if isinstance(previous_updated, int) and updated is not None else None
                ),
                "done": getattr(record, "done", False),
            }
        )


def make_stepper(
    handlers: Mapping[str, Handler],
    *,
    catch: Optional[CatchHandler] = None,
    config: Optional[StepsConfig] = None
) -> Stepper:
    """
    Build a step function for a handler table.

    Args:
        handlers: State name to handler; an entry under the configured catch
            key is used as the catch handler and is never a valid state
        catch: Catch handler, takes precedence over an inline entry
        config: Engine configuration

    Returns:
        Stepper, awaited as ``await stepper(record, *args, **kwargs)``
    """
    return Stepper(handlers, catch=catch, config=config)
