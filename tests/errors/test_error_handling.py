"""Tests for the error hierarchy."""

import pytest

from fsm_steps.errors import (
    ConfigurationError,
    InvalidStateError,
    PreconditionError,
    StepsError,
    TransitionTypeError,
)


class TestErrorHierarchy:
    """Test classification of engine errors."""

    @pytest.mark.parametrize("error_class", [
        ConfigurationError,
        PreconditionError,
        InvalidStateError,
        TransitionTypeError,
    ])
    def test_all_errors_share_base(self, error_class):
        error = error_class("failure")

        assert isinstance(error, StepsError)
        assert error.recoverable is False
        assert error.context == {}

    def test_precondition_is_value_error(self):
        assert issubclass(PreconditionError, ValueError)

    def test_transition_type_is_type_error(self):
        assert issubclass(TransitionTypeError, TypeError)

    def test_invalid_state_is_not_builtin_error(self):
        assert not issubclass(InvalidStateError, (ValueError, TypeError, KeyError))


class TestErrorDetails:
    """Test extra attributes carried by errors."""

    def test_context_passthrough(self):
        error = ConfigurationError("bad", context={"path": "steps.yaml"})

        assert error.context == {"path": "steps.yaml"}
        assert str(error) == "bad"

    def test_configuration_problems(self):
        error = ConfigurationError("bad", problems=["Start"])

        assert error.problems == ["Start"]

    def test_invalid_state_details(self):
        error = InvalidStateError("Invalid state transition: X", state="X", available_states=["A", "B"])

        assert error.state == "X"
        assert error.available_states == ("A", "B")

    def test_transition_type_details(self):
        error = TransitionTypeError("bad result", state="A", result_type="int")

        assert error.state == "A"
        assert error.result_type == "int"
