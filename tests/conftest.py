"""Pytest configuration and shared fixtures."""

from typing import Any, Dict
from unittest.mock import patch

import pytest

from fsm_steps.state.models import StatefulRecord

FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture
def fixed_now():
    """Freeze the engine clock at FIXED_NOW_MS."""
    with patch("fsm_steps.state.stepper.now_ms", return_value=FIXED_NOW_MS) as mock_now:
        yield mock_now


@pytest.fixture
def linear_handlers() -> Dict[str, Any]:
    """Start -> Middle -> End handler table, End finishes the record."""
    async def start(record):
        return "Middle"

    async def middle(record):
        return "End"

    async def end(record):
        record.done = True

    return {"Start": start, "Middle": middle, "End": end}


@pytest.fixture
def sample_record() -> StatefulRecord:
    """Record in Start with a known timestamp and one caller field."""
    return StatefulRecord(state="Start", updated=1_600_000_000_000, data={"order_id": "ord-001"})
