"""End-to-end tests driving records through complete handler tables."""

import asyncio

import pytest

from fsm_steps import make_state, make_stepper
from fsm_steps.config.loader import ConfigLoader
from fsm_steps.state.models import HistoryEntry, StatefulRecord


@pytest.mark.integration
class TestStepFlows:
    """Test records stepped to completion the way callers drive them."""

    @pytest.mark.asyncio
    async def test_linear_flow(self, linear_handlers):
        stepper = make_stepper(linear_handlers)
        record = make_state()

        for _ in range(3):
            record = await stepper(record)

        assert record.state == "End"
        assert record.done is True
        # step 3 archives End before its handler marks the record done
        assert [entry.state for entry in record.history] == ["End", "Middle", "Start"]

        # further steps are no-ops
        snapshot = record.to_dict()
        assert await stepper(record) is record
        assert record.to_dict() == snapshot

    @pytest.mark.asyncio
    async def test_error_state_routed_by_catch(self):
        """An error state recovered by the catch handler ends the run."""
        async def start(data):
            return "Middle"

        async def middle(data):
            return "Error"

        async def error(data):
            raise RuntimeError("error")

        async def end(data):
            data.done = True

        async def on_error(e, data):
            return "End"

        stepper = make_stepper({
            "Start": start,
            "Middle": middle,
            "Error": error,
            "End": end,
            "catch": on_error,
        })

        record = make_state()
        steps = 0
        while not record.done:
            record = await stepper(record)
            steps += 1

        assert record.state == "End"
        assert record.done is True
        assert steps == 4
        assert [entry.state for entry in record.history] == ["End", "Error", "Middle", "Start"]

    @pytest.mark.asyncio
    async def test_records_stepped_concurrently(self):
        """Independent records interleave without affecting each other."""
        async def start(record, delay):
            await asyncio.sleep(delay)
            record.data["visits"] = record.data.get("visits", 0) + 1
            return "Finish"

        def finish(record, delay):
            record.done = True

        stepper = make_stepper({"Start": start, "Finish": finish})
        records = [make_state(name=f"job-{i}") for i in range(3)]

        await asyncio.gather(*(stepper(record, 0.01 * (3 - i)) for i, record in enumerate(records)))
        await asyncio.gather(*(stepper(record, 0) for record in records))

        for record in records:
            assert record.done is True
            assert record.state == "Finish"
            assert record.data["visits"] == 1
            assert len(record.history) == 2

    @pytest.mark.asyncio
    async def test_serialized_record_resumes(self, linear_handlers):
        """A record flattened with to_dict can be rebuilt and stepped on."""
        stepper = make_stepper(linear_handlers)
        record = await stepper(make_state(ticket="T-1"))

        restored = StatefulRecord.from_dict(record.to_dict())
        await stepper(restored)

        assert restored.state == "End"
        assert restored.data == {"ticket": "T-1"}
        assert restored.history[1] == HistoryEntry(state="Start", updated=record.history[0].updated)

    @pytest.mark.asyncio
    async def test_configured_initial_state(self, tmp_path):
        (tmp_path / "steps.yaml").write_text("engine:\n  initial_state: Idle\n  catch_key: on_error\n")
        config = ConfigLoader.create(tmp_path).load()

        def idle(record):
            raise RuntimeError("not ready")

        def recovered(record):
            record.done = True

        stepper = make_stepper(
            {"Idle": idle, "Recovered": recovered, "on_error": lambda error, record: "Recovered"},
            config=config
        )
        record = make_state(config=config)

        while not record.done:
            await stepper(record)

        assert record.state == "Recovered"
        assert [entry.state for entry in record.history] == ["Recovered", "Idle"]
