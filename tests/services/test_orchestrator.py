"""Tests for debounced reload orchestration and view event routing."""

import asyncio
import logging
import threading
import time

import pytest
import solara.lab

from geo_dashboard.schemas import DashboardConfig, SortDirection
from geo_dashboard.services.orchestrator import DashboardOrchestrator, ReloadPhase

from ..factories import ManualQuery

DEBOUNCE_S = 0.1


@pytest.fixture
def orchestrator_factory(query_state, selection):
    def make(query, **kwargs):
        kwargs.setdefault("debounce_s", DEBOUNCE_S)
        return DashboardOrchestrator(query_state, selection, query, **kwargs)

    return make


def test_mount_loads_first_page_immediately(
    orchestrator_factory, recording_query, query_state
) -> None:
    orchestrator = orchestrator_factory(recording_query, debounce_s=10.0)

    async def scenario():
        await orchestrator.mount()
        assert orchestrator.phase == ReloadPhase.IDLE
        orchestrator.teardown()

    asyncio.run(scenario())
    assert len(recording_query.calls) == 1
    assert len(query_state.state.value.records) == 50


def test_rapid_changes_coalesce_into_one_fetch(
    orchestrator_factory, recording_query
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        for prefix in ("P", "Pr", "Pro", "Proj"):
            orchestrator.on_filter_change(project_name=prefix)
        orchestrator.on_filter_change(status="Active")
        assert orchestrator.phase == ReloadPhase.SCHEDULED
        await orchestrator.wait_until_idle()
        orchestrator.teardown()

    asyncio.run(scenario())

    assert len(recording_query.calls) == 2
    last = recording_query.calls[-1]
    assert last.filters.project_name == "Proj"
    assert last.filters.status == "Active"


def test_change_during_wait_restarts_timer(
    orchestrator_factory, recording_query
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        orchestrator.on_page_change(2)
        await asyncio.sleep(DEBOUNCE_S * 0.6)
        orchestrator.on_page_change(3)
        await asyncio.sleep(DEBOUNCE_S * 0.6)
        # First timer would have fired by now had it not been restarted
        assert len(recording_query.calls) == 1
        assert orchestrator.phase == ReloadPhase.SCHEDULED
        await orchestrator.wait_until_idle()
        orchestrator.teardown()

    asyncio.run(scenario())
    assert [p.page_number for p in recording_query.calls] == [1, 3]


def test_change_while_in_flight_keeps_newest_result(
    orchestrator_factory, query_state, small_store
) -> None:
    query = ManualQuery()
    orchestrator = orchestrator_factory(query)

    async def scenario():
        mount = asyncio.create_task(orchestrator.mount())
        await asyncio.sleep(0.01)
        assert orchestrator.phase == ReloadPhase.IN_FLIGHT

        orchestrator.on_page_change(2)
        await asyncio.sleep(DEBOUNCE_S * 1.5)
        assert len(query.pending) == 2

        (params_1, future_1), (params_2, future_2) = query.pending
        future_2.set_result(small_store.query(params_2))
        await asyncio.sleep(0.01)
        future_1.set_result(small_store.query(params_1))
        await mount
        await orchestrator.wait_until_idle()
        orchestrator.teardown()

    asyncio.run(scenario())

    state = query_state.state.value
    assert state.result.page_number == 2
    assert state.params.page_number == 2


def test_teardown_cancels_pending_timer(
    orchestrator_factory, recording_query
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        orchestrator.on_page_change(2)
        orchestrator.teardown()
        await asyncio.sleep(DEBOUNCE_S * 2)
        assert orchestrator.phase == ReloadPhase.IDLE

    asyncio.run(scenario())
    assert len(recording_query.calls) == 1


def test_teardown_cancels_in_flight_reload(orchestrator_factory, query_state) -> None:
    query = ManualQuery()
    orchestrator = orchestrator_factory(query)

    async def scenario():
        mount = asyncio.create_task(orchestrator.mount())
        await asyncio.sleep(0.01)
        assert query_state.state.value.is_loading is True

        orchestrator.teardown()
        with pytest.raises(asyncio.CancelledError):
            await mount
        assert orchestrator.phase == ReloadPhase.IDLE

    asyncio.run(scenario())
    assert query_state.state.value.is_loading is False
    assert not orchestrator.is_mounted


def test_changes_after_teardown_do_not_fetch(
    orchestrator_factory, recording_query
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        orchestrator.teardown()
        orchestrator.on_page_change(4)
        await asyncio.sleep(DEBOUNCE_S * 2)

    asyncio.run(scenario())
    assert len(recording_query.calls) == 1


def test_selection_never_fetches(
    orchestrator_factory, recording_query, selection, query_state
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        first_id = query_state.state.value.records[0].id
        orchestrator.on_row_click(first_id)
        assert selection.selected_id.value == first_id

        orchestrator.on_marker_click("REC-0002")
        assert selection.selected_id.value == "REC-0002"

        await asyncio.sleep(DEBOUNCE_S * 2)
        assert orchestrator.phase == ReloadPhase.IDLE
        orchestrator.teardown()

    asyncio.run(scenario())
    assert len(recording_query.calls) == 1


def test_sort_click_toggles_direction(
    orchestrator_factory, recording_query, query_state
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    orchestrator.on_sort_click("project_name")
    assert query_state.params.sort.direction == SortDirection.DESC
    orchestrator.on_sort_click("project_name")
    assert query_state.params.sort.direction == SortDirection.ASC
    orchestrator.on_sort_click("budget")
    assert query_state.params.sort.field == "budget"
    assert query_state.params.sort.direction == SortDirection.ASC


def test_filter_change_merges_with_current_filters(
    orchestrator_factory, recording_query, query_state
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    orchestrator.on_filter_change(status="Pending")
    orchestrator.on_filter_change(project_name="metro")
    filters = query_state.params.filters
    assert filters.status == "Pending"
    assert filters.project_name == "metro"


def test_selection_kept_when_record_leaves_page_by_default(
    orchestrator_factory, recording_query, selection
) -> None:
    orchestrator = orchestrator_factory(recording_query)

    async def scenario():
        await orchestrator.mount()
        orchestrator.on_row_click("REC-0001")
        orchestrator.on_page_change(2)
        await orchestrator.wait_until_idle()
        orchestrator.teardown()

    asyncio.run(scenario())
    assert selection.selected_id.value == "REC-0001"


def test_selection_cleared_when_configured(
    orchestrator_factory, recording_query, selection
) -> None:
    orchestrator = orchestrator_factory(recording_query, clear_hidden_selection=True)

    async def scenario():
        await orchestrator.mount()
        orchestrator.on_row_click("REC-0001")
        orchestrator.on_page_change(2)
        await orchestrator.wait_until_idle()
        orchestrator.teardown()

    asyncio.run(scenario())
    assert selection.selected_id.value is None


def test_from_config(query_state, selection, recording_query) -> None:
    config = DashboardConfig(debounce_ms=120, clear_hidden_selection=True)
    orchestrator = DashboardOrchestrator.from_config(
        config, query_state, selection, recording_query
    )
    assert orchestrator.debounce_s == pytest.approx(0.12)
    assert orchestrator.clear_hidden_selection is True
    assert orchestrator.phase == ReloadPhase.IDLE


async def eventually(predicate, timeout_s: float = 2.0) -> None:
    """Poll until `predicate()` holds; state may be changed by another thread."""
    deadline = time.monotonic() + timeout_s
    while not predicate():
        assert time.monotonic() < deadline, "condition not reached in time"
        await asyncio.sleep(0.01)


class TestRunLifecycle:
    """`run` keeps the orchestrator's loop alive until teardown."""

    def test_threaded_solara_task_keeps_reloading(
        self, orchestrator_factory, recording_query, query_state
    ) -> None:
        orchestrator = orchestrator_factory(recording_query, debounce_s=0.01)
        run_task = solara.lab.task(orchestrator.run, prefer_threaded=True)

        async def scenario():
            run_task()
            await eventually(lambda: query_state.state.value.total_count == 120)
            assert orchestrator.is_mounted

            # Changed from this thread; the reload runs on the task's loop
            query_state.set_page(2)
            await eventually(lambda: query_state.state.value.result.page_number == 2)
            assert len(recording_query.calls) == 2

            orchestrator.teardown()
            await eventually(lambda: not run_task.pending)
            assert not run_task.error

            query_state.set_page(3)
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert len(recording_query.calls) == 2
        assert query_state.state.value.result.page_number == 2

    def test_teardown_from_another_thread_stops_run(
        self, orchestrator_factory, recording_query, query_state
    ) -> None:
        orchestrator = orchestrator_factory(recording_query, debounce_s=0.01)
        worker = threading.Thread(target=asyncio.run, args=(orchestrator.run(),))
        worker.start()

        async def scenario():
            await eventually(lambda: query_state.state.value.total_count == 120)
            query_state.set_filter({"project_name": "0001", "status": "All"})
            await eventually(lambda: query_state.state.value.total_count == 1)
            orchestrator.teardown()

        asyncio.run(scenario())
        worker.join(timeout=2.0)
        assert not worker.is_alive()
        assert not orchestrator.is_mounted
        assert len(recording_query.calls) == 2

    def test_cancelling_run_tears_down(
        self, orchestrator_factory, recording_query
    ) -> None:
        orchestrator = orchestrator_factory(recording_query)

        async def scenario():
            run = asyncio.create_task(orchestrator.run())
            await asyncio.sleep(0.01)
            assert orchestrator.is_mounted
            orchestrator.on_page_change(2)
            assert orchestrator.phase == ReloadPhase.SCHEDULED

            run.cancel()
            with pytest.raises(asyncio.CancelledError):
                await run
            assert orchestrator.phase == ReloadPhase.IDLE

        asyncio.run(scenario())
        assert not orchestrator.is_mounted
        assert len(recording_query.calls) == 1

    def test_teardown_on_own_loop_ends_run(
        self, orchestrator_factory, recording_query
    ) -> None:
        orchestrator = orchestrator_factory(recording_query)

        async def scenario():
            run = asyncio.create_task(orchestrator.run())
            await asyncio.sleep(0.01)
            orchestrator.teardown()
            await asyncio.wait_for(run, timeout=1.0)

        asyncio.run(scenario())
        assert not orchestrator.is_mounted

    def test_second_run_returns_while_mounted(
        self, orchestrator_factory, recording_query
    ) -> None:
        orchestrator = orchestrator_factory(recording_query)

        async def scenario():
            run = asyncio.create_task(orchestrator.run())
            await asyncio.sleep(0.01)
            await asyncio.wait_for(orchestrator.run(), timeout=1.0)
            assert orchestrator.is_mounted
            orchestrator.teardown()
            await run

        asyncio.run(scenario())
        assert len(recording_query.calls) == 1

    def test_change_after_loop_closed_is_logged_not_raised(
        self, orchestrator_factory, recording_query, query_state, caplog
    ) -> None:
        orchestrator = orchestrator_factory(recording_query)
        # mount() alone on a loop that closes right after
        worker = threading.Thread(target=asyncio.run, args=(orchestrator.mount(),))
        worker.start()
        worker.join(timeout=2.0)

        with caplog.at_level(logging.ERROR):
            query_state.set_page(2)

        assert "Event loop closed" in caplog.text
        assert not orchestrator.is_mounted
        assert len(recording_query.calls) == 1
