"""Dashboard orchestrator - wires query state and selection to the views.

Reload cycle:

    Idle -> Scheduled (debounce timer pending) -> InFlight (query issued) -> Idle

The first load on mount skips the debounce. A parameter change while
Scheduled restarts the timer; a change while InFlight schedules a fresh
cycle and the query state's stale-response guard keeps only the newest
result. Selection changes never trigger a fetch.
"""

import asyncio
import logging
from enum import Enum

from geo_dashboard.core.listing import toggle_sort
from geo_dashboard.core.spatial import index_by_id
from geo_dashboard.schemas import DashboardConfig, QueryParams
from geo_dashboard.schemas.defaults import DEFAULT_DEBOUNCE_MS
from geo_dashboard.services.api import RecordQuery
from geo_dashboard.services.query_state import QueryStateManager
from geo_dashboard.services.selection import SelectionCoordinator

logger = logging.getLogger(__name__)


class ReloadPhase(str, Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    IN_FLIGHT = "in_flight"


class DashboardOrchestrator:
    """Schedules debounced reloads and routes view events.

    The orchestrator binds to the event loop it is mounted on. Parameter
    changes made from other threads (widget callbacks) are handed to that
    loop before touching the timer.
    """

    def __init__(
        self,
        query_state: QueryStateManager,
        selection: SelectionCoordinator,
        query_fn: RecordQuery,
        debounce_s: float = DEFAULT_DEBOUNCE_MS / 1000.0,
        clear_hidden_selection: bool = False,
    ) -> None:
        """Initialize the orchestrator with its collaborators.

        Args:
            query_state: Owner of params, page result, loading and error.
            selection: Shared selected-record holder.
            query_fn: Async record query used for every reload.
            debounce_s: Quiet period after the last parameter change.
            clear_hidden_selection: Clear the selection when an applied
                reload no longer contains the selected record.
        """
        self.query_state = query_state
        self.selection = selection
        self.query_fn = query_fn
        self.debounce_s = debounce_s
        self.clear_hidden_selection = clear_hidden_selection

        self._loop: asyncio.AbstractEventLoop | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._in_flight: set[asyncio.Task] = set()
        self._stopped: asyncio.Event | None = None
        self._unsubscribe = None
        self._mounted = False

    @classmethod
    def from_config(
        cls,
        config: DashboardConfig,
        query_state: QueryStateManager,
        selection: SelectionCoordinator,
        query_fn: RecordQuery,
    ) -> "DashboardOrchestrator":
        return cls(
            query_state,
            selection,
            query_fn,
            debounce_s=config.debounce_s,
            clear_hidden_selection=config.clear_hidden_selection,
        )

    @property
    def phase(self) -> ReloadPhase:
        if self._timer is not None:
            return ReloadPhase.SCHEDULED
        if any(not task.done() for task in self._in_flight):
            return ReloadPhase.IN_FLIGHT
        return ReloadPhase.IDLE

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    # --- Lifecycle ---

    async def mount(self) -> bool:
        """Start listening for parameter changes and load the first page now.

        The orchestrator binds to the running loop; later reloads are
        scheduled on it, so it must outlive the mount. Use `run` when the
        loop only lives as long as the awaited coroutine.

        Returns:
            False if already mounted.
        """
        if self._mounted:
            logger.warning("Orchestrator already mounted")
            return False

        self._loop = asyncio.get_running_loop()
        self._stopped = asyncio.Event()
        self._mounted = True
        self._unsubscribe = self.query_state.subscribe(self._on_params_changed)
        logger.info("Dashboard mounted; loading first page")

        await self._start_reload()
        return True

    async def run(self) -> None:
        """Mount, then keep serving reloads on this loop until teardown.

        Solara runs coroutine tasks on a per-task event loop that is closed
        when the coroutine returns; awaiting this keeps that loop alive for
        the lifetime of the dashboard. Cancelling it tears down.
        """
        if not await self.mount():
            return
        try:
            await self._stopped.wait()
        finally:
            self.teardown()

    def teardown(self) -> None:
        """Stop listening, cancel the pending timer and in-flight reloads.

        Safe to call from any thread; the cancellation itself runs on the
        orchestrator's loop.
        """
        if not self._mounted:
            return
        self._mounted = False

        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

        if self._on_own_loop():
            self._cancel_pending()
        elif self._loop is not None and not self._loop.is_closed():
            self._loop.call_soon_threadsafe(self._cancel_pending)

        logger.info("Dashboard torn down")

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        for task in list(self._in_flight):
            task.cancel()

        if self._stopped is not None:
            self._stopped.set()

    async def wait_until_idle(self, poll_s: float = 0.005) -> None:
        """Wait until no timer is pending and no reload is in flight."""
        while self.phase != ReloadPhase.IDLE:
            pending = [task for task in self._in_flight if not task.done()]
            if self._timer is None and pending:
                await asyncio.gather(*pending, return_exceptions=True)
            else:
                await asyncio.sleep(poll_s)

    # --- Scheduling ---

    def _on_own_loop(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def _on_params_changed(self, params: QueryParams) -> None:
        if not self._mounted or self._loop is None:
            return

        if self._on_own_loop():
            self._schedule()
        elif self._loop.is_closed():
            logger.error(
                "Event loop closed while mounted; parameter change will not reload"
            )
            self._mounted = False
        else:
            self._loop.call_soon_threadsafe(self._schedule)

    def _schedule(self) -> None:
        if not self._mounted:
            return
        if self._timer is not None:
            self._timer.cancel()
            logger.debug("Parameters changed again; restarting debounce timer")
        self._timer = self._loop.call_later(self.debounce_s, self._fire)

    def _fire(self) -> None:
        self._timer = None
        if not self._mounted:
            return
        logger.debug("Debounce window elapsed; reloading")
        self._start_reload()

    def _start_reload(self) -> asyncio.Task:
        task = self._loop.create_task(self._run_reload())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _run_reload(self) -> None:
        applied = await self.query_state.reload(self.query_fn)
        if applied and self.clear_hidden_selection:
            self._drop_hidden_selection()

    def _drop_hidden_selection(self) -> None:
        selected_id = self.selection.selected_id.value
        if selected_id is None:
            return
        if selected_id not in index_by_id(self.query_state.state.value.records):
            logger.debug(f"Selected record {selected_id} left the page; clearing")
            self.selection.clear()

    # --- List view events ---

    def on_page_change(self, page_number: int) -> None:
        self.query_state.set_page(page_number)

    def on_page_size_change(self, page_size: int) -> None:
        self.query_state.set_page_size(page_size)

    def on_sort_click(self, field: str) -> None:
        sort = toggle_sort(self.query_state.params.sort, field)
        self.query_state.set_sort(sort.field, sort.direction)

    def on_filter_change(
        self, project_name: str | None = None, status: str | None = None
    ) -> None:
        """Merge changed filter values into the current filter state."""
        current = self.query_state.params.filters
        self.query_state.set_filter(
            {
                "project_name": current.project_name
                if project_name is None
                else project_name,
                "status": current.status if status is None else status,
            }
        )

    def on_row_click(self, record_id: str) -> None:
        self.selection.select(record_id)

    # --- Spatial view events ---

    def on_marker_click(self, record_id: str) -> None:
        self.selection.select(record_id)
