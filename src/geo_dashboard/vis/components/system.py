import logging

import solara
import solara.lab
from xlsxwriter.exceptions import FileCreateError

from geo_dashboard.services.export import export_page_to_excel
from geo_dashboard.services.orchestrator import DashboardOrchestrator
from geo_dashboard.services.query_state import QueryStateManager

logger = logging.getLogger(__name__)


@solara.component
def DashboardController(orchestrator: DashboardOrchestrator):
    """Invisible component that owns the orchestrator's lifecycle.

    Mounting loads the first page immediately; unmounting cancels any
    pending debounce timer and in-flight reload.
    """
    # The threaded task's loop closes when its coroutine returns, so run()
    # holds it open until teardown. raise_error=False: a failed first load
    # surfaces via query state.
    solara.lab.use_task(
        orchestrator.run, dependencies=[orchestrator], raise_error=False
    )

    def cleanup():
        return orchestrator.teardown

    solara.use_effect(cleanup, [orchestrator])
    return solara.Div(style="display: none;")


@solara.component
def ExportButton(query_state: QueryStateManager):
    """Export the page currently shown to Excel."""
    status, set_status = solara.use_state(None)

    def export_excel():
        state = query_state.state.value
        try:
            output_path = export_page_to_excel(state.params, state.result)
        except (OSError, FileCreateError) as e:
            logger.error(f"Export failed: {e}")
            set_status(f"Export failed: {e}")
            return
        set_status(f"Exported to {output_path}")

    with solara.Row(style="align-items: center; gap: 8px;"):
        with solara.Tooltip("Export page to Excel"):
            solara.Button(
                icon_name="mdi-file-excel",
                on_click=export_excel,
                icon=True,
                small=True,
                disabled=query_state.state.value.is_loading,
            )
        if status:
            solara.Text(status, style="font-size: 0.8rem; color: #666;")
