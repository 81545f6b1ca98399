"""Root page for the Solara application.

Logic is distributed across `vis/components` and `vis/state`. Each browser
session gets its own query state, selection and orchestrator.
"""

import solara

from geo_dashboard.core.listing import build_list_view, summary_text
from geo_dashboard.logging_config import configure_logging
from geo_dashboard.vis.components import (
    DashboardController,
    ExportButton,
    PageMetrics,
    RecordTable,
    SpatialView,
    StatusBreakdownChart,
)
from geo_dashboard.vis.state import create_session, dashboard_config

# --- Logging Configuration ---
configure_logging(dashboard_config.log_level, dashboard_config.log_file)


@solara.component
def Page():
    session = solara.use_memo(create_session, dependencies=[])
    query_state = session.query_state
    orchestrator = session.orchestrator

    # Mount the controller (first load, debounced reloads, teardown)
    DashboardController(orchestrator)

    state = query_state.state.value
    params = state.params
    selected_id = session.selection.selected_id.value
    view = build_list_view(
        state.records,
        is_loading=state.is_loading,
        page_number=params.page_number,
        page_size=params.page_size,
        total_count=state.total_count,
        sort=params.sort,
        filters=params.filters,
        selected_id=selected_id,
    )

    with solara.Column(style="padding: 16px; gap: 12px;"):
        solara.Title(dashboard_config.title)

        with solara.Row(style="align-items: center; justify-content: space-between;"):
            solara.Markdown(f"## Projects ({state.total_count:,} total)")
            ExportButton(query_state)

        if state.error:
            solara.Error(state.error)

        PageMetrics(state.records, state.total_count)

        with solara.Columns([3, 2]):
            with solara.Column():
                RecordTable(view, query_state.page_size_options, orchestrator)
            with solara.Column():
                SpatialView(state.records, selected_id, orchestrator)
                solara.Text(
                    f"Selected: {selected_id}" if selected_id else "No project selected",
                    style="font-size: 0.85rem; color: #666;",
                )
                with solara.Card("Status on this page"):
                    StatusBreakdownChart(state.records)

        solara.Text(
            summary_text(len(state.records), state.total_count, params.page_number),
            style="color: #666;",
        )
