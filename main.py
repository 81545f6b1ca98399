"""Headless walkthrough of the Geo Dashboard.

Mounts the orchestrator against the mock API without a browser, drives a
few view events and prints what the list and map would show.
"""

import argparse
import asyncio

from geo_dashboard.core.listing import build_list_view, summary_text
from geo_dashboard.core.spatial import SpatialViewModel
from geo_dashboard.logging_config import configure_logging
from geo_dashboard.services import (
    DashboardOrchestrator,
    MockRecordApi,
    QueryStateManager,
    SelectionCoordinator,
)
from geo_dashboard.services.config_manager import load_config
from geo_dashboard.services.metrics import calculate_status_breakdown


def print_page(label: str, query_state: QueryStateManager, selected_id: str | None):
    state = query_state.state.value
    params = state.params
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

    print(f"--- {label} ---")
    print(f"  Sort: {params.sort.field} {params.sort.direction.value}")
    print(f"  Filter: name={params.filters.project_name!r} status={params.filters.status}")
    if state.error:
        print(f"  Error: {state.error}")
    print(f"  {view.range_text} (page {view.page_number} of {view.total_pages})")
    for row in view.rows[:5]:
        marker = "*" if row.is_selected else " "
        print(f"  {marker} {row.record_id}  {row.record.project_name}  [{row.record.status.value}]")
    if view.message:
        print(f"  {view.message}")
    print(f"  Status on page: {calculate_status_breakdown(state.records)}")
    print(f"  {summary_text(len(state.records), state.total_count, params.page_number)}")
    print()


async def run(config_name: str | None) -> None:
    config = load_config(config_name)
    configure_logging(config.log_level, config.log_file)

    api = MockRecordApi.from_config(config)
    query_state = QueryStateManager.from_config(config)
    selection = SelectionCoordinator()
    orchestrator = DashboardOrchestrator.from_config(
        config, query_state, selection, api.fetch_projects
    )
    spatial = SpatialViewModel()

    await orchestrator.mount()
    try:
        print_page("Initial load", query_state, selection.selected_id.value)

        # Typing a search one keystroke at a time coalesces into one reload
        for prefix in ("D", "De", "Del", "Delh", "Delhi"):
            orchestrator.on_filter_change(project_name=prefix)
        orchestrator.on_filter_change(status="Active")
        await orchestrator.wait_until_idle()
        print_page("Active projects matching 'Delhi'", query_state, None)

        orchestrator.on_sort_click("last_updated")
        orchestrator.on_sort_click("last_updated")
        await orchestrator.wait_until_idle()

        records = query_state.state.value.records
        if records:
            orchestrator.on_row_click(records[0].id)
        selected_id = selection.selected_id.value
        print_page("Most recently updated first", query_state, selected_id)

        for request in spatial.update(records, selected_id):
            print(f"  Map request: {request.action.value}")
        print()

        orchestrator.on_page_change(2)
        await orchestrator.wait_until_idle()
        print_page("Page 2", query_state, selection.selected_id.value)
    finally:
        orchestrator.teardown()


def main() -> None:
    """Parse arguments and run the walkthrough."""
    parser = argparse.ArgumentParser(description="Headless Geo Dashboard run")
    parser.add_argument(
        "--config", default=None, help="Config file name in config/ or a path"
    )
    args = parser.parse_args()
    asyncio.run(run(args.config))


if __name__ == "__main__":
    main()
