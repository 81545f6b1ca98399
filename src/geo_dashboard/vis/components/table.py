"""Record table: filter bar, sortable headers, rows and pagination."""

import reacton.ipyvue as vue
import solara

from geo_dashboard.core.listing import ListViewModel, TableRow
from geo_dashboard.schemas.columns import TABLE_COLUMNS, ColumnNames
from geo_dashboard.schemas.defaults import STATUS_ALL
from geo_dashboard.schemas.query import SortDirection
from geo_dashboard.schemas.records import ProjectStatus
from geo_dashboard.services.orchestrator import DashboardOrchestrator
from geo_dashboard.vis.constants import COLOR_PANEL_BG, COLOR_SELECTED_ROW_BG
from geo_dashboard.vis.formatting import format_coordinate, format_date, status_color


CELL_STYLE = "padding: 6px 10px; border-bottom: 1px solid #eee; white-space: nowrap;"


@solara.component
def FilterBar(project_name: str, status: str, orchestrator: DashboardOrchestrator):
    """Name search and status dropdown. Every keystroke is forwarded; the
    orchestrator debounces the reload."""
    with solara.Row(style="gap: 12px; align-items: center;"):
        solara.InputText(
            "Search project name",
            value=project_name,
            on_value=lambda value: orchestrator.on_filter_change(project_name=value),
            continuous_update=True,
        )
        solara.Select(
            "Status",
            value=status,
            values=[STATUS_ALL] + [s.value for s in ProjectStatus],
            on_value=lambda value: orchestrator.on_filter_change(status=value),
        )


@solara.component
def SortHeader(
    field: str, label: str, view: ListViewModel, orchestrator: DashboardOrchestrator
):
    arrow = ""
    if view.sort.field == field:
        arrow = " ▲" if view.sort.direction == SortDirection.ASC else " ▼"

    with solara.v.Html(tag="th", style_=f"{CELL_STYLE} text-align: left;"):
        solara.Button(
            f"{label}{arrow}",
            on_click=lambda: orchestrator.on_sort_click(field),
            text=True,
            small=True,
        )


@solara.component
def StatusChip(status: ProjectStatus):
    solara.v.Chip(
        small=True,
        color=status_color(status),
        text_color="white",
        children=[status.value],
    )


def _cell_text(row: TableRow, field: str) -> str:
    record = row.record
    if field in (ColumnNames.LATITUDE, ColumnNames.LONGITUDE):
        return format_coordinate(getattr(record, field))
    if field == ColumnNames.LAST_UPDATED:
        return format_date(record.last_updated)
    return str(getattr(record, field))


@solara.component
def RecordRow(row: TableRow, orchestrator: DashboardOrchestrator):
    style = "cursor: pointer;"
    if row.is_selected:
        style += f" background-color: {COLOR_SELECTED_ROW_BG}; font-weight: 500;"

    with solara.v.Html(tag="tr", style_=style) as tr:
        for field in TABLE_COLUMNS:
            if field == ColumnNames.STATUS:
                with solara.v.Html(tag="td", style_=CELL_STYLE):
                    StatusChip(row.record.status)
            else:
                solara.v.Html(
                    tag="td", style_=CELL_STYLE, children=[_cell_text(row, field)]
                )

    vue.use_event(
        tr, "click", lambda *_ignore: orchestrator.on_row_click(row.record_id)
    )
    return tr


@solara.component
def PaginationControls(
    view: ListViewModel,
    page_size_options: tuple[int, ...],
    orchestrator: DashboardOrchestrator,
):
    with solara.Row(style="gap: 12px; align-items: center; justify-content: flex-end;"):
        solara.Select(
            "Rows per page",
            value=view.page_size,
            values=list(page_size_options),
            on_value=orchestrator.on_page_size_change,
            style="max-width: 140px;",
        )
        solara.Text(view.range_text)
        solara.Button(
            icon_name="mdi-chevron-left",
            icon=True,
            disabled=view.page_number <= 1 or view.is_loading,
            on_click=lambda: orchestrator.on_page_change(view.page_number - 1),
        )
        solara.Text(f"Page {view.page_number} of {view.total_pages}")
        solara.Button(
            icon_name="mdi-chevron-right",
            icon=True,
            disabled=view.page_number >= view.total_pages or view.is_loading,
            on_click=lambda: orchestrator.on_page_change(view.page_number + 1),
        )


@solara.component
def RecordTable(
    view: ListViewModel,
    page_size_options: tuple[int, ...],
    orchestrator: DashboardOrchestrator,
):
    """The list view: one row per record on the current page."""
    with solara.Card(style="padding: 8px;"):
        FilterBar(view.filters.project_name, view.filters.status, orchestrator)

        # Reserve the bar's height so the table doesn't jump
        solara.ProgressLinear(value=view.is_loading)

        with solara.Div(style="max-height: 560px; overflow-y: auto;"):
            with solara.v.Html(
                tag="table",
                style_="width: 100%; border-collapse: collapse; font-size: 0.9rem;",
            ):
                with solara.v.Html(
                    tag="thead", style_=f"background-color: {COLOR_PANEL_BG};"
                ):
                    with solara.v.Html(tag="tr"):
                        for field, label in TABLE_COLUMNS.items():
                            SortHeader(field, label, view, orchestrator)
                with solara.v.Html(tag="tbody"):
                    for row in view.rows:
                        RecordRow(row, orchestrator).key(row.record_id)

        if view.message:
            with solara.Column(style="align-items: center; padding: 24px; color: #888;"):
                solara.Markdown(f"_{view.message}_")

        PaginationControls(view, page_size_options, orchestrator)
