import solara

from geo_dashboard.schemas.records import GeoRecord
from geo_dashboard.services.metrics import (
    calculate_average_progress,
    calculate_total_budget,
)
from geo_dashboard.vis.constants import COLOR_PRIMARY, COLOR_SUCCESS, COLOR_WARNING
from geo_dashboard.vis.formatting import format_currency

BORDER_COLORS = {
    "primary": COLOR_PRIMARY,
    "success": COLOR_SUCCESS,
    "warning": COLOR_WARNING,
}


@solara.component
def MetricCard(
    label: str, value: str, color_variant: str = "primary"
) -> solara.Element:
    """Display a primary metric with visual hierarchy."""
    style = "padding: 12px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); background-color: white;"
    border = f"4px solid {BORDER_COLORS.get(color_variant, COLOR_WARNING)}"

    with solara.Column(style=f"{style} border-left: {border}; margin: 4px; flex: 1;"):
        solara.HTML(
            tag="div",
            style="font-size: 0.8rem; color: #666; text-transform: uppercase; letter-spacing: 0.5px;",
            unsafe_innerHTML=label,
        )
        solara.HTML(
            tag="div",
            style="font-size: 1.6rem; font-weight: 500;",
            unsafe_innerHTML=value,
        )


@solara.component
def PageMetrics(records: tuple[GeoRecord, ...], total_count: int):
    """Matching total plus budget and progress of the records on this page."""
    avg_progress = calculate_average_progress(records)

    with solara.Row(style="gap: 8px; flex-wrap: wrap;"):
        MetricCard("Matching Projects", f"{total_count:,}")
        MetricCard(
            "Page Budget",
            format_currency(calculate_total_budget(records)),
            color_variant="success",
        )
        MetricCard(
            "Avg Progress",
            f"{avg_progress:.1f}%" if avg_progress is not None else "N/A",
            color_variant="warning",
        )
