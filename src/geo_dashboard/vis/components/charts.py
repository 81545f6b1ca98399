"""Status breakdown chart for the current page."""

import solara

from geo_dashboard.schemas.records import GeoRecord
from geo_dashboard.services.metrics import calculate_status_breakdown
from geo_dashboard.vis.plotting import plot_status_breakdown


@solara.component
def StatusBreakdownChart(records: tuple[GeoRecord, ...]):
    fig = solara.use_memo(
        lambda: plot_status_breakdown(calculate_status_breakdown(records)),
        dependencies=[tuple(r.id for r in records)],
    )

    if not records:
        solara.Markdown("No data for status chart.")
        return

    solara.FigureMatplotlib(fig)
