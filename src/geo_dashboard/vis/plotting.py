"""Figure builders shared by the dashboard components and exports.

The map uses Plotly (click events, tile basemap); the status breakdown uses
matplotlib like the rest of the charts.
"""

from collections.abc import Mapping, Sequence

import matplotlib
import plotly.graph_objects as go
from matplotlib.figure import Figure

from geo_dashboard.core.spatial import MapViewport, Marker
from geo_dashboard.vis.constants import (
    MAP_HEIGHT_PX,
    MAP_STYLE,
    MARKER_SIZE,
    SELECTED_MARKER_COLOR,
    SELECTED_MARKER_SIZE,
)
from geo_dashboard.vis.formatting import format_coordinate, status_color

# Ensure non-interactive backend for thread safety in Solara/Exports
matplotlib.use("Agg")


def build_map_figure(markers: Sequence[Marker], viewport: MapViewport) -> go.Figure:
    """Single-trace scatter map; point i is markers[i].

    The selected marker is drawn larger and in the highlight color.
    `uirevision` follows the viewport so user panning survives re-renders
    until the next fit or recenter.
    """
    lats = [m.latitude for m in markers]
    lons = [m.longitude for m in markers]
    sizes = [SELECTED_MARKER_SIZE if m.is_selected else MARKER_SIZE for m in markers]
    colors = [
        SELECTED_MARKER_COLOR if m.is_selected else status_color(m.status)
        for m in markers
    ]
    hover = [
        f"<b>{m.label}</b><br>{m.record_id} · {m.status.value}"
        f"<br>{format_coordinate(m.latitude)}, {format_coordinate(m.longitude)}"
        for m in markers
    ]

    fig = go.Figure(
        go.Scattermap(
            lat=lats,
            lon=lons,
            mode="markers",
            marker=dict(size=sizes, color=colors, opacity=0.9),
            text=hover,
            hoverinfo="text",
        )
    )

    lat, lon = viewport.center
    fig.update_layout(
        map=dict(style=MAP_STYLE, center=dict(lat=lat, lon=lon), zoom=viewport.zoom),
        margin=dict(l=0, r=0, t=0, b=0),
        height=MAP_HEIGHT_PX,
        showlegend=False,
        uirevision=f"{lat:.6f},{lon:.6f},{viewport.zoom:.3f}",
    )
    return fig


def marker_id_from_click(markers: Sequence[Marker], data: Mapping | None) -> str | None:
    """Record id of the clicked point in a FigurePlotly click payload."""
    if not data:
        return None
    point_indexes = (data.get("points") or {}).get("point_indexes") or []
    if not point_indexes:
        return None
    index = point_indexes[0]
    if not 0 <= index < len(markers):
        return None
    return markers[index].record_id


def plot_status_breakdown(breakdown: Mapping[str, int]) -> Figure:
    """Horizontal bar chart of records per status."""
    fig = Figure(figsize=(5, 2.6), dpi=100)
    ax = fig.subplots()

    labels = list(breakdown.keys())
    counts = list(breakdown.values())
    bars = ax.barh(
        labels,
        counts,
        color=[status_color(label) for label in labels],
        alpha=0.85,
    )
    for bar, count in zip(bars, counts):
        ax.text(
            bar.get_width(),
            bar.get_y() + bar.get_height() / 2,
            f" {count}",
            va="center",
            fontsize=9,
        )

    ax.invert_yaxis()
    ax.set_xlabel("Records on page")
    ax.grid(True, alpha=0.25, axis="x", linestyle="--")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.tight_layout()
    return fig
