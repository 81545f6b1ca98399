"""Spatial view: one marker per record on the current page."""

import solara

from geo_dashboard.core.spatial import (
    MapViewport,
    SpatialViewModel,
    apply_viewport_request,
    build_markers,
)
from geo_dashboard.schemas.records import GeoRecord
from geo_dashboard.services.orchestrator import DashboardOrchestrator
from geo_dashboard.vis.plotting import build_map_figure, marker_id_from_click


@solara.component
def SpatialView(
    records: tuple[GeoRecord, ...],
    selected_id: str | None,
    orchestrator: DashboardOrchestrator,
):
    """Map of the current page.

    Fits the page's bounds when the record set changes and recenters on the
    selected record when the selection changes. Marker clicks select.
    """
    model = solara.use_memo(SpatialViewModel, dependencies=[])
    viewport, set_viewport = solara.use_state(MapViewport())

    record_ids = tuple(r.id for r in records)

    def sync_viewport():
        next_viewport = viewport
        for request in model.update(records, selected_id):
            next_viewport = apply_viewport_request(next_viewport, request)
        if next_viewport != viewport:
            set_viewport(next_viewport)

    solara.use_effect(sync_viewport, [record_ids, selected_id])

    markers = solara.use_memo(
        lambda: build_markers(records, selected_id),
        dependencies=[record_ids, selected_id],
    )

    def on_click(data):
        record_id = marker_id_from_click(markers, data)
        if record_id is not None:
            orchestrator.on_marker_click(record_id)

    with solara.Card(style="padding: 0; overflow: hidden;"):
        solara.FigurePlotly(build_map_figure(markers, viewport), on_click=on_click)
