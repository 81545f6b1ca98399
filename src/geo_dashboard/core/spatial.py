"""Spatial view model: markers, bounds and viewport requests for the map.

Everything here is derived from the current page and the selected id. The
map never keeps its own registry of markers; `index_by_id` is recomputed
whenever a lookup is needed.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from geo_dashboard.schemas.defaults import (
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
    MAX_FIT_ZOOM,
)
from geo_dashboard.schemas.records import GeoRecord, ProjectStatus


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned lat/lon box."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> tuple[float, float]:
        return (
            (self.min_lat + self.max_lat) / 2.0,
            (self.min_lon + self.max_lon) / 2.0,
        )

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon


@dataclass(frozen=True)
class Marker:
    record_id: str
    latitude: float
    longitude: float
    status: ProjectStatus
    label: str
    is_selected: bool


class ViewportAction(str, Enum):
    FIT_BOUNDS = "fit_bounds"
    CENTER = "center"


@dataclass(frozen=True)
class ViewportRequest:
    action: ViewportAction
    bounds: Bounds | None = None
    center: tuple[float, float] | None = None


@dataclass(frozen=True)
class MapViewport:
    center: tuple[float, float] = DEFAULT_MAP_CENTER
    zoom: float = DEFAULT_MAP_ZOOM


def index_by_id(records: Sequence[GeoRecord]) -> dict[str, GeoRecord]:
    return {r.id: r for r in records}


def compute_bounds(records: Sequence[GeoRecord]) -> Bounds | None:
    """Bounding box of all records, or None for an empty page."""
    if not records:
        return None
    lats = [r.latitude for r in records]
    lons = [r.longitude for r in records]
    return Bounds(
        min_lat=min(lats), min_lon=min(lons), max_lat=max(lats), max_lon=max(lons)
    )


def zoom_for_bounds(
    bounds: Bounds, padding: float = 1.25, max_zoom: float = MAX_FIT_ZOOM
) -> float:
    """Web-mercator zoom level that fits `bounds` with some padding."""
    span = max(bounds.lat_span, bounds.lon_span) * padding
    if span <= 0:
        return max_zoom
    return max(0.0, min(max_zoom, math.log2(360.0 / span)))


def build_markers(
    records: Sequence[GeoRecord], selected_id: str | None
) -> list[Marker]:
    """One marker per record, in page order."""
    return [
        Marker(
            record_id=r.id,
            latitude=r.latitude,
            longitude=r.longitude,
            status=r.status,
            label=r.project_name,
            is_selected=r.id == selected_id,
        )
        for r in records
    ]


def apply_viewport_request(
    viewport: MapViewport, request: ViewportRequest
) -> MapViewport:
    """Resolve a request into the next viewport.

    Fitting changes center and zoom; centering on a record keeps the zoom.
    """
    if request.action == ViewportAction.FIT_BOUNDS and request.bounds is not None:
        return MapViewport(
            center=request.bounds.center, zoom=zoom_for_bounds(request.bounds)
        )
    if request.action == ViewportAction.CENTER and request.center is not None:
        return replace(viewport, center=request.center)
    return viewport


class SpatialViewModel:
    """Tracks the last record set and selection the map rendered.

    `update` returns the viewport requests implied by what changed:
    a fit when the record set changed (and is non-empty), a recenter when
    the selection changed to a record present on the page.
    """

    def __init__(self) -> None:
        self._record_ids: tuple[str, ...] | None = None
        self._selected_id: str | None = None

    def update(
        self, records: Sequence[GeoRecord], selected_id: str | None
    ) -> list[ViewportRequest]:
        requests = []

        record_ids = tuple(r.id for r in records)
        if record_ids != self._record_ids:
            self._record_ids = record_ids
            bounds = compute_bounds(records)
            if bounds is not None:
                requests.append(
                    ViewportRequest(action=ViewportAction.FIT_BOUNDS, bounds=bounds)
                )

        if selected_id != self._selected_id:
            self._selected_id = selected_id
            record = index_by_id(records).get(selected_id) if selected_id else None
            if record is not None:
                requests.append(
                    ViewportRequest(
                        action=ViewportAction.CENTER,
                        center=(record.latitude, record.longitude),
                    )
                )

        return requests
