"""Visualization constants - colors, marker sizes, CSS tokens."""

from geo_dashboard.schemas.records import ProjectStatus

COLOR_PRIMARY = "#1976D2"
COLOR_SUCCESS = "#4CAF50"
COLOR_INFO = "#2196F3"
COLOR_WARNING = "#FF9800"
COLOR_ERROR = "#F44336"
COLOR_UNKNOWN = "#9E9E9E"
COLOR_PANEL_BG = "#F5F5F5"
COLOR_SELECTED_ROW_BG = "#FFF3E0"

# Status palette shared by table chips, map markers and the status chart
STATUS_COLORS = {
    ProjectStatus.ACTIVE.value: COLOR_SUCCESS,
    ProjectStatus.COMPLETED.value: COLOR_INFO,
    ProjectStatus.PENDING.value: COLOR_WARNING,
    ProjectStatus.ON_HOLD.value: COLOR_ERROR,
}

# Map markers
MARKER_SIZE = 12
SELECTED_MARKER_SIZE = 22
SELECTED_MARKER_COLOR = COLOR_WARNING
MAP_STYLE = "open-street-map"
MAP_HEIGHT_PX = 560
