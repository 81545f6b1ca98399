"""Expose all components from submodules for cleaner importing."""

from .cards import MetricCard, PageMetrics
from .charts import StatusBreakdownChart
from .map import SpatialView
from .system import DashboardController, ExportButton
from .table import RecordTable

__all__ = [
    "MetricCard",
    "PageMetrics",
    "StatusBreakdownChart",
    "SpatialView",
    "DashboardController",
    "ExportButton",
    "RecordTable",
]
