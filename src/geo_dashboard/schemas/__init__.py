"""Schemas package.

- records.py: GeoRecord and ProjectStatus
- query.py: Query parameters, sort/filter state, PageResult
- config.py: DashboardConfig
"""

from .config import DashboardConfig
from .query import (
    FilterState,
    PageResult,
    QueryParams,
    SortDirection,
    SortState,
    expected_page_length,
)
from .records import GeoRecord, ProjectStatus

__all__ = [
    "DashboardConfig",
    "GeoRecord",
    "ProjectStatus",
    "SortDirection",
    "SortState",
    "FilterState",
    "QueryParams",
    "PageResult",
    "expected_page_length",
]
