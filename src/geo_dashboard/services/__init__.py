"""Services package for dashboard orchestration.

This package contains:
- api.py: MockRecordApi, the asynchronous record source
- query_state.py: QueryStateManager (params, page result, loading, error)
- selection.py: SelectionCoordinator (the shared selected record)
- orchestrator.py: DashboardOrchestrator (debounced reloads, view events)
- config_manager.py: Dashboard config file loading/saving
- export.py / metrics.py: Page export and summaries
"""

from geo_dashboard.services.api import MockRecordApi, RecordQuery
from geo_dashboard.services.orchestrator import DashboardOrchestrator, ReloadPhase
from geo_dashboard.services.query_state import QueryState, QueryStateManager
from geo_dashboard.services.selection import SelectionCoordinator

__all__ = [
    "MockRecordApi",
    "RecordQuery",
    "QueryState",
    "QueryStateManager",
    "SelectionCoordinator",
    "DashboardOrchestrator",
    "ReloadPhase",
]
