"""Per-session dashboard state.

Each browser session owns its query state, selection and orchestrator, so
one tab mounting or unmounting never affects another. Components receive
the session as a prop; the page creates it once with `solara.use_memo`.
"""

from dataclasses import dataclass

from geo_dashboard.schemas import DashboardConfig
from geo_dashboard.services.api import RecordQuery
from geo_dashboard.services.orchestrator import DashboardOrchestrator
from geo_dashboard.services.query_state import QueryStateManager
from geo_dashboard.services.selection import SelectionCoordinator
from geo_dashboard.vis.state.config import dashboard_config
from geo_dashboard.vis.state.engine import api


@dataclass(frozen=True)
class DashboardSession:
    query_state: QueryStateManager
    selection: SelectionCoordinator
    orchestrator: DashboardOrchestrator


def create_session(
    config: DashboardConfig | None = None, query_fn: RecordQuery | None = None
) -> DashboardSession:
    """Build a fresh session wired to the shared API (or `query_fn`)."""
    config = config or dashboard_config
    query_state = QueryStateManager.from_config(config)
    selection = SelectionCoordinator()
    orchestrator = DashboardOrchestrator.from_config(
        config, query_state, selection, query_fn or api.fetch_projects
    )
    return DashboardSession(query_state, selection, orchestrator)
