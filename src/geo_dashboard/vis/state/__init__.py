"""State management package for the dashboard UI.

This package provides modular state split by concern:
- config: DashboardConfig loaded at startup
- engine: The record API shared by all sessions
- session: Query state, selection and orchestrator owned by one session
"""

from geo_dashboard.vis.state.config import dashboard_config
from geo_dashboard.vis.state.engine import api
from geo_dashboard.vis.state.session import DashboardSession, create_session

__all__ = [
    "dashboard_config",
    "api",
    "DashboardSession",
    "create_session",
]
