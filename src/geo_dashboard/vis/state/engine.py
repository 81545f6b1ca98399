"""Singleton record API shared by every dashboard session.

The store behind it is read-only, so one instance serves all sessions.
"""

from geo_dashboard.services.api import MockRecordApi
from geo_dashboard.vis.state.config import dashboard_config

# Singleton instance
api = MockRecordApi.from_config(dashboard_config)
