"""Dashboard configuration loaded once per process."""

from geo_dashboard.services.config_manager import load_config

# Singleton instance
dashboard_config = load_config()
