"""
Top-level package for the geo project dashboard.

Most code should import from submodules such as:
    geo_dashboard.schemas
    geo_dashboard.services
    geo_dashboard.vis
"""

__all__: list[str] = []
