"""Display formatting helpers for dates, money, coordinates and statuses."""

from datetime import date

from geo_dashboard.schemas.records import ProjectStatus
from geo_dashboard.vis.constants import COLOR_UNKNOWN, STATUS_COLORS


def format_date(value: date | str) -> str:
    """Format as 'Jan 5, 2025'. Unparseable strings are returned unchanged."""
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            return value
    return f"{value:%b} {value.day}, {value.year}"


def format_currency(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"${value:,.0f}"


def format_coordinate(value: float, digits: int = 4) -> str:
    return f"{value:.{digits}f}"


def status_color(status: ProjectStatus | str) -> str:
    if isinstance(status, ProjectStatus):
        status = status.value
    return STATUS_COLORS.get(status, COLOR_UNKNOWN)
