"""Centralized summary calculations for a page of records.

Pure functions shared by the dashboard cards, the status chart and the
Excel export, so every surface reports the same numbers.
"""

from collections.abc import Sequence

from geo_dashboard.schemas.records import GeoRecord, ProjectStatus


def calculate_status_breakdown(records: Sequence[GeoRecord]) -> dict[str, int]:
    """Count records per status, in ProjectStatus order (zeros included)."""
    counts = {status.value: 0 for status in ProjectStatus}
    for record in records:
        counts[record.status.value] += 1
    return counts


def calculate_average_progress(records: Sequence[GeoRecord]) -> float | None:
    """Mean progress over records that report one, or None if none do."""
    values = [r.progress for r in records if r.progress is not None]
    if not values:
        return None
    return sum(values) / len(values)


def calculate_total_budget(records: Sequence[GeoRecord]) -> float:
    return sum(r.budget for r in records if r.budget is not None)
