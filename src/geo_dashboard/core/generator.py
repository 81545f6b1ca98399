"""Mock project generator.

Produces projects spread across Indian city regions, each with coordinates
inside its region's bounding box.
"""

import random
from datetime import date, timedelta

from geo_dashboard.schemas.defaults import (
    BUDGET_MIN,
    BUDGET_SPAN,
    LAST_UPDATED_WINDOW_DAYS,
    MOCK_INDUSTRIES,
    MOCK_REGIONS,
)
from geo_dashboard.schemas.records import GeoRecord, ProjectStatus


def make_record_id(index: int) -> str:
    """Stable id for the index-th generated record (0-based)."""
    return f"IND-{index + 1:06d}"


def generate_mock_records(
    count: int, seed: int | None = None, today: date | None = None
) -> list[GeoRecord]:
    """Generate `count` projects.

    Args:
        count: Number of records.
        seed: Seed for reproducible output (None = random).
        today: Reference date for `last_updated` (defaults to today).

    Returns:
        Records in id order.
    """
    rng = random.Random(seed)
    today = today or date.today()
    statuses = list(ProjectStatus)

    records = []
    for i in range(count):
        region, city, lat_range, lon_range = rng.choice(MOCK_REGIONS)
        industry = rng.choice(MOCK_INDUSTRIES)
        lat = lat_range[0] + rng.random() * (lat_range[1] - lat_range[0])
        lon = lon_range[0] + rng.random() * (lon_range[1] - lon_range[0])

        records.append(
            GeoRecord(
                id=make_record_id(i),
                project_name=f"{city} {industry} Project {i + 1}",
                latitude=round(lat, 6),
                longitude=round(lon, 6),
                status=rng.choice(statuses),
                last_updated=today
                - timedelta(days=rng.randrange(LAST_UPDATED_WINDOW_DAYS)),
                description=f"Strategic project in {city}, {region} India",
                budget=float(rng.randrange(BUDGET_SPAN) + BUDGET_MIN),
                progress=rng.randrange(100),
            )
        )
    return records
