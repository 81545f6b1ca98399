"""Test data factories and query doubles."""

import asyncio
from datetime import date
from typing import Any

from geo_dashboard.core.store import RecordStore
from geo_dashboard.schemas import (
    FilterState,
    GeoRecord,
    PageResult,
    ProjectStatus,
    QueryParams,
    SortState,
)


def create_record(index: int = 1, **kwargs: Any) -> GeoRecord:
    """Create a valid GeoRecord with overrideable defaults."""
    defaults = {
        "id": f"REC-{index:04d}",
        "project_name": f"Project {index:04d}",
        "latitude": 20.0 + index * 0.01,
        "longitude": 78.0 + index * 0.01,
        "status": ProjectStatus.ACTIVE,
        "last_updated": date(2025, 1, 1),
        "description": None,
        "budget": 1000.0 * index,
        "progress": index % 101,
    }
    data = {**defaults, **kwargs}
    return GeoRecord(**data)


def create_records(count: int, **kwargs: Any) -> list[GeoRecord]:
    """Create `count` records numbered from 1."""
    return [create_record(i, **kwargs) for i in range(1, count + 1)]


def create_page_result(
    records: list[GeoRecord] | tuple[GeoRecord, ...] = (),
    page_number: int = 1,
    page_size: int = 50,
    total_count: int | None = None,
) -> PageResult:
    """Create a PageResult; total_count defaults to the number of records."""
    return PageResult(
        records=tuple(records),
        page_number=page_number,
        page_size=page_size,
        total_count=len(records) if total_count is None else total_count,
    )


def _params(page_number, page_size, sort_field, sort_direction, filters):
    return QueryParams(
        page_number=page_number,
        page_size=page_size,
        sort=SortState(field=sort_field, direction=sort_direction),
        filters=filters or FilterState(),
    )


class RecordingQuery:
    """Async record query answered from a store, recording every call."""

    def __init__(self, store: RecordStore, delay_s: float = 0.0) -> None:
        self.store = store
        self.delay_s = delay_s
        self.calls: list[QueryParams] = []

    async def __call__(
        self, page_number, page_size, sort_field, sort_direction, filters
    ) -> PageResult:
        params = _params(page_number, page_size, sort_field, sort_direction, filters)
        self.calls.append(params)
        await asyncio.sleep(self.delay_s)
        return self.store.query(params)


class ManualQuery:
    """Async record query whose responses are resolved by the test."""

    def __init__(self) -> None:
        self.pending: list[tuple[QueryParams, asyncio.Future]] = []

    async def __call__(
        self, page_number, page_size, sort_field, sort_direction, filters
    ) -> PageResult:
        params = _params(page_number, page_size, sort_field, sort_direction, filters)
        future = asyncio.get_running_loop().create_future()
        self.pending.append((params, future))
        return await future
