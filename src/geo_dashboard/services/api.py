"""Mock record API.

Wraps a RecordStore behind the asynchronous query contract the dashboard
consumes, with simulated network latency and optional failure injection.
"""

import asyncio
import logging
import random
from collections.abc import Awaitable
from typing import Protocol

from pydantic import ValidationError

from geo_dashboard.core.generator import generate_mock_records
from geo_dashboard.core.store import RecordStore
from geo_dashboard.exceptions import InvalidQueryParameterError, RecordQueryError
from geo_dashboard.schemas import (
    DashboardConfig,
    FilterState,
    GeoRecord,
    PageResult,
    QueryParams,
    SortDirection,
    SortState,
)
from geo_dashboard.schemas.defaults import (
    DEFAULT_API_LATENCY_MS,
    DEFAULT_LOOKUP_LATENCY_MS,
    DEFAULT_SORT_FIELD,
)

logger = logging.getLogger(__name__)


class RecordQuery(Protocol):
    """Asynchronous paged/sorted/filtered record query."""

    def __call__(
        self,
        page_number: int,
        page_size: int,
        sort_field: str,
        sort_direction: SortDirection | str,
        filters: FilterState | None,
    ) -> Awaitable[PageResult]: ...


class MockRecordApi:
    """In-memory record source with network-like behavior."""

    def __init__(
        self,
        store: RecordStore,
        latency_s: float = DEFAULT_API_LATENCY_MS / 1000.0,
        lookup_latency_s: float = DEFAULT_LOOKUP_LATENCY_MS / 1000.0,
        failure_rate: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.latency_s = latency_s
        self.lookup_latency_s = lookup_latency_s
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "MockRecordApi":
        records = generate_mock_records(config.record_count, seed=config.seed)
        logger.info(f"Generated {len(records)} mock records (seed={config.seed})")
        return cls(
            RecordStore(records),
            latency_s=config.api_latency_s,
            lookup_latency_s=config.lookup_latency_s,
            failure_rate=config.failure_rate,
            rng=random.Random(config.seed),
        )

    async def fetch_projects(
        self,
        page_number: int,
        page_size: int,
        sort_field: str = DEFAULT_SORT_FIELD,
        sort_direction: SortDirection | str = SortDirection.ASC,
        filters: FilterState | None = None,
    ) -> PageResult:
        """Answer one page query after the simulated latency.

        Raises:
            InvalidQueryParameterError: If the parameters do not validate.
            RecordQueryError: When a simulated network failure is injected.
        """
        try:
            params = QueryParams(
                page_number=page_number,
                page_size=page_size,
                sort=SortState(field=sort_field, direction=sort_direction),
                filters=filters or FilterState(),
            )
        except ValidationError as e:
            raise InvalidQueryParameterError(f"Invalid query: {e}") from e

        await asyncio.sleep(self.latency_s)

        if self.failure_rate and self._rng.random() < self.failure_rate:
            raise RecordQueryError("Failed to load data: simulated network error")

        return self.store.query(params)

    async def get_project_by_id(self, record_id: str) -> GeoRecord | None:
        await asyncio.sleep(self.lookup_latency_s)
        return self.store.get(record_id)
