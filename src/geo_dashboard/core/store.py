"""In-memory record store answering paged, sorted and filtered queries.

The store is synchronous and pure; latency and failure simulation live in
`geo_dashboard.services.api`.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from geo_dashboard.schemas.defaults import STATUS_ALL
from geo_dashboard.schemas.query import (
    FilterState,
    PageResult,
    QueryParams,
    SortDirection,
    SortState,
)
from geo_dashboard.schemas.records import GeoRecord


def collation_key(value):
    """Ordering key for a single field value.

    Strings collate case-insensitively with the raw string as tie-breaker,
    so distinct strings always have a strict order. Enums sort by their
    display value; numbers and dates compare natively.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return (value.casefold(), value)
    return value


def matches(record: GeoRecord, filters: FilterState) -> bool:
    """Whether a record passes the name substring and status filters."""
    if filters.project_name:
        if filters.project_name.casefold() not in record.project_name.casefold():
            return False
    if filters.status != STATUS_ALL and record.status.value != filters.status:
        return False
    return True


def sort_records(records: Iterable[GeoRecord], sort: SortState) -> list[GeoRecord]:
    """Sort records by one field.

    Records missing the field (optional attributes) go last in both directions.
    """
    present = []
    missing = []
    for record in records:
        if getattr(record, sort.field) is None:
            missing.append(record)
        else:
            present.append(record)

    present.sort(
        key=lambda r: collation_key(getattr(r, sort.field)),
        reverse=sort.direction == SortDirection.DESC,
    )
    return present + missing


class RecordStore:
    """Holds the full record set."""

    def __init__(self, records: Sequence[GeoRecord]) -> None:
        self._records = list(records)
        self._by_id = {r.id: r for r in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError("Record ids must be unique")

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> GeoRecord | None:
        return self._by_id.get(record_id)

    def filter(self, filters: FilterState) -> list[GeoRecord]:
        return [r for r in self._records if matches(r, filters)]

    def query(self, params: QueryParams) -> PageResult:
        """Filter, sort, then slice one page.

        Pages past the end are empty rather than an error.
        """
        filtered = sort_records(self.filter(params.filters), params.sort)
        start = (params.page_number - 1) * params.page_size
        page = filtered[start : start + params.page_size]

        return PageResult(
            records=tuple(page),
            page_number=params.page_number,
            page_size=params.page_size,
            total_count=len(filtered),
        )
