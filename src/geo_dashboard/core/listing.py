"""List view model: table rows, pagination text and sort toggling."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from geo_dashboard.schemas.query import FilterState, SortDirection, SortState
from geo_dashboard.schemas.records import GeoRecord

NO_RECORDS_MESSAGE = "No records found"


@dataclass(frozen=True)
class TableRow:
    record: GeoRecord
    is_selected: bool

    @property
    def record_id(self) -> str:
        return self.record.id


@dataclass(frozen=True)
class ListViewModel:
    """Everything the table needs to render one frame."""

    rows: tuple[TableRow, ...]
    is_loading: bool
    page_number: int
    page_size: int
    total_count: int
    sort: SortState
    filters: FilterState

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def message(self) -> str | None:
        """Placeholder text shown instead of rows, if any."""
        if self.is_empty and not self.is_loading:
            return NO_RECORDS_MESSAGE
        return None

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self.page_size)

    @property
    def range_text(self) -> str:
        return page_range_text(
            self.page_number, self.page_size, self.total_count, len(self.rows)
        )


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages, never less than 1 so the pager always has a page."""
    return max(1, math.ceil(total_count / page_size))


def page_range_text(
    page_number: int, page_size: int, total_count: int, shown: int
) -> str:
    """e.g. '51-100 of 5000'."""
    if shown == 0:
        return f"0-0 of {total_count}"
    start = (page_number - 1) * page_size + 1
    return f"{start}-{start + shown - 1} of {total_count}"


def summary_text(shown: int, total_count: int, page_number: int) -> str:
    return f"Displaying {shown} of {total_count} projects • Page {page_number}"


def toggle_sort(current: SortState, field: str) -> SortState:
    """Next sort state after clicking a column header.

    Clicking the active ascending column flips it to descending; any other
    click sorts that column ascending.
    """
    if current.field == field and current.direction == SortDirection.ASC:
        return SortState(field=field, direction=SortDirection.DESC)
    return SortState(field=field, direction=SortDirection.ASC)


def build_list_view(
    records: Sequence[GeoRecord],
    *,
    is_loading: bool,
    page_number: int,
    page_size: int,
    total_count: int,
    sort: SortState,
    filters: FilterState,
    selected_id: str | None,
) -> ListViewModel:
    return ListViewModel(
        rows=tuple(TableRow(record=r, is_selected=r.id == selected_id) for r in records),
        is_loading=is_loading,
        page_number=page_number,
        page_size=page_size,
        total_count=total_count,
        sort=sort,
        filters=filters,
    )
