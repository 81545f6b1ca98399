"""Query schemas: parameters sent to the record source and the page it returns."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from geo_dashboard.schemas.columns import SORTABLE_FIELDS
from geo_dashboard.schemas.defaults import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    STATUS_ALL,
)
from geo_dashboard.schemas.records import GeoRecord, ProjectStatus


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortState(BaseModel):
    """Active sort key and direction."""

    field: str = Field(DEFAULT_SORT_FIELD, description="GeoRecord field to sort by")
    direction: SortDirection = Field(SortDirection.ASC)

    model_config = ConfigDict(frozen=True)

    @field_validator("field")
    @classmethod
    def _check_field(cls, value: str) -> str:
        if value not in SORTABLE_FIELDS:
            raise ValueError(f"'{value}' is not a sortable field")
        return value


class FilterState(BaseModel):
    """Filter predicate state.

    - project_name: case-insensitive substring ("" means no name filtering)
    - status: exact status value, or "All" for no status filtering
    """

    project_name: str = Field("", description="Name substring filter")
    status: str = Field(STATUS_ALL, description="Status filter or 'All'")

    model_config = ConfigDict(frozen=True)

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: str) -> str:
        allowed = {STATUS_ALL} | {s.value for s in ProjectStatus}
        if value not in allowed:
            raise ValueError(f"Unknown status filter '{value}'")
        return value

    @property
    def is_active(self) -> bool:
        return bool(self.project_name) or self.status != STATUS_ALL


class QueryParams(BaseModel):
    """Everything that determines which page of which view is displayed."""

    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, gt=0)
    sort: SortState = Field(default_factory=SortState)
    filters: FilterState = Field(default_factory=FilterState)

    model_config = ConfigDict(frozen=True)


def expected_page_length(page_number: int, page_size: int, total_count: int) -> int:
    """Number of records a page must hold for the given totals."""
    return min(page_size, max(0, total_count - (page_number - 1) * page_size))


class PageResult(BaseModel):
    """One page of sorted/filtered records plus the total matching count."""

    records: tuple[GeoRecord, ...] = Field(default_factory=tuple)
    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, gt=0)
    total_count: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_length(self) -> "PageResult":
        expected = expected_page_length(
            self.page_number, self.page_size, self.total_count
        )
        if len(self.records) != expected:
            raise ValueError(
                f"Page {self.page_number} (size {self.page_size}, total "
                f"{self.total_count}) must hold {expected} records, got {len(self.records)}"
            )
        return self
