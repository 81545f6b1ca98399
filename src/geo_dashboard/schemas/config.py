"""Configuration schema for the dashboard."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from geo_dashboard.schemas.columns import SORTABLE_FIELDS
from geo_dashboard.schemas.defaults import (
    DEFAULT_API_LATENCY_MS,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FAILURE_RATE,
    DEFAULT_LOOKUP_LATENCY_MS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_SIZE_OPTIONS,
    DEFAULT_RECORD_COUNT,
    DEFAULT_SORT_FIELD,
)
from geo_dashboard.schemas.query import SortDirection


class DashboardConfig(BaseModel):
    """Top-level dashboard configuration.

    Timing fields are in milliseconds to match how they are usually tuned;
    use the `*_s` properties when handing them to asyncio.
    """

    title: str = Field("Geo Data Dashboard", description="Browser title")

    # --- Mock data source ---
    record_count: int = Field(DEFAULT_RECORD_COUNT, ge=0)
    seed: int | None = Field(None, description="Seed for mock data (None = random)")
    api_latency_ms: int = Field(DEFAULT_API_LATENCY_MS, ge=0)
    lookup_latency_ms: int = Field(DEFAULT_LOOKUP_LATENCY_MS, ge=0)
    failure_rate: float = Field(
        DEFAULT_FAILURE_RATE,
        ge=0,
        le=1,
        description="Probability that a simulated query fails",
    )

    # --- Query defaults ---
    page_size_options: tuple[int, ...] = Field(DEFAULT_PAGE_SIZE_OPTIONS)
    default_page_size: int = Field(DEFAULT_PAGE_SIZE, gt=0)
    default_sort_field: str = Field(DEFAULT_SORT_FIELD)
    default_sort_direction: SortDirection = Field(SortDirection.ASC)

    # --- Orchestration ---
    debounce_ms: int = Field(DEFAULT_DEBOUNCE_MS, ge=0)
    clear_hidden_selection: bool = Field(
        False,
        description="Clear the selection when a reload drops the selected record",
    )

    # --- Logging ---
    log_level: str = Field("INFO")
    log_file: str | None = Field(None, description="Optional log file path")

    model_config = ConfigDict(frozen=True)

    @field_validator("page_size_options")
    @classmethod
    def _check_options(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(v <= 0 for v in value):
            raise ValueError("page sizes must be positive")
        return tuple(sorted(set(value)))

    @field_validator("default_sort_field")
    @classmethod
    def _check_sort_field(cls, value: str) -> str:
        if value not in SORTABLE_FIELDS:
            raise ValueError(f"'{value}' is not a sortable field")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @model_validator(mode="after")
    def _check_default_page_size(self) -> "DashboardConfig":
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of "
                f"{list(self.page_size_options)}"
            )
        return self

    @property
    def debounce_s(self) -> float:
        return self.debounce_ms / 1000.0

    @property
    def api_latency_s(self) -> float:
        return self.api_latency_ms / 1000.0

    @property
    def lookup_latency_s(self) -> float:
        return self.lookup_latency_ms / 1000.0
