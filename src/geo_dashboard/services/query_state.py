"""Query state manager - single source of truth for the displayed page.

Owns pagination, sort and filter parameters together with the last page
result, the loading flag and the error message. Parameters change only
through the setters below; the page result changes only through `reload`.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace

import solara
from pydantic import ValidationError

from geo_dashboard.exceptions import InvalidQueryParameterError
from geo_dashboard.schemas import (
    DashboardConfig,
    FilterState,
    GeoRecord,
    PageResult,
    QueryParams,
    SortDirection,
    SortState,
)
from geo_dashboard.schemas.defaults import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS
from geo_dashboard.services.api import RecordQuery

logger = logging.getLogger(__name__)

ParamsListener = Callable[[QueryParams], None]


@dataclass(frozen=True)
class QueryState:
    """Snapshot of everything the views read."""

    params: QueryParams = field(default_factory=QueryParams)
    result: PageResult = field(default_factory=PageResult)
    is_loading: bool = False
    error: str | None = None

    @property
    def records(self) -> tuple[GeoRecord, ...]:
        return self.result.records

    @property
    def total_count(self) -> int:
        return self.result.total_count


def nearest_page_size(size: int, options: tuple[int, ...]) -> int:
    """Closest supported page size; ties go to the smaller size."""
    return min(options, key=lambda option: (abs(option - size), option))


def _as_int(name: str, value) -> int:
    """Integer page number or size; strings of digits are accepted."""
    if isinstance(value, bool):
        raise InvalidQueryParameterError(f"Invalid {name} {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidQueryParameterError(f"Invalid {name} {value!r}") from e
    if isinstance(value, float) and number != value:
        raise InvalidQueryParameterError(f"Invalid {name} {value!r}")
    return number


class QueryStateManager:
    """Owns query parameters and the async fetch of the matching page."""

    def __init__(
        self,
        page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS,
        initial_params: QueryParams | None = None,
    ) -> None:
        self.page_size_options = tuple(sorted(page_size_options))
        params = initial_params or QueryParams(
            page_size=nearest_page_size(DEFAULT_PAGE_SIZE, self.page_size_options)
        )
        if params.page_size not in self.page_size_options:
            raise InvalidQueryParameterError(
                f"Initial page size {params.page_size} is not one of {list(self.page_size_options)}"
            )

        self.state = solara.reactive(
            QueryState(params=params, result=PageResult(page_size=params.page_size))
        )

        # Incremented per reload; only the latest generation may write results
        self._generation = 0
        self._listeners: list[ParamsListener] = []

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "QueryStateManager":
        return cls(
            page_size_options=config.page_size_options,
            initial_params=QueryParams(
                page_size=config.default_page_size,
                sort=SortState(
                    field=config.default_sort_field,
                    direction=config.default_sort_direction,
                ),
            ),
        )

    @property
    def params(self) -> QueryParams:
        return self.state.value.params

    def update(self, **changes) -> None:
        """Replace several state fields in one reactive assignment."""
        self.state.value = replace(self.state.value, **changes)

    # --- Change notification ---

    def subscribe(self, listener: ParamsListener) -> Callable[[], None]:
        """Call `listener(params)` after every effective parameter change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_params(self, **changes) -> None:
        old = self.state.value.params
        new = old.model_copy(update=changes)
        if new == old:
            return
        self.update(params=new)
        for listener in list(self._listeners):
            listener(new)

    # --- Setters ---

    def set_page(self, page_number: int) -> None:
        """Go to a page. Values below 1 are raised to 1.

        Raises:
            InvalidQueryParameterError: For a non-integer page number.
        """
        self._set_params(page_number=max(1, _as_int("page number", page_number)))

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and return to page 1.

        Unsupported sizes are clamped to the nearest supported one.

        Raises:
            InvalidQueryParameterError: For a non-integer page size.
        """
        requested = _as_int("page size", page_size)
        size = nearest_page_size(requested, self.page_size_options)
        if size != requested:
            logger.warning(
                f"Unsupported page size {page_size}; using {size} "
                f"(options: {list(self.page_size_options)})"
            )
        self._set_params(page_size=size, page_number=1)

    def set_sort(self, field: str, direction: SortDirection | str) -> None:
        """Change the sort and return to page 1.

        Raises:
            InvalidQueryParameterError: For an unsortable field or unknown direction.
        """
        try:
            sort = SortState(field=field, direction=direction)
        except ValidationError as e:
            raise InvalidQueryParameterError(
                f"Invalid sort ({field!r}, {direction!r})"
            ) from e
        self._set_params(sort=sort, page_number=1)

    def set_filter(self, filters: FilterState | Mapping) -> None:
        """Replace the filter state and return to page 1.

        Raises:
            InvalidQueryParameterError: For an unknown status value.
        """
        if not isinstance(filters, FilterState):
            try:
                filters = FilterState(**filters)
            except ValidationError as e:
                raise InvalidQueryParameterError(f"Invalid filter {filters!r}") from e
        self._set_params(filters=filters, page_number=1)

    # --- Fetch ---

    async def reload(self, query_fn: RecordQuery) -> bool:
        """Fetch the page for the current parameters.

        Only the most recently initiated reload may apply its outcome;
        earlier ones that resolve later are discarded. Failures keep the
        previous page and surface as `state.error`.

        Returns:
            True if this call's result was applied.
        """
        self._generation += 1
        generation = self._generation
        params = self.state.value.params

        logger.debug(f"Reload #{generation} started for {params}")
        self.update(is_loading=True, error=None)

        try:
            result = await query_fn(
                params.page_number,
                params.page_size,
                params.sort.field,
                params.sort.direction,
                params.filters,
            )
        except asyncio.CancelledError:
            if generation == self._generation:
                self.update(is_loading=False)
            raise
        except Exception as e:
            if generation != self._generation:
                logger.debug(f"Reload #{generation} failed after being superseded: {e}")
                return False
            message = str(e) or "Failed to load data"
            logger.error(f"Reload #{generation} failed: {message}")
            self.update(is_loading=False, error=message)
            return False

        if generation != self._generation:
            logger.debug(
                f"Discarding stale reload #{generation} (latest is #{self._generation})"
            )
            return False

        self.update(result=result, is_loading=False)
        logger.debug(
            f"Reload #{generation} applied: {len(result.records)} of {result.total_count}"
        )
        return True
