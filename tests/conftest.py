"""Shared test fixtures."""

from datetime import date
from typing import Callable

import pytest

from geo_dashboard.core.generator import generate_mock_records
from geo_dashboard.core.store import RecordStore
from geo_dashboard.schemas import GeoRecord
from geo_dashboard.services.query_state import QueryStateManager
from geo_dashboard.services.selection import SelectionCoordinator

from .factories import RecordingQuery, create_record, create_records

REFERENCE_DATE = date(2025, 1, 31)


@pytest.fixture
def record_factory() -> Callable[..., GeoRecord]:
    """Fixture that returns the record factory function."""
    return create_record


@pytest.fixture
def mock_records() -> list[GeoRecord]:
    """5000 reproducible generated records."""
    return generate_mock_records(5000, seed=42, today=REFERENCE_DATE)


@pytest.fixture
def mock_store(mock_records) -> RecordStore:
    return RecordStore(mock_records)


@pytest.fixture
def small_store() -> RecordStore:
    """120 hand-made records: pages of 50 hold 50, 50 and 20."""
    return RecordStore(create_records(120))


@pytest.fixture
def query_state() -> QueryStateManager:
    return QueryStateManager()


@pytest.fixture
def selection() -> SelectionCoordinator:
    return SelectionCoordinator()


@pytest.fixture
def recording_query(small_store) -> RecordingQuery:
    return RecordingQuery(small_store)
