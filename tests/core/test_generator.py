"""Unit tests for mock record generation."""

from datetime import date, timedelta

from geo_dashboard.core.generator import generate_mock_records, make_record_id
from geo_dashboard.schemas.defaults import LAST_UPDATED_WINDOW_DAYS, MOCK_REGIONS


def test_generates_requested_count_with_unique_ids() -> None:
    records = generate_mock_records(500, seed=1)
    assert len(records) == 500
    assert len({r.id for r in records}) == 500
    assert records[0].id == make_record_id(0) == "IND-000001"


def test_seed_makes_output_reproducible() -> None:
    today = date(2025, 1, 31)
    first = generate_mock_records(50, seed=3, today=today)
    second = generate_mock_records(50, seed=3, today=today)
    assert first == second


def test_coordinates_inside_their_city_region() -> None:
    boxes = {city: (lat, lon) for _, city, lat, lon in MOCK_REGIONS}
    for record in generate_mock_records(300, seed=5):
        city = record.project_name.split(" ")[0]
        lat, lon = boxes[city]
        assert lat[0] <= record.latitude <= lat[1]
        assert lon[0] <= record.longitude <= lon[1]
        assert city in record.description


def test_last_updated_within_window() -> None:
    today = date(2025, 1, 31)
    for record in generate_mock_records(200, seed=9, today=today):
        assert today - timedelta(days=LAST_UPDATED_WINDOW_DAYS) < record.last_updated
        assert record.last_updated <= today
        assert 0 <= record.progress <= 100
