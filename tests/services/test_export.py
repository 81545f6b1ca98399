"""Unit tests for the Excel page export."""

import os
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from geo_dashboard.schemas import FilterState, QueryParams, SortState
from geo_dashboard.services.export import (
    RECORD_COLUMNS,
    export_page_to_excel,
    records_to_dataframe,
)

from ..factories import create_page_result, create_record, create_records


@pytest.fixture
def sample_page():
    params = QueryParams(
        page_number=1,
        page_size=25,
        sort=SortState(field="budget", direction="desc"),
        filters=FilterState(status="Active"),
    )
    records = create_records(3) + [create_record(4, budget=None, description=None)]
    return params, create_page_result(records, page_size=25, total_count=4)


def test_records_to_dataframe_has_all_columns() -> None:
    df = records_to_dataframe(create_records(2))
    assert list(df.columns) == RECORD_COLUMNS
    assert df.loc[0, "status"] == "Active"
    assert df.loc[1, "last_updated"] == "2025-01-01"


def test_export_creates_file(sample_page) -> None:
    params, result = sample_page
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "page.xlsx"
        returned = export_page_to_excel(params, result, str(output_path))

        assert returned == str(output_path)
        assert os.path.exists(output_path)

        xl = pd.ExcelFile(output_path)
        assert xl.sheet_names == ["Query", "Records"]

        records = xl.parse("Records")
        assert list(records.columns) == RECORD_COLUMNS
        assert len(records) == 4
        assert pd.isna(records.loc[3, "budget"])

        query = xl.parse("Query")
        values = dict(zip(query["Parameter"], query["Value"]))
        assert values["Sort Field"] == "budget"
        assert values["Status Filter"] == "Active"
        assert values["Total Matching"] == 4
        assert values["Status: Active"] == 4
        xl.close()


def test_export_empty_page() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "empty.xlsx"
        export_page_to_excel(QueryParams(), create_page_result([]), str(output_path))

        records = pd.read_excel(output_path, sheet_name="Records")
        assert records.empty
