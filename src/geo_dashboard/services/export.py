"""Excel export of the page currently shown in the dashboard.

Exports two sheets:
- Query: Active sort/filter/pagination parameters and totals
- Records: One row per record on the page
"""

import logging
import os
import time

import pandas as pd
import xlsxwriter

from geo_dashboard.schemas import GeoRecord, PageResult, QueryParams
from geo_dashboard.schemas.columns import ColumnNames
from geo_dashboard.services.metrics import (
    calculate_average_progress,
    calculate_status_breakdown,
    calculate_total_budget,
)

logger = logging.getLogger(__name__)

RECORD_COLUMNS = [
    ColumnNames.ID,
    ColumnNames.PROJECT_NAME,
    ColumnNames.LATITUDE,
    ColumnNames.LONGITUDE,
    ColumnNames.STATUS,
    ColumnNames.LAST_UPDATED,
    ColumnNames.DESCRIPTION,
    ColumnNames.BUDGET,
    ColumnNames.PROGRESS,
]


def records_to_dataframe(records: list[GeoRecord] | tuple[GeoRecord, ...]) -> pd.DataFrame:
    """Flatten records into a DataFrame with one column per field."""
    rows = [r.model_dump(mode="json") for r in records]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def export_page_to_excel(
    params: QueryParams, result: PageResult, output_path: str | None = None
) -> str:
    """Write the current page and its query to an Excel workbook.

    Args:
        params: Parameters the page was fetched with.
        result: The page itself.
        output_path: Target file. If None, a timestamped file is created
                     under outputs/.

    Returns:
        Path to the created Excel file.
    """
    if output_path is None:
        os.makedirs("outputs", exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        output_path = f"outputs/projects_page{result.page_number}_{timestamp}.xlsx"

    workbook = xlsxwriter.Workbook(output_path)

    header_format = workbook.add_format(
        {"bold": True, "bg_color": "#2196F3", "font_color": "white", "border": 1}
    )
    data_format = workbook.add_format({"border": 1})
    number_format = workbook.add_format({"border": 1, "num_format": "0.000000"})
    currency_format = workbook.add_format({"border": 1, "num_format": "$#,##0"})

    try:
        query_sheet = workbook.add_worksheet("Query")
        _write_query_sheet(query_sheet, params, result, header_format, data_format)

        records_sheet = workbook.add_worksheet("Records")
        _write_records_sheet(
            records_sheet,
            records_to_dataframe(result.records),
            header_format,
            data_format,
            number_format,
            currency_format,
        )
    finally:
        workbook.close()

    logger.info(f"Exported {len(result.records)} records to {output_path}")
    return output_path


def _write_query_sheet(sheet, params, result, header_format, data_format):
    sheet.set_column("A:A", 25)
    sheet.set_column("B:B", 30)

    sheet.write(0, 0, "Parameter", header_format)
    sheet.write(0, 1, "Value", header_format)

    avg_progress = calculate_average_progress(result.records)
    rows = [
        ("Page Number", params.page_number),
        ("Page Size", params.page_size),
        ("Sort Field", params.sort.field),
        ("Sort Direction", params.sort.direction.value),
        ("Name Filter", params.filters.project_name or "(none)"),
        ("Status Filter", params.filters.status),
        ("Total Matching", result.total_count),
        ("Records On Page", len(result.records)),
        ("Total Budget", calculate_total_budget(result.records)),
        (
            "Average Progress",
            f"{avg_progress:.1f}%" if avg_progress is not None else "N/A",
        ),
    ]
    for status, count in calculate_status_breakdown(result.records).items():
        rows.append((f"Status: {status}", count))

    for row, (label, value) in enumerate(rows, start=1):
        sheet.write(row, 0, label, data_format)
        sheet.write(row, 1, value, data_format)


def _write_records_sheet(
    sheet, df, header_format, data_format, number_format, currency_format
):
    for col, name in enumerate(df.columns):
        sheet.write(0, col, name, header_format)
        sheet.set_column(col, col, max(12, len(name) + 2))

    coordinate_cols = {ColumnNames.LATITUDE, ColumnNames.LONGITUDE}
    for row_idx, row in enumerate(df.astype(object).itertuples(index=False), start=1):
        for col, name in enumerate(df.columns):
            value = row[col]
            if pd.isna(value):
                sheet.write_blank(row_idx, col, None, data_format)
            elif name in coordinate_cols:
                sheet.write_number(row_idx, col, value, number_format)
            elif name == ColumnNames.BUDGET:
                sheet.write_number(row_idx, col, value, currency_format)
            else:
                sheet.write(row_idx, col, value, data_format)
