"""Strongly typed column names for GeoRecord tables.

Defines the data contract between schemas and consumers (store, vis, export).
"""


class ColumnNames:
    """Column name constants matching GeoRecord field names."""

    ID = "id"
    PROJECT_NAME = "project_name"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    STATUS = "status"
    LAST_UPDATED = "last_updated"
    DESCRIPTION = "description"
    BUDGET = "budget"
    PROGRESS = "progress"


# Every record field can be sorted on.
SORTABLE_FIELDS = (
    ColumnNames.ID,
    ColumnNames.PROJECT_NAME,
    ColumnNames.LATITUDE,
    ColumnNames.LONGITUDE,
    ColumnNames.STATUS,
    ColumnNames.LAST_UPDATED,
    ColumnNames.DESCRIPTION,
    ColumnNames.BUDGET,
    ColumnNames.PROGRESS,
)

# Columns shown by the list view, in order, with their header labels.
TABLE_COLUMNS = {
    ColumnNames.PROJECT_NAME: "Project Name",
    ColumnNames.LATITUDE: "Latitude",
    ColumnNames.LONGITUDE: "Longitude",
    ColumnNames.STATUS: "Status",
    ColumnNames.LAST_UPDATED: "Last Updated",
}
