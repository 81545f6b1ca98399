"""Record schemas: the geo-located project entity and its status set."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProjectStatus(str, Enum):
    """Closed set of project statuses."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    PENDING = "Pending"
    ON_HOLD = "On Hold"


class GeoRecord(BaseModel):
    """A single geographically located project. Immutable once created."""

    id: str = Field(..., min_length=1, description="Unique, stable identifier")
    project_name: str = Field(..., description="Display name")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude (degrees)")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude (degrees)")
    status: ProjectStatus = Field(..., description="Current project status")
    last_updated: date = Field(..., description="Date of the last update")
    description: str | None = Field(None, description="Free-form description")
    budget: float | None = Field(None, ge=0, description="Budget (USD)")
    progress: int | None = Field(None, ge=0, le=100, description="Progress (%)")

    model_config = ConfigDict(frozen=True)
