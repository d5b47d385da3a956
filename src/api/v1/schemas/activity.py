"""Pydantic schemas for Activity API."""

from datetime import date as Date

from pydantic import BaseModel, ConfigDict, Field


class ActivityCreate(BaseModel):
    """Schema for creating or replacing an Activity.

    Field rules (non-blank name, valid duration, date not in the future)
    are enforced by the domain so that the error messages match.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Running",
                "time": "45m",
                "date": "2026-01-28",
            }
        },
    )

    name: str | None = None
    time: str | None = Field(None, description="Duration such as 30m, 2h, 1d or 1w")
    date: Date | None = None


class ActivityResponse(BaseModel):
    """Schema for Activity response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    minutes: int
    date: Date


class ActivityListResponse(BaseModel):
    """Schema for list of Activities."""

    data: list[ActivityResponse]


class ActivityDetailResponse(BaseModel):
    """Schema for single Activity."""

    data: ActivityResponse
