"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    """Request for calculating the layout of a project."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    include_chairs: bool = Field(
        default=True, description="Include every chair slot in the response"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")


class ExportRequest(BaseModel):
    """Request for exporting a project to a specific format."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    venue_id: str | None = Field(
        default=None, description="Only export the venue with this id"
    )
