"""Pydantic response schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class RectSchema(BaseModel):
    """Rectangle in centimeters, top-left origin."""

    x_cm: float
    y_cm: float
    width_cm: float
    height_cm: float


class RegionSchema(BaseModel):
    """Owner of a chair slot: a main-hall block or a wing."""

    kind: Literal["main", "wing"] = Field(..., description="Region kind")
    block_index: int | None = Field(default=None, description="Block index for main-hall slots")
    wing_id: str | None = Field(default=None, description="Wing id for wing slots")


class ChairSchema(BaseModel):
    """A single chair slot."""

    row: int
    col: int
    region: RegionSchema
    x_cm: float
    y_cm: float
    excluded: bool = Field(..., description="True if the slot is blocked")


class BlockSchema(BaseModel):
    """A main-hall block between aisles."""

    block_index: int
    cols: int
    x_start_cm: float
    width_cm: float


class WingSchema(BaseModel):
    """A seated wing."""

    wing_id: str
    side: str
    rect: RectSchema
    rows: int
    cols: int


class AcUnitSchema(BaseModel):
    """An AC unit placed on a wall."""

    wall: str
    index: int
    rect: RectSchema


class VenueInfoSchema(BaseModel):
    """Identity and size of a venue."""

    id: str
    name: str
    width_m: float
    length_m: float


class LayoutSummarySchema(BaseModel):
    """Seat counts and area metrics of a venue."""

    total_chairs: int = Field(..., description="Usable chairs")
    total_rows: int = Field(..., description="Rows in the main hall")
    excluded_slots: int = Field(..., description="Slots blocked by altar, zones or furniture")
    capacity: int = Field(..., description="Grid slots before exclusions")
    total_area_m2: float
    usable_area_m2: float
    utilization_percent: float


class VenueLayoutSchema(BaseModel):
    """Layout of one venue."""

    venue: VenueInfoSchema
    summary: LayoutSummarySchema
    blocks: list[BlockSchema]
    wings: list[WingSchema]
    bounds: RectSchema = Field(..., description="Bounding box of hall and wings")
    ac_units: list[AcUnitSchema]
    chairs: list[ChairSchema] | None = Field(
        default=None, description="Chair slots, when requested"
    )


class ProjectLayoutSchema(BaseModel):
    """Response for layout calculation."""

    project_name: str
    total_chairs: int = Field(..., description="Usable chairs across every venue")
    venues: list[VenueLayoutSchema]


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
