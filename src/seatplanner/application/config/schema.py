"""Pydantic models for seat planner configuration files.

A configuration file describes a project of one or more venues (tents or
halls). Every model forbids unknown fields so typos surface as validation
errors instead of being silently ignored.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from seatplanner.domain.value_objects import FurnitureType, WingSide

# Supported schema versions for configuration files
# Version 1.0: Venues with aisles, altar, exclusion zones, furniture, wings and AC
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Aliases so callers can import config enums from this module
WingSideConfig = WingSide
FurnitureTypeConfig = FurnitureType


class RectConfig(BaseModel):
    """Rectangle in centimeters, top-left origin."""

    model_config = ConfigDict(extra="forbid")

    x_cm: float = Field(default=0.0, description="Left edge in cm")
    y_cm: float = Field(default=0.0, description="Top edge in cm")
    width_cm: float = Field(..., gt=0, description="Width in cm")
    height_cm: float = Field(..., gt=0, description="Height/depth in cm")


class AltarConfig(BaseModel):
    """Altar rectangle.

    Unlike zones, a zero-size altar is allowed and simply ignored by the
    layout.
    """

    model_config = ConfigDict(extra="forbid")

    x_cm: float = 0.0
    y_cm: float = 0.0
    width_cm: float = Field(default=0.0, ge=0)
    height_cm: float = Field(default=0.0, ge=0)


class ExclusionZoneConfig(RectConfig):
    """No-chair area drawn by the user."""

    id: str = Field(..., min_length=1)
    label: str = ""


class FurnitureConfig(RectConfig):
    """Furniture item blocking seating (screens, doors)."""

    id: str = Field(..., min_length=1)
    type: FurnitureTypeConfig
    label: str = ""


class WingConfig(BaseModel):
    """Seating wing attached to one side of the main hall.

    Attributes:
        id: Identifier used to tag the wing's chairs
        side: Edge of the main hall (left, right, top, bottom)
        offset_cm: Position along the edge from its top/left end
        extent_cm: Depth of the wing away from the hall
        length_cm: Size of the wing along the edge
        label: Optional display name
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    side: WingSideConfig
    offset_cm: float = 0.0
    extent_cm: float = Field(..., ge=0)
    length_cm: float = Field(..., ge=0)
    label: str = ""


class ChairConfig(BaseModel):
    """Chair footprint and spacing in centimeters."""

    model_config = ConfigDict(extra="forbid")

    width_cm: float = Field(default=45.0, gt=0, le=200.0)
    depth_cm: float = Field(default=45.0, gt=0, le=200.0)
    side_gap_cm: float = Field(default=5.0, ge=0, le=200.0)
    front_gap_cm: float = Field(default=10.0, ge=0, le=300.0)


class AisleConfig(BaseModel):
    """Center and perimeter aisles.

    Attributes:
        count: Number of center aisles running front to back (0 to 20)
        width_cm: Width of each center aisle
        left_cm: Side aisle along the left wall
        right_cm: Side aisle along the right wall
        top_cm: Cross aisle along the front wall
        bottom_cm: Cross aisle along the back wall
    """

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=1, ge=0, le=20)
    width_cm: float = Field(default=100.0, ge=0)
    left_cm: float = Field(default=0.0, ge=0)
    right_cm: float = Field(default=0.0, ge=0)
    top_cm: float = Field(default=0.0, ge=0)
    bottom_cm: float = Field(default=0.0, ge=0)


class AcConfigSchema(BaseModel):
    """AC units hung around the hall perimeter."""

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=0, ge=0, le=100)
    width_cm: float = Field(default=80.0, gt=0)
    depth_cm: float = Field(default=20.0, gt=0)


class VenueConfigSchema(BaseModel):
    """Configuration for a single venue (tent or hall).

    Attributes:
        id: Unique venue identifier (defaults to venue-<n>)
        name: Display name
        width_m: Main hall width in meters (0.5 to 500)
        length_m: Main hall length in meters (0.5 to 500)
        chair: Chair footprint and gaps
        aisles: Center and perimeter aisles
        altar: Optional altar rectangle
        exclusion_zones: No-chair rectangles
        furniture: Furniture rectangles
        wings: Seating wings outside the main hall
        ac: AC unit distribution
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    name: str = Field(..., min_length=1)
    width_m: float = Field(..., gt=0, le=500.0)
    length_m: float = Field(..., gt=0, le=500.0)
    chair: ChairConfig = Field(default_factory=ChairConfig)
    aisles: AisleConfig = Field(default_factory=AisleConfig)
    altar: AltarConfig | None = None
    exclusion_zones: list[ExclusionZoneConfig] = Field(default_factory=list)
    furniture: list[FurnitureConfig] = Field(default_factory=list)
    wings: list[WingConfig] = Field(default_factory=list, max_length=20)
    ac: AcConfigSchema = Field(default_factory=AcConfigSchema)

    @model_validator(mode="after")
    def validate_unique_item_ids(self) -> "VenueConfigSchema":
        """Ensure zone, furniture and wing ids are unique within the venue.

        Wing ids tag chair slots, so a clash would merge two wings' seats.
        """
        for collection in ("exclusion_zones", "furniture", "wings"):
            seen: set[str] = set()
            for i, item in enumerate(getattr(self, collection)):
                if item.id in seen:
                    raise ValueError(
                        f"Duplicate id '{item.id}' at {collection}[{i}]"
                    )
                seen.add(item.id)
        return self


class SeatPlanConfiguration(BaseModel):
    """Root configuration model for seat planner projects.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        project_name: Name used for exported file names and report headers
        venues: One or more venues (1 to 50)
        units: Unit system marker; only "metric" is supported
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    project_name: str = Field(default="seating", min_length=1)
    units: Literal["metric"] = "metric"
    venues: list[VenueConfigSchema] = Field(..., min_length=1, max_length=50)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject schema versions this release cannot read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def resolve_venue_ids(self) -> "SeatPlanConfiguration":
        """Ensure venue ids are unique and fill in missing ones.

        A venue without an id gets venue-<n> from its position, moving on
        to the next free number when an explicit id already uses it.
        """
        taken: set[str] = set()
        for venue in self.venues:
            if venue.id is None:
                continue
            if venue.id in taken:
                raise ValueError(f"Duplicate venue id '{venue.id}'")
            taken.add(venue.id)

        for index, venue in enumerate(self.venues):
            if venue.id is not None:
                continue
            number = index + 1
            while f"venue-{number}" in taken:
                number += 1
            venue.id = f"venue-{number}"
            taken.add(venue.id)
        return self
