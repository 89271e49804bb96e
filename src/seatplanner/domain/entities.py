"""Domain entities describing a venue to be seated."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import CM_PER_M, FurnitureType, Rect, WingSide


@dataclass(frozen=True)
class ExclusionZone:
    """User-drawn rectangle where no chair may be placed."""

    id: str
    rect: Rect
    label: str = ""


@dataclass(frozen=True)
class FurnitureItem:
    """Fixed furniture (screens, doors) that blocks seating."""

    id: str
    furniture_type: FurnitureType
    rect: Rect
    label: str = ""


@dataclass(frozen=True)
class Wing:
    """Seating extension attached to one edge of the main hall.

    Attributes:
        id: Identifier used to tag the wing's chairs.
        side: Edge of the main hall the wing is attached to.
        offset_cm: Position along that edge, measured from its top/left end.
        extent_cm: How far the wing reaches outward from the hall.
        length_cm: Size of the wing along the edge.
        label: Optional display name.
    """

    id: str
    side: WingSide
    offset_cm: float
    extent_cm: float
    length_cm: float
    label: str = ""


@dataclass(frozen=True)
class AcConfig:
    """Air conditioning units hung around the main hall perimeter."""

    count: int = 0
    width_cm: float = 80.0
    depth_cm: float = 20.0


@dataclass(frozen=True)
class VenueConfig:
    """Immutable description of one venue (tent or hall).

    The main hall spans (0, 0) to (width_cm, length_cm). Chair footprint,
    gaps and aisles are in centimeters; the hall itself is in meters.
    """

    id: str
    name: str
    width_m: float
    length_m: float
    chair_width_cm: float = 45.0
    chair_depth_cm: float = 45.0
    side_gap_cm: float = 5.0
    front_gap_cm: float = 10.0
    aisle_count: int = 1
    aisle_width_cm: float = 100.0
    left_aisle_cm: float = 0.0
    right_aisle_cm: float = 0.0
    top_aisle_cm: float = 0.0
    bottom_aisle_cm: float = 0.0
    altar: Rect | None = None
    exclusion_zones: tuple[ExclusionZone, ...] = ()
    furniture: tuple[FurnitureItem, ...] = ()
    wings: tuple[Wing, ...] = ()
    ac: AcConfig = field(default_factory=AcConfig)

    @property
    def width_cm(self) -> float:
        return self.width_m * CM_PER_M

    @property
    def length_cm(self) -> float:
        return self.length_m * CM_PER_M

    @property
    def cell_width_cm(self) -> float:
        """Horizontal pitch of one chair column."""
        return self.chair_width_cm + self.side_gap_cm

    @property
    def cell_depth_cm(self) -> float:
        """Vertical pitch of one chair row."""
        return self.chair_depth_cm + self.front_gap_cm

    @property
    def main_hall(self) -> Rect:
        return Rect(0.0, 0.0, self.width_cm, self.length_cm)

    @property
    def seating_height_cm(self) -> float:
        """Main-hall height left for rows once front/back aisles are removed."""
        return self.length_cm - self.top_aisle_cm - self.bottom_aisle_cm


def default_venue(venue_id: str = "tent-1", name: str = "Tent 1") -> VenueConfig:
    """Build the starter venue offered to new projects.

    A 10 m x 8 m tent with one center aisle and an altar at the front.
    """
    return VenueConfig(
        id=venue_id,
        name=name,
        width_m=10.0,
        length_m=8.0,
        chair_width_cm=45.0,
        chair_depth_cm=45.0,
        side_gap_cm=5.0,
        front_gap_cm=10.0,
        aisle_count=1,
        aisle_width_cm=100.0,
        altar=Rect(250.0, 0.0, 500.0, 150.0),
    )
