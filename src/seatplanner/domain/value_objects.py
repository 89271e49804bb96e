"""Value objects for the seat layout domain.

All geometry is expressed in centimeters with a top-left origin (x grows to
the right, y grows toward the back of the venue). Areas reported to users are
in square meters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

CM_PER_M = 100.0


class WingSide(str, Enum):
    """Edge of the main hall a wing is attached to."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Wall(str, Enum):
    """Walls of the main hall, used for AC unit placement.

    Declaration order is the priority order for distributing leftover units.
    """

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class FurnitureType(str, Enum):
    """Kinds of furniture that block seating."""

    TV = "tv"
    DOOR = "door"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in centimeters.

    Unlike the config schema, a Rect performs no validation: negative
    coordinates are normal for wings, and degenerate sizes simply never
    hold any chairs.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal size.
        height: Vertical size.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def has_area(self) -> bool:
        """True if both dimensions are positive."""
        return self.width > 0 and self.height > 0

    @property
    def area_m2(self) -> float:
        """Area in square meters, zero for degenerate rectangles."""
        if not self.has_area:
            return 0.0
        return (self.width / CM_PER_M) * (self.height / CM_PER_M)

    def overlaps(self, other: Rect) -> bool:
        """Check for positive-area overlap with another rectangle.

        Edge contact is not overlap.
        """
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class MainHallRegion:
    """Chair slot owned by a block of the main hall."""

    block_index: int


@dataclass(frozen=True)
class WingRegion:
    """Chair slot owned by a wing."""

    wing_id: str


Region = Union[MainHallRegion, WingRegion]


@dataclass(frozen=True)
class ChairPosition:
    """A single chair slot in global coordinates.

    Attributes:
        row: Row index within the owning region, from the front.
        col: Column index within the owning region, from the left.
        region: Main-hall block or wing that owns the slot.
        x_cm: Left edge of the chair.
        y_cm: Top edge of the chair.
        excluded: True if the slot overlaps a blocker and cannot be used.
    """

    row: int
    col: int
    region: Region
    x_cm: float
    y_cm: float
    excluded: bool = False

    @property
    def in_wing(self) -> bool:
        return isinstance(self.region, WingRegion)


@dataclass(frozen=True)
class BlockInfo:
    """Metadata for one main-hall block between aisles."""

    block_index: int
    cols: int
    x_start_cm: float
    width_cm: float


@dataclass(frozen=True)
class WingInfo:
    """Metadata for one seated wing."""

    wing_id: str
    side: WingSide
    rect: Rect
    rows: int
    cols: int


@dataclass(frozen=True)
class AcPlacement:
    """An AC unit placed against a wall of the main hall.

    Attributes:
        wall: Wall the unit hangs on.
        index: 1-based position along the wall.
        rect: Footprint in global coordinates.
    """

    wall: Wall
    index: int
    rect: Rect


@dataclass(frozen=True)
class LayoutResult:
    """Complete seat layout for one venue.

    Fully derived from a VenueConfig; a new one is produced on every
    calculation.

    Attributes:
        chairs: Every chair slot, excluded ones included.
        total_chairs: Number of usable (non-excluded) slots.
        total_rows: Row count of the main hall.
        blocks_info: Per-block metadata for the main hall.
        wings_info: Per-wing metadata.
        usable_area_m2: Seatable main-hall area plus wing areas.
        total_area_m2: Main-hall area plus wing areas.
        utilization_percent: Chair footprint as a percentage of total area.
    """

    chairs: tuple[ChairPosition, ...]
    total_chairs: int
    total_rows: int
    blocks_info: tuple[BlockInfo, ...]
    wings_info: tuple[WingInfo, ...]
    usable_area_m2: float
    total_area_m2: float
    utilization_percent: float

    @property
    def excluded_chairs(self) -> int:
        """Number of slots blocked by the altar, zones or furniture."""
        return len(self.chairs) - self.total_chairs

    @property
    def capacity(self) -> int:
        """Theoretical grid capacity before exclusions."""
        main = sum(block.cols for block in self.blocks_info) * self.total_rows
        return main + sum(wing.rows * wing.cols for wing in self.wings_info)

    @property
    def cols_per_block(self) -> int:
        return self.blocks_info[0].cols if self.blocks_info else 0

    def chairs_in(self, region: Region) -> list[ChairPosition]:
        """Return the chair slots owned by a region."""
        return [chair for chair in self.chairs if chair.region == region]
