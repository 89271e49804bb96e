"""Domain layer - core seat layout logic."""

from .entities import (
    AcConfig,
    ExclusionZone,
    FurnitureItem,
    VenueConfig,
    Wing,
    default_venue,
)
from .services import (
    ExclusionEvaluator,
    SeatLayoutCalculator,
    calculate_layout,
    distribute_ac_units,
    resolve_wing_rect,
    total_bounds,
    venue_bounds,
)
from .value_objects import (
    AcPlacement,
    BlockInfo,
    ChairPosition,
    FurnitureType,
    LayoutResult,
    MainHallRegion,
    Rect,
    Region,
    Wall,
    WingInfo,
    WingRegion,
    WingSide,
)

__all__ = [
    "AcConfig",
    "AcPlacement",
    "BlockInfo",
    "ChairPosition",
    "ExclusionEvaluator",
    "ExclusionZone",
    "FurnitureItem",
    "FurnitureType",
    "LayoutResult",
    "MainHallRegion",
    "Rect",
    "Region",
    "SeatLayoutCalculator",
    "VenueConfig",
    "Wall",
    "Wing",
    "WingInfo",
    "WingRegion",
    "WingSide",
    "calculate_layout",
    "default_venue",
    "distribute_ac_units",
    "resolve_wing_rect",
    "total_bounds",
    "venue_bounds",
]
