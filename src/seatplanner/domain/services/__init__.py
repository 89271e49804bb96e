"""Domain services for seat layout calculation.

This package provides:
- Geometry helpers (overlap, wing placement, bounds)
- Exclusion checks against altar, zones and furniture
- Grid generation for one region
- Block partitioning of the main hall
- The layout calculator that ties them together
- AC unit distribution around the hall perimeter
"""

from .ac_distribution import WALL_PRIORITY, distribute_ac_units, wall_assignment
from .blocks import Block, partition_blocks, seatable_width
from .exclusion import Blocker, ExclusionEvaluator
from .geometry import rects_overlap, resolve_wing_rect, total_bounds, venue_bounds
from .grid import GridResult, generate_grid, grid_dimensions
from .layout_calculator import SeatLayoutCalculator, calculate_layout

__all__ = [
    # Geometry
    "rects_overlap",
    "resolve_wing_rect",
    "total_bounds",
    "venue_bounds",
    # Exclusion
    "Blocker",
    "ExclusionEvaluator",
    # Grid and blocks
    "Block",
    "GridResult",
    "generate_grid",
    "grid_dimensions",
    "partition_blocks",
    "seatable_width",
    # Layout
    "SeatLayoutCalculator",
    "calculate_layout",
    # AC units
    "WALL_PRIORITY",
    "distribute_ac_units",
    "wall_assignment",
]
