"""Seat layout calculation for a complete venue.

This module composes the main-hall blocks and the wings of a venue into a
single LayoutResult with seat counts and area metrics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import (
    CM_PER_M,
    BlockInfo,
    ChairPosition,
    LayoutResult,
    MainHallRegion,
    Rect,
    WingInfo,
    WingRegion,
)
from .blocks import partition_blocks, seatable_width
from .exclusion import ExclusionEvaluator
from .geometry import resolve_wing_rect
from .grid import generate_grid, grid_dimensions

if TYPE_CHECKING:
    from ..entities import VenueConfig

__all__ = ["SeatLayoutCalculator", "calculate_layout"]

logger = logging.getLogger(__name__)


class SeatLayoutCalculator:
    """Calculates the seat layout of a venue.

    The calculation is a pure function of the VenueConfig passed in; nothing
    is cached between calls.
    """

    def calculate(self, venue: VenueConfig) -> LayoutResult:
        """Generate every chair slot of a venue and its area metrics.

        Args:
            venue: The venue to seat.

        Returns:
            LayoutResult for the venue. When the aisles leave no seatable
            width the result is empty, including wings.
        """
        total_area_m2 = venue.main_hall.area_m2 + sum(
            resolve_wing_rect(wing, venue.width_cm, venue.length_cm).area_m2
            for wing in venue.wings
        )
        seating_rect = Rect(
            0.0, venue.top_aisle_cm, venue.width_cm, venue.seating_height_cm
        )
        main_rows, _ = grid_dimensions(
            seating_rect, venue.cell_width_cm, venue.cell_depth_cm
        )

        blocks = partition_blocks(venue)
        if not blocks:
            logger.debug(
                f"Venue '{venue.id}': aisles leave no seatable width, "
                "returning empty layout"
            )
            return LayoutResult(
                chairs=(),
                total_chairs=0,
                total_rows=main_rows,
                blocks_info=(),
                wings_info=(),
                usable_area_m2=0.0,
                total_area_m2=total_area_m2,
                utilization_percent=0.0,
            )

        evaluator = ExclusionEvaluator.from_venue(venue)
        chairs: list[ChairPosition] = []
        blocks_info: list[BlockInfo] = []

        for block in blocks:
            grid = generate_grid(
                block.rect,
                venue.chair_width_cm,
                venue.chair_depth_cm,
                venue.side_gap_cm,
                venue.front_gap_cm,
                MainHallRegion(block.index),
                evaluator,
            )
            blocks_info.append(
                BlockInfo(
                    block_index=block.index,
                    cols=grid.cols,
                    x_start_cm=block.rect.x,
                    width_cm=block.rect.width,
                )
            )
            chairs.extend(grid.chairs)

        wings_info: list[WingInfo] = []
        wing_area_m2 = 0.0
        for wing in venue.wings:
            rect = resolve_wing_rect(wing, venue.width_cm, venue.length_cm)
            grid = generate_grid(
                rect,
                venue.chair_width_cm,
                venue.chair_depth_cm,
                venue.side_gap_cm,
                venue.front_gap_cm,
                WingRegion(wing.id),
                evaluator,
            )
            wings_info.append(
                WingInfo(
                    wing_id=wing.id,
                    side=wing.side,
                    rect=rect,
                    rows=grid.rows,
                    cols=grid.cols,
                )
            )
            wing_area_m2 += rect.area_m2
            chairs.extend(grid.chairs)

        total_chairs = sum(1 for chair in chairs if not chair.excluded)
        seating_height = max(0.0, venue.seating_height_cm)
        usable_area_m2 = (
            seatable_width(venue) / CM_PER_M
        ) * (seating_height / CM_PER_M) + wing_area_m2

        chair_area_m2 = total_chairs * (
            (venue.chair_width_cm / CM_PER_M) * (venue.chair_depth_cm / CM_PER_M)
        )
        utilization = (
            (chair_area_m2 / total_area_m2) * 100 if total_area_m2 > 0 else 0.0
        )

        logger.debug(
            f"Venue '{venue.id}': {len(blocks)} blocks, {len(wings_info)} wings, "
            f"{total_chairs}/{len(chairs)} usable slots"
        )

        return LayoutResult(
            chairs=tuple(chairs),
            total_chairs=total_chairs,
            total_rows=main_rows,
            blocks_info=tuple(blocks_info),
            wings_info=tuple(wings_info),
            usable_area_m2=usable_area_m2,
            total_area_m2=total_area_m2,
            utilization_percent=utilization,
        )


def calculate_layout(venue: VenueConfig) -> LayoutResult:
    """Convenience wrapper around SeatLayoutCalculator.calculate()."""
    return SeatLayoutCalculator().calculate(venue)
