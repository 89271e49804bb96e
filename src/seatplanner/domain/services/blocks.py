"""Partitioning of the main hall into seating blocks.

Center aisles split the seatable width into equal blocks; side aisles are
carved off the left and right walls first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import Rect

if TYPE_CHECKING:
    from ..entities import VenueConfig

__all__ = ["Block", "partition_blocks", "seatable_width"]


@dataclass(frozen=True)
class Block:
    """A seating block of the main hall.

    Attributes:
        index: Position from the left, starting at 0.
        rect: Block area in global coordinates.
    """

    index: int
    rect: Rect


def seatable_width(venue: VenueConfig) -> float:
    """Width left for chairs once every aisle is removed.

    Can be zero or negative when the aisles are wider than the hall.
    """
    aisle_count = max(0, venue.aisle_count)
    side_aisles = venue.left_aisle_cm + venue.right_aisle_cm
    return venue.width_cm - side_aisles - aisle_count * venue.aisle_width_cm


def partition_blocks(venue: VenueConfig) -> list[Block]:
    """Split the main hall into blocks separated by center aisles.

    Args:
        venue: Venue to partition.

    Returns:
        One block per gap between aisles, left to right. Empty when the
        aisles leave no seatable width.
    """
    available = seatable_width(venue)
    if available <= 0:
        return []

    aisle_count = max(0, venue.aisle_count)
    num_blocks = aisle_count + 1
    block_width = available / num_blocks

    return [
        Block(
            index=i,
            rect=Rect(
                venue.left_aisle_cm + i * (block_width + venue.aisle_width_cm),
                venue.top_aisle_cm,
                block_width,
                venue.seating_height_cm,
            ),
        )
        for i in range(num_blocks)
    ]
