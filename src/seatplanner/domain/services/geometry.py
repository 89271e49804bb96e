"""Geometry helpers shared by the layout services.

This module resolves wing placement relative to the main hall and
aggregates the global bounds of a venue.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..value_objects import Rect, WingSide

if TYPE_CHECKING:
    from ..entities import VenueConfig, Wing

__all__ = [
    "rects_overlap",
    "resolve_wing_rect",
    "total_bounds",
    "venue_bounds",
]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Return True if two rectangles share positive area.

    Rectangles that only touch along an edge do not overlap.
    """
    return a.overlaps(b)


def resolve_wing_rect(wing: Wing, tent_width_cm: float, tent_length_cm: float) -> Rect:
    """Map a wing's edge-relative parameters to a global rectangle.

    Left and right wings extend horizontally, so their extent becomes the
    width and their length the height. Top and bottom wings swap the pair.

    Args:
        wing: The wing to place.
        tent_width_cm: Width of the main hall.
        tent_length_cm: Length (depth) of the main hall.

    Returns:
        The wing rectangle in main-hall coordinates.
    """
    extent = wing.extent_cm
    length = wing.length_cm
    offset = wing.offset_cm

    if wing.side == WingSide.LEFT:
        return Rect(-extent, offset, extent, length)
    if wing.side == WingSide.RIGHT:
        return Rect(tent_width_cm, offset, extent, length)
    if wing.side == WingSide.TOP:
        return Rect(offset, -extent, length, extent)
    return Rect(offset, tent_length_cm, length, extent)


def total_bounds(main_hall: Rect, others: Iterable[Rect] = ()) -> Rect:
    """Compute the smallest rectangle enclosing the main hall and wings.

    Only used for viewport sizing; seat placement never consults it.
    """
    rects = [main_hall, *others]
    min_x = min(r.x for r in rects)
    min_y = min(r.y for r in rects)
    max_x = max(r.right for r in rects)
    max_y = max(r.bottom for r in rects)
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)


def venue_bounds(venue: VenueConfig) -> Rect:
    """Bounding box of a venue's main hall and all of its wings."""
    wing_rects = [
        resolve_wing_rect(wing, venue.width_cm, venue.length_cm) for wing in venue.wings
    ]
    return total_bounds(venue.main_hall, wing_rects)
